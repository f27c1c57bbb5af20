#!/usr/bin/env python3
"""Simulation parameters."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ConfigurationError
from .namespace import SpacingMetric
from .strategies import NamingStrategyKind


class StorageUnits(Enum):
    """What a vault's load counts."""
    CHUNKS = "chunks"          # one per stored chunk
    MEGABYTES = "megabytes"    # random chunk sizes from the observed distribution


class NameFormat(Enum):
    """How vault names are printed in reports."""
    HEX = "hex"
    BASE32 = "base32"


def _parse_enum(enum_class, value: str, label: str):
    try:
        return enum_class(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_class)
        raise ConfigurationError(
            f"Unknown {label} {value!r} (expected one of: {choices})"
        ) from None


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration parameters for the simulation."""
    total_nodes: int = 100
    total_chunks: int = 1_000_000
    group_size: int = 8
    relocations: int = 100
    naming_strategy: NamingStrategyKind = NamingStrategyKind.BEST_FIT
    spacing_metric: SpacingMetric = SpacingMetric.XOR_DISTANCE
    storage_units: StorageUnits = StorageUnits.CHUNKS
    name_format: NameFormat = NameFormat.HEX
    random_seed: Optional[int] = None  # None seeds from the clock
    progress_interval: int = 100_000   # 0 disables progress output

    def __post_init__(self):
        if self.total_nodes < 1:
            raise ConfigurationError(f"total_nodes must be at least 1, got {self.total_nodes}")
        if self.group_size < 1:
            raise ConfigurationError(f"group_size must be at least 1, got {self.group_size}")
        if self.group_size > self.total_nodes:
            raise ConfigurationError(
                f"group_size ({self.group_size}) cannot exceed total_nodes ({self.total_nodes})"
            )
        if self.total_chunks < 0:
            raise ConfigurationError(f"total_chunks cannot be negative, got {self.total_chunks}")
        if self.relocations < 0:
            raise ConfigurationError(f"relocations cannot be negative, got {self.relocations}")
        if self.progress_interval < 0:
            raise ConfigurationError(
                f"progress_interval cannot be negative, got {self.progress_interval}"
            )
        for field_name, enum_class in (
            ("naming_strategy", NamingStrategyKind),
            ("spacing_metric", SpacingMetric),
            ("storage_units", StorageUnits),
            ("name_format", NameFormat),
        ):
            if not isinstance(getattr(self, field_name), enum_class):
                raise ConfigurationError(
                    f"{field_name} must be a {enum_class.__name__}, "
                    f"got {getattr(self, field_name)!r}"
                )

    @classmethod
    def from_strings(cls, naming_strategy: str = "bestfit", spacing_metric: str = "xordistance",
                     storage_units: str = "chunks", name_format: str = "hex",
                     **kwargs) -> "SimulationConfig":
        """Build a config from raw option values, as given on the command line."""
        return cls(
            naming_strategy=NamingStrategyKind.parse(naming_strategy),
            spacing_metric=SpacingMetric.parse(spacing_metric),
            storage_units=_parse_enum(StorageUnits, storage_units, "storage units"),
            name_format=_parse_enum(NameFormat, name_format, "name format"),
            **kwargs,
        )

    @property
    def performs_relocations(self) -> bool:
        """Uniform names are fixed by population progress, so they never relocate."""
        return self.naming_strategy is not NamingStrategyKind.UNIFORM

    def report_items(self):
        """(label, value) pairs echoed at the top of a report."""
        return [
            ("totalNodes", self.total_nodes),
            ("totalChunks", self.total_chunks),
            ("groupSize", self.group_size),
            ("namingStrategy", self.naming_strategy.value),
            ("spacingStrategy", self.spacing_metric.value),
            ("relocations", self.relocations),
            ("storageUnits", self.storage_units.value),
            ("nameFormat", self.name_format.value),
        ]
