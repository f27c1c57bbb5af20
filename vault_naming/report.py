#!/usr/bin/env python3
"""
Simulation reports.

Reports are rendered as lines of comma separated text so a run can be
compared byte for byte against another run with the same seed.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .config import NameFormat, SimulationConfig, StorageUnits


BASE32_DIGITS = "0123456789abcdefghijklmnopqrstuv"
BASE32_NAME_DIGITS = 13     # enough 5-bit digits for a 64-bit name
BASE32_DISPLAY_LENGTH = 7


def name_to_hex(name: int) -> str:
    return f"{name:016x}"


def name_to_base32(name: int) -> str:
    """Base 32 name, zero padded then truncated to its leading digits."""
    digits = []
    for _ in range(BASE32_NAME_DIGITS):
        digits.append(BASE32_DIGITS[name & 0x1F])
        name >>= 5
    return "".join(reversed(digits))[:BASE32_DISPLAY_LENGTH]


def format_name(name: int, name_format: NameFormat) -> str:
    if name_format is NameFormat.BASE32:
        return name_to_base32(name)
    return name_to_hex(name)


def format_stored(stored: Union[int, float], storage_units: StorageUnits) -> str:
    if storage_units is StorageUnits.MEGABYTES:
        return f"{stored:.6f}"
    return str(stored)


@dataclass
class SimulationReport:
    """Final load per vault and the spread of vault names."""
    seed: int
    config: SimulationConfig
    vaults: List[Tuple[int, Union[int, float]]] = field(default_factory=list)  # sorted by name
    spacing_std_dev: int = 0

    def total_stored(self) -> Union[int, float]:
        return sum(stored for _, stored in self.vaults)

    def to_lines(self) -> List[str]:
        config = self.config
        lines = [f"seed,{self.seed}"]
        lines.extend(f"{label},{value}" for label, value in config.report_items())
        lines.append("")
        lines.append(f"vault name,{config.storage_units.value} stored")
        for name, stored in self.vaults:
            lines.append(f"{format_name(name, config.name_format)},"
                         f"{format_stored(stored, config.storage_units)}")
        lines.append("")
        lines.append("Standard deviation of spacings:")
        lines.append(str(self.spacing_std_dev))
        return lines

    def render(self) -> str:
        return "\n".join(self.to_lines()) + "\n"


@dataclass
class NameSpacingReport:
    """Vault names alone, without any chunks placed."""
    seed: int
    config: SimulationConfig
    names: List[int] = field(default_factory=list)  # sorted
    spacing_std_dev: int = 0

    def to_lines(self) -> List[str]:
        name_format = self.config.name_format
        lines = [f"Seed is {self.seed}"]
        lines.extend(f"{label},{value}" for label, value in self.config.report_items())
        lines.append("")
        lines.append(f"Names ({name_format.value}):")
        lines.extend(format_name(name, name_format) for name in self.names)
        lines.append("")
        lines.append("Standard deviation of distances:")
        lines.append(str(self.spacing_std_dev))
        return lines

    def render(self) -> str:
        return "\n".join(self.to_lines()) + "\n"
