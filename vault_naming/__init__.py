"""Simulations of vault naming strategies and chunk distribution across vaults."""

from .config import NameFormat, SimulationConfig, StorageUnits
from .errors import ConfigurationError
from .namespace import (
    MAX_NAME,
    NAMESPACE_SIZE,
    SpacingMetric,
    average,
    get_all_spacings,
    standard_deviation,
)
from .simulator import VaultSimulator, run_simulation
from .strategies import NamingStrategyKind, build_naming_strategy

__version__ = "0.1.0"
