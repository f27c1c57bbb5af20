import pytest

from vault_naming.config import NameFormat, SimulationConfig, StorageUnits
from vault_naming.errors import ConfigurationError
from vault_naming.namespace import SpacingMetric
from vault_naming.strategies import NamingStrategyKind


def test_defaults():
    config = SimulationConfig()
    assert config.total_nodes == 100
    assert config.total_chunks == 1_000_000
    assert config.group_size == 8
    assert config.relocations == 100
    assert config.naming_strategy is NamingStrategyKind.BEST_FIT
    assert config.spacing_metric is SpacingMetric.XOR_DISTANCE
    assert config.storage_units is StorageUnits.CHUNKS


def test_from_strings():
    config = SimulationConfig.from_strings(
        naming_strategy="quietesthalf", spacing_metric="linear",
        storage_units="megabytes", name_format="base32", total_nodes=10, group_size=2)
    assert config.naming_strategy is NamingStrategyKind.QUIETEST_HALF
    assert config.spacing_metric is SpacingMetric.LINEAR
    assert config.storage_units is StorageUnits.MEGABYTES
    assert config.name_format is NameFormat.BASE32


@pytest.mark.parametrize("overrides", [
    {"naming_strategy": "closest"},
    {"spacing_metric": "euclid"},
    {"storage_units": "bytes"},
    {"name_format": "base64"},
])
def test_from_strings_rejects_unknown_names(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig.from_strings(**overrides)


@pytest.mark.parametrize("overrides", [
    {"total_nodes": 0},
    {"group_size": 0},
    {"total_nodes": 4, "group_size": 5},
    {"total_chunks": -1},
    {"relocations": -1},
    {"naming_strategy": "bestfit"},
])
def test_invalid_values(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides)


def test_uniform_never_relocates():
    assert not SimulationConfig(naming_strategy=NamingStrategyKind.UNIFORM).performs_relocations
    assert SimulationConfig(naming_strategy=NamingStrategyKind.RANDOM).performs_relocations


def test_config_is_immutable():
    config = SimulationConfig()
    with pytest.raises(AttributeError):
        config.total_nodes = 5
