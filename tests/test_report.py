from vault_naming.config import NameFormat, SimulationConfig, StorageUnits
from vault_naming.namespace import MAX_NAME
from vault_naming.report import (
    NameSpacingReport,
    SimulationReport,
    format_name,
    name_to_base32,
    name_to_hex,
)


def test_hex_names_are_zero_padded():
    assert name_to_hex(0) == "0000000000000000"
    assert name_to_hex(1 << 62) == "4000000000000000"
    assert name_to_hex(MAX_NAME) == "ffffffffffffffff"


def test_base32_names_are_truncated():
    assert name_to_base32(0) == "0000000"
    assert name_to_base32(1 << 63) == "8000000"
    assert name_to_base32(MAX_NAME) == "fvvvvvv"


def test_format_name_follows_config():
    assert format_name(255, NameFormat.HEX) == "00000000000000ff"
    assert format_name(MAX_NAME, NameFormat.BASE32) == "fvvvvvv"


def test_simulation_report_layout():
    config = SimulationConfig(total_nodes=2, total_chunks=3, group_size=1, relocations=0)
    report = SimulationReport(seed=99, config=config,
                              vaults=[(1, 2), (1 << 63, 1)], spacing_std_dev=1234)
    assert report.to_lines() == [
        "seed,99",
        "totalNodes,2",
        "totalChunks,3",
        "groupSize,1",
        "namingStrategy,bestfit",
        "spacingStrategy,xordistance",
        "relocations,0",
        "storageUnits,chunks",
        "nameFormat,hex",
        "",
        "vault name,chunks stored",
        "0000000000000001,2",
        "8000000000000000,1",
        "",
        "Standard deviation of spacings:",
        "1234",
    ]
    assert report.total_stored() == 3
    assert report.render().endswith("1234\n")


def test_megabyte_report_rows():
    config = SimulationConfig(total_nodes=1, group_size=1,
                              storage_units=StorageUnits.MEGABYTES)
    report = SimulationReport(seed=1, config=config, vaults=[(0, 1.5)])
    assert "vault name,megabytes stored" in report.to_lines()
    assert "0000000000000000,1.500000" in report.to_lines()


def test_name_spacing_report_layout():
    config = SimulationConfig(total_nodes=2, group_size=1, name_format=NameFormat.BASE32)
    report = NameSpacingReport(seed=5, config=config, names=[0, 1 << 63], spacing_std_dev=7)
    assert report.to_lines() == [
        "Seed is 5",
        "totalNodes,2",
        "totalChunks,1000000",
        "groupSize,1",
        "namingStrategy,bestfit",
        "spacingStrategy,xordistance",
        "relocations,100",
        "storageUnits,chunks",
        "nameFormat,base32",
        "",
        "Names (base32):",
        "0000000",
        "8000000",
        "",
        "Standard deviation of distances:",
        "7",
    ]
