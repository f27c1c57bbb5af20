import pytest

from vault_naming.errors import ConfigurationError
from vault_naming.namespace import (
    MAX_NAME,
    SpacingMetric,
    average,
    get_all_spacings,
    random_name,
    standard_deviation,
)


def test_average_of_equal_values():
    assert average([5, 5, 5]) == 5


def test_average_rounds_down():
    assert average([1000, 3000, 7000]) == 3666


def test_average_near_max_does_not_overflow():
    assert average([MAX_NAME, MAX_NAME - 99, MAX_NAME - 9999]) == MAX_NAME - 3366


def test_standard_deviation_of_equal_values():
    assert standard_deviation([5, 5, 5]) == 0


def test_standard_deviation_small_values():
    assert standard_deviation([1000, 3000, 7000]) == 3055


def test_standard_deviation_near_max():
    assert standard_deviation([MAX_NAME, MAX_NAME - 99, MAX_NAME - 9999]) == 5744


def test_standard_deviation_needs_two_values():
    with pytest.raises(ValueError):
        standard_deviation([42])


def test_linear_spacing():
    assert SpacingMetric.LINEAR.spacing(10, 3) == 7
    assert SpacingMetric.LINEAR.spacing(MAX_NAME, 0) == MAX_NAME


def test_xor_spacing():
    assert SpacingMetric.XOR_DISTANCE.spacing(0b1100, 0b1010) == 0b0110
    assert SpacingMetric.XOR_DISTANCE.spacing(MAX_NAME, 0) == MAX_NAME


def test_distance_is_order_free():
    for metric in SpacingMetric:
        assert metric.distance(3, 10) == metric.distance(10, 3)
    assert SpacingMetric.LINEAR.distance(3, 10) == 7


def test_unknown_metric_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        SpacingMetric.parse("manhattan")


def test_all_spacings_tile_the_namespace(rng):
    names = sorted(random_name(rng) for _ in range(50))
    spacings = get_all_spacings(names, SpacingMetric.LINEAR)
    assert len(spacings) == len(names) + 1
    assert sum(spacings) == MAX_NAME


def test_all_spacings_boundaries():
    names = [100, 250, MAX_NAME - 5]
    spacings = get_all_spacings(names, SpacingMetric.LINEAR)
    assert spacings == [100, 150, MAX_NAME - 5 - 250, 5]


def test_all_spacings_xor_boundaries_match_linear():
    names = [0x10, 0x30]
    spacings = get_all_spacings(names, SpacingMetric.XOR_DISTANCE)
    assert spacings[0] == 0x10
    assert spacings[1] == 0x10 ^ 0x30
    assert spacings[-1] == MAX_NAME - 0x30


def test_all_spacings_single_name_gives_two_values():
    assert len(get_all_spacings([1 << 63], SpacingMetric.XOR_DISTANCE)) == 2


def test_all_spacings_rejects_empty():
    with pytest.raises(ValueError):
        get_all_spacings([], SpacingMetric.LINEAR)


def test_random_name_in_range(rng):
    for _ in range(1000):
        assert 0 <= random_name(rng) <= MAX_NAME
