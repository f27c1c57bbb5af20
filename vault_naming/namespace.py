#!/usr/bin/env python3
"""
Identifier space utilities.

Vault names and chunk names live in a 64-bit namespace. This module holds the
spacing metrics used to measure gaps between names, the extraction of every
gap across a sorted set of names, and exact integer statistics over those
gaps. Python ints never overflow, so the mean and variance are computed
without losing precision near the top of the namespace.
"""

import math
import random
from enum import Enum
from typing import List, Sequence

from .errors import ConfigurationError


NAME_BITS = 64
NAMESPACE_SIZE = 1 << NAME_BITS
MAX_NAME = NAMESPACE_SIZE - 1


class SpacingMetric(Enum):
    """How the gap between two names is measured."""
    LINEAR = "linear"
    XOR_DISTANCE = "xordistance"

    @classmethod
    def parse(cls, value: str) -> "SpacingMetric":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(metric.value for metric in cls)
            raise ConfigurationError(
                f"Unknown spacing strategy {value!r} (expected one of: {choices})"
            ) from None

    def spacing(self, big_name: int, small_name: int) -> int:
        """Gap between two names, the caller passing the larger name first."""
        if self is SpacingMetric.LINEAR:
            return (big_name - small_name) & MAX_NAME
        return big_name ^ small_name

    def distance(self, name_a: int, name_b: int) -> int:
        """Gap between two names in either order."""
        if name_a >= name_b:
            return self.spacing(name_a, name_b)
        return self.spacing(name_b, name_a)


def get_spacing(big_name: int, small_name: int, metric: SpacingMetric) -> int:
    return metric.spacing(big_name, small_name)


def get_all_spacings(sorted_names: Sequence[int], metric: SpacingMetric) -> List[int]:
    """
    Return every gap across the namespace for an ascending list of names.

    The first value is the gap from 0 to the smallest name and the last is
    the gap from the largest name to MAX_NAME, so N names yield N + 1 gaps.
    """
    if not sorted_names:
        raise ValueError("Cannot measure spacings of an empty set of names")

    spacings = [get_spacing(sorted_names[0], 0, metric)]
    for previous_name, name in zip(sorted_names, sorted_names[1:]):
        spacings.append(get_spacing(name, previous_name, metric))
    spacings.append(get_spacing(MAX_NAME, sorted_names[-1], metric))
    return spacings


def average(numbers: Sequence[int]) -> int:
    """Exact mean, rounded down."""
    if not numbers:
        raise ValueError("Cannot average an empty sequence")
    return sum(numbers) // len(numbers)


def standard_deviation(numbers: Sequence[int]) -> int:
    """
    Sample standard deviation of unsigned integers, rounded down.

    Uses the floored average, the floored division of the squared
    differences by (count - 1), and an integer square root, so results
    match exactly for values anywhere in the 64-bit range.
    """
    if len(numbers) < 2:
        raise ValueError("Standard deviation needs at least two values")

    avg = average(numbers)
    total_diffs = sum((number - avg) ** 2 for number in numbers)
    variance = total_diffs // (len(numbers) - 1)
    return math.isqrt(variance)


def random_name(rng: random.Random) -> int:
    """Uniformly random name over the whole namespace."""
    return rng.getrandbits(NAME_BITS)
