#!/usr/bin/env python3
"""
Naming strategies for new vaults.

Each strategy looks at the names already in the section and proposes the
name for the next vault to join. Strategies that target a range of the
namespace draw uniformly random 64-bit names until one lands in the range.
"""

import bisect
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from .errors import ConfigurationError
from .namespace import (
    MAX_NAME,
    NAME_BITS,
    NAMESPACE_SIZE,
    SpacingMetric,
    random_name,
)


HALFWAY = 1 << (NAME_BITS - 1)


class NamingStrategyKind(Enum):
    """Available naming strategies."""
    UNIFORM = "uniform"
    RANDOM = "random"
    BEST_FIT = "bestfit"
    QUIETEST_HALF = "quietesthalf"
    EMPTY_SUBSECTION = "emptysubsection"

    @classmethod
    def parse(cls, value: str) -> "NamingStrategyKind":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ConfigurationError(
                f"Invalid naming strategy {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class Subsection:
    """An inclusive range of the namespace."""
    start: int
    end: int

    def contains(self, name: int) -> bool:
        return self.start <= name <= self.end


def sample_name_in_range(rng: random.Random, low: int, high: int) -> int:
    """Draw random names until one falls in the inclusive range [low, high]."""
    while True:
        candidate = random_name(rng)
        if low <= candidate <= high:
            return candidate


class NamingStrategy:
    """Base class: proposes the name of the next vault."""

    kind: NamingStrategyKind

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        raise NotImplementedError


class UniformNaming(NamingStrategy):
    """Evenly spaced names, determined by how far the population has grown."""

    kind = NamingStrategyKind.UNIFORM

    def __init__(self, total_nodes: int):
        self.total_nodes = total_nodes

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        return min(NAMESPACE_SIZE * len(names) // self.total_nodes, MAX_NAME)


class RandomNaming(NamingStrategy):
    """Uniformly random names, ignoring the existing population."""

    kind = NamingStrategyKind.RANDOM

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        return random_name(rng)


def find_largest_gap(names: Sequence[int], metric: SpacingMetric) -> Tuple[int, int, int]:
    """
    Find the widest gap between names, including the gaps to 0 and MAX_NAME.

    Returns (spacing, lower_name, upper_name). On ties the gap nearest to 0
    wins.
    """
    ordered = sorted(names)
    max_spacing = 0
    min_name = 0
    max_name = 0
    previous_name = 0
    for name in ordered:
        spacing = metric.spacing(name, previous_name)
        if spacing > max_spacing:
            max_spacing = spacing
            min_name = previous_name
            max_name = name
        previous_name = name

    last_spacing = metric.spacing(MAX_NAME, ordered[-1])
    if last_spacing > max_spacing:
        max_spacing = last_spacing
        min_name = ordered[-1]
        max_name = MAX_NAME
    return max_spacing, min_name, max_name


def narrow_gap(min_name: int, max_name: int) -> Tuple[int, int]:
    """Drop the outer third at each end of a gap."""
    trim = (max_name - min_name) // 3
    return min_name + trim, max_name - trim


class BestFitNaming(NamingStrategy):
    """
    Names placed near the middle of the linearly widest gap.

    Gaps are compared by linear width whatever the spacing metric: under XOR
    the gap straddling 2**63 always looks widest and would shrink towards
    nothing. The widest linear gap holds at least 1/(N + 1) of the namespace
    and the narrowed gap keeps a third of it, so the expected number of draws
    stays below 3 * (N + 1).
    """

    kind = NamingStrategyKind.BEST_FIT

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        if not names:
            return random_name(rng)

        _, min_name, max_name = find_largest_gap(names, SpacingMetric.LINEAR)
        low, high = narrow_gap(min_name, max_name)
        if high - low < 2:
            raise RuntimeError("Namespace is full: no gap left between names")
        # strictly between the narrowed bounds
        return sample_name_in_range(rng, low + 1, high - 1)


def count_halves(names: Sequence[int]) -> Tuple[int, int]:
    """Count names below HALFWAY and at or above it."""
    first_half = sum(1 for name in names if name < HALFWAY)
    return first_half, len(names) - first_half


class QuietestHalfNaming(NamingStrategy):
    """
    Names placed in whichever half of the namespace holds fewer vaults.

    Ties go to the upper half.
    """

    kind = NamingStrategyKind.QUIETEST_HALF

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        first_half, second_half = count_halves(names)
        if first_half < second_half:
            return sample_name_in_range(rng, 0, HALFWAY - 1)
        return sample_name_in_range(rng, HALFWAY, MAX_NAME)


def find_empty_subsections(names: Sequence[int]) -> Tuple[int, List[Subsection]]:
    """
    Split the namespace into 2**depth equal subsections for depth 0, 1, 2...
    and return the first depth where some subsection holds no name, along
    with every empty subsection at that depth.
    """
    ordered = sorted(names)
    depth = 0
    while depth <= NAME_BITS:
        width = NAMESPACE_SIZE >> depth
        empty = []
        for index in range(1 << depth):
            start = index * width
            end = start + width - 1
            position = bisect.bisect_left(ordered, start)
            if position == len(ordered) or ordered[position] > end:
                empty.append(Subsection(start, end))
        if empty:
            return depth, empty
        depth += 1
    raise RuntimeError("Namespace is full: every name is taken")


class EmptySubsectionNaming(NamingStrategy):
    """Names placed in an empty subsection at the coarsest depth that has one."""

    kind = NamingStrategyKind.EMPTY_SUBSECTION

    def propose(self, names: Sequence[int], rng: random.Random) -> int:
        _, empty = find_empty_subsections(names)
        while True:
            candidate = random_name(rng)
            if any(subsection.contains(candidate) for subsection in empty):
                return candidate


def build_naming_strategy(kind: NamingStrategyKind, total_nodes: int) -> NamingStrategy:
    """Create the strategy instance for a configured kind."""
    if kind is NamingStrategyKind.UNIFORM:
        return UniformNaming(total_nodes)
    elif kind is NamingStrategyKind.RANDOM:
        return RandomNaming()
    elif kind is NamingStrategyKind.BEST_FIT:
        return BestFitNaming()
    elif kind is NamingStrategyKind.QUIETEST_HALF:
        return QuietestHalfNaming()
    elif kind is NamingStrategyKind.EMPTY_SUBSECTION:
        return EmptySubsectionNaming()
    raise ConfigurationError(f"Invalid naming strategy {kind!r}")
