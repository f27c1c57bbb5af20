#!/usr/bin/env python3
"""
Population of vaults in a section.

Vaults join with a name chosen by the configured naming strategy. Relocation
removes a random vault and immediately adds a replacement, so the population
size only drops by one for the duration of a single relocation.
"""

import random
from dataclasses import dataclass
from typing import Iterator, List, Union

from .config import StorageUnits
from .strategies import NamingStrategy


@dataclass
class Vault:
    """A vault in the section and the load it has accumulated."""
    name: int
    stored: Union[int, float] = 0

    def __repr__(self):
        return f"Vault({self.name:016x}, stored={self.stored})"


class Population:
    """The vaults of a section."""

    def __init__(self, naming: NamingStrategy, rng: random.Random,
                 storage_units: StorageUnits = StorageUnits.CHUNKS):
        self.naming = naming
        self.rng = rng
        self.storage_units = storage_units
        self.vaults: List[Vault] = []

    def __len__(self) -> int:
        return len(self.vaults)

    def __iter__(self) -> Iterator[Vault]:
        return iter(self.vaults)

    def names(self) -> List[int]:
        return [vault.name for vault in self.vaults]

    def sorted_names(self) -> List[int]:
        return sorted(self.names())

    def sorted_by_name(self) -> List[Vault]:
        return sorted(self.vaults, key=lambda vault: vault.name)

    def total_stored(self) -> Union[int, float]:
        return sum(vault.stored for vault in self.vaults)

    def _empty_load(self) -> Union[int, float]:
        return 0.0 if self.storage_units is StorageUnits.MEGABYTES else 0

    def add_new_node(self) -> Vault:
        """Add a vault named by the naming strategy."""
        name = self.naming.propose(self.names(), self.rng)
        vault = Vault(name, self._empty_load())
        self.vaults.append(vault)
        return vault

    def remove_random_node(self) -> Vault:
        """Remove a vault chosen uniformly at random."""
        if not self.vaults:
            raise IndexError("Cannot remove a vault from an empty population")
        index = self.rng.randrange(len(self.vaults))
        return self.vaults.pop(index)

    def relocate(self) -> Vault:
        """Replace a random vault with a newly named one. Returns the new vault."""
        self.remove_random_node()
        return self.add_new_node()

    def bootstrap(self, total_nodes: int):
        """Grow the population by total_nodes vaults."""
        for _ in range(total_nodes):
            self.add_new_node()
