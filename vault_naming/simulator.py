#!/usr/bin/env python3
"""
Vault naming simulator.

Builds a section of vaults with a naming strategy, churns it with
relocations, stores random chunks on the closest group of vaults and reports
how evenly the load and the names are spread.
"""

import random
import sys
import time

from .config import SimulationConfig
from .namespace import get_all_spacings, standard_deviation
from .placement import ChunkPlacer
from .population import Population
from .report import NameSpacingReport, SimulationReport
from .strategies import build_naming_strategy


class VaultSimulator:
    """Main simulation engine for vault naming and chunk placement."""

    def __init__(self, config: SimulationConfig):
        self.config = config
        if config.random_seed is not None:
            self.seed = config.random_seed
        else:
            self.seed = time.time_ns()
        self.rng = random.Random(self.seed)

        self.naming = build_naming_strategy(config.naming_strategy, config.total_nodes)
        self.population = Population(self.naming, self.rng, config.storage_units)
        self.placer = ChunkPlacer(
            config.spacing_metric, config.group_size, config.storage_units, self.rng
        )
        self.relocations_done = 0

    def _log(self, message: str):
        if self.config.progress_interval:
            print(message, file=sys.stderr)

    def initialize_population(self):
        """Create the vaults, then relocate some if the strategy allows it."""
        self.population.bootstrap(self.config.total_nodes)
        if self.config.performs_relocations:
            for _ in range(self.config.relocations):
                self.population.relocate()
                self.relocations_done += 1
        self._log(f"Created {len(self.population)} vaults "
                  f"({self.relocations_done} relocations)")

    def spacing_std_dev(self) -> int:
        spacings = get_all_spacings(self.population.sorted_names(), self.config.spacing_metric)
        return standard_deviation(spacings)

    def place_chunks(self):
        self.placer.place_random_chunks(
            self.population, self.config.total_chunks, self.config.progress_interval
        )
        self._log(f"Placed {self.placer.chunks_placed:,} chunks")

    def build_report(self) -> SimulationReport:
        return SimulationReport(
            seed=self.seed,
            config=self.config,
            vaults=[(vault.name, vault.stored) for vault in self.population.sorted_by_name()],
            spacing_std_dev=self.spacing_std_dev(),
        )

    def run_simulation(self) -> SimulationReport:
        """Run the complete simulation."""
        self._log(f"Starting simulation with seed {self.seed}")
        self.initialize_population()
        self.place_chunks()
        return self.build_report()

    def measure_name_spacings(self) -> NameSpacingReport:
        """Build the section and measure name spacing without placing chunks."""
        self.initialize_population()
        return NameSpacingReport(
            seed=self.seed,
            config=self.config,
            names=self.population.sorted_names(),
            spacing_std_dev=self.spacing_std_dev(),
        )


def run_simulation(config: SimulationConfig) -> SimulationReport:
    return VaultSimulator(config).run_simulation()
