#!/usr/bin/env python3
"""
Chunk placement.

Every chunk is stored by the group of vaults whose names are closest to the
chunk name under the configured spacing metric. Load is counted either in
chunks or in megabytes, the latter drawing chunk sizes from a histogram of
observed network traffic.
"""

import heapq
import random
import sys
from typing import List, Optional, Sequence, Union

from .config import StorageUnits
from .namespace import SpacingMetric, random_name
from .population import Population, Vault


# (cumulative probability upper bound, lower end of size bucket in MB)
CHUNK_SIZE_DISTRIBUTION = (
    (0.709159, 0.0),
    (0.774634, 0.1),
    (0.777539, 0.2),
    (0.778139, 0.3),
    (0.778459, 0.4),
    (0.779100, 0.5),
    (0.779342, 0.6),
    (0.779450, 0.7),
    (0.779588, 0.8),
    (0.779730, 0.9),
)
SIZE_BUCKET_WIDTH_MB = 0.1
MAX_CHUNK_SIZE_MB = 1.0


def random_chunk_size(rng: random.Random) -> float:
    """Draw a chunk size in megabytes from the observed size distribution."""
    i = rng.random()
    for upper_bound, bucket_start in CHUNK_SIZE_DISTRIBUTION:
        if i < upper_bound:
            return bucket_start + rng.random() * SIZE_BUCKET_WIDTH_MB
    return MAX_CHUNK_SIZE_MB


def closest_vaults(vaults: Sequence[Vault], chunk_name: int, group_size: int,
                   metric: SpacingMetric) -> List[Vault]:
    """
    Return the group_size vaults closest to chunk_name, closest first.

    Equal distances keep population order, as a stable sort would.
    """
    return heapq.nsmallest(group_size, vaults,
                           key=lambda vault: metric.distance(vault.name, chunk_name))


class ChunkPlacer:
    """Routes chunks to the closest group of vaults and records their load."""

    def __init__(self, metric: SpacingMetric, group_size: int,
                 storage_units: StorageUnits, rng: random.Random):
        self.metric = metric
        self.group_size = group_size
        self.storage_units = storage_units
        self.rng = rng
        self.chunks_placed = 0

    def _load_for_one_vault(self) -> Union[int, float]:
        if self.storage_units is StorageUnits.MEGABYTES:
            return random_chunk_size(self.rng)
        return 1

    def place(self, population: Population, chunk_name: int) -> List[Vault]:
        """Store one chunk on its closest group. Returns the vaults chosen."""
        group = closest_vaults(population.vaults, chunk_name, self.group_size, self.metric)
        for vault in group:
            vault.stored += self._load_for_one_vault()
        self.chunks_placed += 1
        return group

    def place_random_chunks(self, population: Population, total_chunks: int,
                            progress_interval: Optional[int] = None):
        """Place total_chunks chunks with uniformly random names."""
        for i in range(total_chunks):
            if progress_interval and i % progress_interval == 0:
                print(f"Placed {i:,}/{total_chunks:,} chunks", file=sys.stderr)
            self.place(population, random_name(self.rng))
