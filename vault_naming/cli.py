#!/usr/bin/env python3
"""
Command line entry point.

Prints a CSV report of the chunks stored by each vault and the standard
deviation of the spacing between vault names.
"""

import argparse
import sys

from .config import NameFormat, SimulationConfig, StorageUnits
from .errors import ConfigurationError
from .namespace import SpacingMetric
from .simulator import VaultSimulator
from .strategies import NamingStrategyKind


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Simulate vault naming strategies and chunk distribution across vaults')

    parser.add_argument('--nodes', type=int, default=100,
                        help='Number of vaults in the section (default: 100)')
    parser.add_argument('--chunks', type=int, default=1_000_000,
                        help='Number of chunks to store (default: 1000000)')
    parser.add_argument('--group-size', type=int, default=8,
                        help='Number of closest vaults storing each chunk (default: 8)')
    parser.add_argument('--relocations', type=int, default=100,
                        help='Vaults relocated after the section is built (default: 100)')
    parser.add_argument('--naming-strategy', type=str, default='bestfit',
                        choices=[kind.value for kind in NamingStrategyKind],
                        help='How new vaults are named (default: bestfit)')
    parser.add_argument('--spacing', type=str, default='xordistance',
                        choices=[metric.value for metric in SpacingMetric],
                        help='Distance between names (default: xordistance)')
    parser.add_argument('--storage-units', type=str, default='chunks',
                        choices=[units.value for units in StorageUnits],
                        help='Count stored chunks or megabytes (default: chunks)')
    parser.add_argument('--name-format', type=str, default='hex',
                        choices=[name_format.value for name_format in NameFormat],
                        help='How vault names are printed (default: hex)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible results (default: clock)')
    parser.add_argument('--names-only', action='store_true',
                        help='Only report vault names and their spacing, store no chunks')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print progress to stderr')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SimulationConfig.from_strings(
            naming_strategy=args.naming_strategy,
            spacing_metric=args.spacing,
            storage_units=args.storage_units,
            name_format=args.name_format,
            total_nodes=args.nodes,
            total_chunks=args.chunks,
            group_size=args.group_size,
            relocations=args.relocations,
            random_seed=args.seed,
            progress_interval=0 if args.quiet else 100_000,
        )
    except ConfigurationError as e:
        parser.error(str(e))

    simulator = VaultSimulator(config)
    if args.names_only:
        report = simulator.measure_name_spacings()
    else:
        report = simulator.run_simulation()

    sys.stdout.write(report.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
