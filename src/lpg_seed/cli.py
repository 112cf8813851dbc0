#!/usr/bin/env python3
"""
Command line entry point for the seeder.

Examples:
  # Full dataset against DATABASE_URL
  lpg-seed

  # Smaller development dataset
  lpg-seed --dev

  # Minimal base data plus the fixture scenarios, no database
  lpg-seed --special-cases --dry-run

  # Preset with YAML overrides and a fixed seed
  lpg-seed --dev --config seed.yaml --seed 42
"""

import argparse
import os
import sys

from . import console
from .config import PRESETS, SeedConfig, load_config
from .errors import ConfigurationError, SeedError
from .pipeline import SeedPipeline
from .store import MemoryStore, PostgresStore, Store

PRODUCTION = "production"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="lpg-seed",
        description="Seed a relationship-tracking database with synthetic data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )

    preset = parser.add_mutually_exclusive_group()
    preset.add_argument(
        "--dev",
        action="store_true",
        help="Use the smaller development configuration",
    )
    preset.add_argument(
        "--special-cases",
        action="store_true",
        help="Use the minimal configuration focused on fixture scenarios",
    )

    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML file with configuration overrides applied on top of the preset",
    )

    parser.add_argument(
        "--seed",
        type=int,
        metavar="N",
        help="Random seed for reproducible output",
    )

    parser.add_argument(
        "--force",
        action="store_true",
        help="Allow seeding when SEED_ENV or APP_ENV is 'production'",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate into an in-memory store instead of the database",
    )

    parser.add_argument(
        "--dsn",
        help="PostgreSQL DSN or URL (default: $DATABASE_URL)",
    )

    return parser.parse_args(argv)


def preset_name(args: argparse.Namespace) -> str:
    if args.dev:
        return "dev"
    if args.special_cases:
        return "special-cases"
    return "default"


def resolve_config(args: argparse.Namespace) -> SeedConfig:
    """Pick the preset named by the flags and apply any YAML overrides."""
    preset = preset_name(args)
    if preset != "default":
        console.info(f"Using {preset} configuration")
    base = PRESETS[preset]

    if args.config:
        console.info(f"Loading configuration overrides from {args.config}")
        return load_config(args.config, base)
    return base.validate()


def check_environment(args: argparse.Namespace) -> None:
    """
    Refuse to seed production without --force.

    Raises:
        ConfigurationError: If the environment is production and --force is absent
    """
    environment = os.environ.get("SEED_ENV") or os.environ.get("APP_ENV") or ""
    if environment.lower() == PRODUCTION and not args.force:
        raise ConfigurationError("Refusing to seed production database without --force flag")


def open_store(args: argparse.Namespace) -> Store:
    """
    Open the target store.

    Raises:
        ConfigurationError: If no DSN is available and this is not a dry run
        StoreError: If the database connection fails
    """
    if args.dry_run:
        console.info("Dry run: generating into an in-memory store")
        return MemoryStore()

    dsn = args.dsn or os.environ.get("DATABASE_URL")
    if not dsn:
        raise ConfigurationError("Missing database credentials. Set DATABASE_URL or pass --dsn.")
    return PostgresStore.from_dsn(dsn)


def main(argv: list[str] | None = None) -> int:
    """
    Run the seeder from the command line.

    Returns:
        0 on success, 1 on configuration, store or pipeline failure
    """
    args = parse_args(argv)

    try:
        check_environment(args)
        config = resolve_config(args)
        store = open_store(args)
    except SeedError as err:
        console.error(str(err))
        return 1

    try:
        SeedPipeline(store, config, seed=args.seed).run()
    except SeedError as err:
        console.error(f"Error during database seeding: {err}")
        return 1
    finally:
        store.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
