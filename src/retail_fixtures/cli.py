"""
CLI entry point for the retail fixture generator.

Usage:
    python -m retail_fixtures generate
    python -m retail_fixtures generate --seed-dir seeds --output out/generated.json
    python -m retail_fixtures generate --profile starter --tables out/tables
    python -m retail_fixtures generate --seed 10 12 --strict
    python -m retail_fixtures init-config config.json
"""

import argparse
import logging
import sys
import time

from retail_fixtures.config.models import FixtureConfig
from retail_fixtures.config.settings import (
    create_default_config,
    load_config_with_fallback,
)
from retail_fixtures.generators import FixtureGenerator
from retail_fixtures.services import ExportService
from retail_fixtures.shared.exceptions import FixtureGenException
from retail_fixtures.shared.logging_config import configure_logging
from retail_fixtures.shared.models import FixtureDataset

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format duration in seconds to human-readable string."""
    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {secs:.1f}s"
    return f"{secs:.2f}s"


def print_summary(dataset: FixtureDataset) -> None:
    """Print row counts per table."""
    print("Generated tables:")
    print("-" * 40)
    for table_name, count in dataset.table_counts().items():
        print(f"  {table_name:<20} {count:>12,}")
    print("-" * 40)


def apply_overrides(config: FixtureConfig, args: argparse.Namespace) -> FixtureConfig:
    """Apply command-line overrides on top of the loaded configuration."""
    data = config.model_dump()
    if args.seed is not None:
        data["seed"] = args.seed
    if args.profile is not None:
        data["profile"] = args.profile
    if args.strict:
        data["strict_inputs"] = True
    if args.seed_dir is not None:
        data["paths"]["seeds"] = args.seed_dir
    if args.output is not None:
        data["paths"]["output"] = args.output
    if args.tables is not None:
        data["paths"]["tables"] = args.tables
    return FixtureConfig(**data)


def cmd_generate(args: argparse.Namespace) -> int:
    """
    Generate the dataset and write every configured output.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = apply_overrides(load_config_with_fallback(args.config), args)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: Invalid configuration: {e}")
        return 1

    started = time.perf_counter()
    try:
        dataset = FixtureGenerator(config).generate()
        written = ExportService(config).export(dataset)
    except FixtureGenException as e:
        print(f"ERROR: Generation failed: {e}")
        return 1
    except OSError as e:
        print(f"ERROR: Export failed: {e}")
        return 1

    print_summary(dataset)
    if dataset.is_empty:
        print("WARNING: seed inputs produced an empty dataset")
    for format_name, paths in written.items():
        for path in paths:
            print(f"  [{format_name}] {path}")
    print(f"Done in {format_duration(time.perf_counter() - started)}")
    return 0


def cmd_init_config(args: argparse.Namespace) -> int:
    """Write a default configuration file."""
    try:
        create_default_config(args.path)
    except OSError as e:
        print(f"ERROR: Could not write configuration: {e}")
        return 1
    print(f"Wrote default configuration to {args.path}")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Deterministic retail chain fixture generator",
        prog="python -m retail_fixtures",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit log messages without the plain-text prefix",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # ===== GENERATE SUBCOMMAND =====
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the fixture dataset",
    )
    generate_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON configuration file",
    )
    generate_parser.add_argument(
        "--seed-dir",
        type=str,
        default=None,
        help="Directory containing categories.txt, countries.txt, companies.txt",
    )
    generate_parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Use a packaged seed profile instead of seed files",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        nargs=2,
        metavar=("HI", "LO"),
        default=None,
        help="Seed pair (default: 10 12)",
    )
    generate_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON document path (default: generated.json)",
    )
    generate_parser.add_argument(
        "--tables",
        type=str,
        default=None,
        help="Also write one CSV per table into this directory",
    )
    generate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on missing seed files or an empty dataset",
    )

    # ===== INIT-CONFIG SUBCOMMAND =====
    init_parser = subparsers.add_parser(
        "init-config",
        help="Write a default configuration file",
    )
    init_parser.add_argument("path", type=str, help="Where to write the file")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    return args


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point - routes to subcommands.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    configure_logging(args.log_level, structured=args.log_json)

    if args.command == "generate":
        return cmd_generate(args)
    elif args.command == "init-config":
        return cmd_init_config(args)

    print("ERROR: No command specified. Use --help for usage information.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
