# ============================================================================
# RescueTower - Command Line Interface
#
# Purpose: CLI entry point for batch runs and the interactive menu
# Inputs: Command-line arguments
# Outputs: Console output and optional JSON report
# Dependencies: argparse, config, tower, reporting, sinks
# Usage: python -m RescueTower.cli run --sort priority --sort name --search "Chip Central"
#
# Changelog:
#   2026-03-06: Initial CLI with 'run' and 'menu' commands
#   2026-03-07: --perf flag (summary/detailed); performance summary injected into
#               report extensions before sink write
#   2026-03-09: --verify-sorted flag
# ============================================================================

import argparse
import sys
from typing import Optional

from RescueTower import __version__
from RescueTower.config import Config
from RescueTower.errors import RescueTowerError
from RescueTower.instrumentation.performance import PerformanceMonitor
from RescueTower.logging_utils import get_logger, setup_logging
from RescueTower.menu import TowerMenu
from RescueTower.reporting.console import (
    format_component_table,
    format_search_outcome,
    format_sort_outcome,
)
from RescueTower.reporting.validation import validate_report
from RescueTower.sample_data import load_components_file
from RescueTower.sinks.local_file import LocalFileSink
from RescueTower.tower import RescueTower

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="rescuetower",
        description="Organize rescue tower components with instrumented sorts and binary search",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        help="Load components, apply sorts in order, optionally search",
    )
    run_parser.add_argument(
        "--input",
        type=str,
        default=None,
        metavar="PATH",
        help="YAML or JSON file with components (default: built-in sample data)",
    )
    run_parser.add_argument(
        "--sort",
        type=str,
        action="append",
        choices=["name", "category", "priority"],
        default=None,
        dest="sorts",
        metavar="KEY",
        help="Sort by name, category or priority. Repeat to chain sorts; they run in the given order.",
    )
    run_parser.add_argument(
        "--search",
        type=str,
        default=None,
        metavar="NAME",
        help="Binary-search this exact name after sorting. Only reliable when the last sort was by name.",
    )
    run_parser.add_argument(
        "--verify-sorted",
        action="store_true",
        help="Fail the search if the catalog is not sorted by name (extra O(n) pass, debug only)",
    )
    run_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to custom config YAML file",
    )
    run_parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output directory for reports (default: ./runs/)",
    )
    run_parser.add_argument(
        "--write-report",
        action="store_true",
        help="Write a JSON session report to the output directory",
    )
    run_parser.add_argument(
        "--json-pretty",
        action="store_true",
        help="Indent the JSON report. Larger file size.",
    )
    run_parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    run_parser.add_argument(
        "--perf",
        nargs="?",
        choices=["summary", "detailed"],
        const="summary",
        default=None,
        dest="perf_mode",
        metavar="MODE",
        help="Performance monitoring: summary (default) or detailed (+ per-operation stats). Omit to disable.",
    )

    # Menu command
    menu_parser = subparsers.add_parser(
        "menu",
        help="Start the interactive menu",
    )
    menu_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to custom config YAML file",
    )
    menu_parser.add_argument(
        "--sample",
        action="store_true",
        help="Start with the sample components already loaded",
    )
    menu_parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def _load_config(path: Optional[str]) -> Config:
    return Config.from_yaml(path) if path else Config.from_default()


def run_command(args: argparse.Namespace) -> int:
    """
    Execute the 'run' command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        perf_mode = getattr(args, "perf_mode", None)
        monitor = None
        if perf_mode:
            monitor = PerformanceMonitor(mode=perf_mode)
            monitor.mark_run_start()

        config = _load_config(args.config)
        if args.out:
            config.sink.output_dir = args.out
        if args.verify_sorted:
            config.search.verify_sorted = True
        if perf_mode:
            config.performance.mode = perf_mode
        config.logging.level = args.log_level

        setup_logging(config.logging.level, config.logging.format)
        logger.info(f"Starting RescueTower v{__version__}")

        tower = RescueTower(config, monitor=monitor)
        if args.input:
            tower.load_components(load_components_file(args.input, config.catalog))
        else:
            tower.load_sample_data()

        print(format_component_table(tower.components, tower.catalog.capacity))

        for key in args.sorts or []:
            outcome = tower.sort(key)
            print()
            print(format_sort_outcome(outcome))
            print(format_component_table(outcome.components, tower.catalog.capacity))

        if args.search is not None:
            search_outcome = tower.search(args.search)
            print()
            print(format_search_outcome(search_outcome))

        # Finalize performance data before the report that carries it is built
        if monitor:
            monitor.mark_run_end()
            perf = monitor.build_summary_dict()
            print()
            print(f"Performance: {perf['total_wall_time_ms']} ms total, {perf['total_comparisons']} comparisons")
            for op in perf["operations"]:
                comparisons = f", {op['comparisons']} comparisons" if "comparisons" in op else ""
                print(f"  - {op['name']}: {op['ms']} ms{comparisons}")

        if args.write_report:
            report = tower.build_report()
            validate_report(report)
            json_indent = 2 if getattr(args, "json_pretty", False) else None
            sink = LocalFileSink(config.sink.output_dir, indent=json_indent)
            location = sink.write(report)
            print(f"\nReport file:     {location}")

        return 0

    except RescueTowerError as e:
        logger.error(f"Run error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error during run")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def menu_command(args: argparse.Namespace) -> int:
    """
    Execute the 'menu' command.

    Returns:
        Exit code
    """
    try:
        config = _load_config(args.config)
        config.logging.level = args.log_level
        setup_logging(config.logging.level, config.logging.format)

        tower = RescueTower(config)
        if args.sample:
            tower.load_sample_data()
        return TowerMenu(tower).run()
    except RescueTowerError as e:
        logger.error(f"Menu error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 0


def main(argv: Optional[list] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "run":
        return run_command(args)
    if args.command == "menu":
        return menu_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
