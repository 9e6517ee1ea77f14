"""
Beacon CLI - Main entry point.

Runs coverage queries against a sensor report and prints JSON results.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from beacon_zone import Environment, load_report
from beacon_zone.errors import BeaconZoneError
from beacon_zone.logging import LogEvent, StructuredLogger, create_logger

from .config import EngineConfig

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="beacon-cli",
        description="Beacon CLI - Sensor coverage queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count cells on row 10 that cannot hold an unknown beacon
  beacon-cli count-row data/sample.txt --row 10

  # Reach bounding box of all sensors
  beacon-cli bbox data/sample.txt

  # First uncovered point in a rectangle
  beacon-cli find-gap data/sample.txt --bounds 0 0 20 20

  # Tuning frequency (x * 4000000 + y) of the uncovered point
  beacon-cli --config config/sample.yaml tuning-frequency data/sample.txt
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Path to engine config YAML (defaults apply when omitted)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level from config"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    count_row = subparsers.add_parser('count-row', help='Count covered cells on a row')
    count_row.add_argument('report', help='Path to sensor report')
    count_row.add_argument('--row', type=int, help='Row to count (overrides config)')

    bbox = subparsers.add_parser('bbox', help='Bounding box of all sensor reach')
    bbox.add_argument('report', help='Path to sensor report')

    for name, help_text in (
        ('find-gap', 'Find the first uncovered point in bounds'),
        ('tuning-frequency', 'Tuning frequency of the uncovered point'),
    ):
        search = subparsers.add_parser(name, help=help_text)
        search.add_argument('report', help='Path to sensor report')
        search.add_argument(
            '--bounds',
            type=int,
            nargs=4,
            metavar=('MIN_X', 'MIN_Y', 'MAX_X', 'MAX_Y'),
            help='Inclusive search rectangle (overrides config)'
        )
        search.add_argument(
            '--strategy',
            choices=['skip', 'step'],
            help='Column-advance strategy (overrides config)'
        )
        if name == 'tuning-frequency':
            search.add_argument(
                '--multiplier',
                type=int,
                help='Multiplier applied to x (overrides config)'
            )

    return parser


def load_config(args: argparse.Namespace) -> EngineConfig:
    """Load config from YAML (if given) and apply command-line overrides."""
    config = EngineConfig.from_yaml(args.config) if args.config else EngineConfig()
    return config.with_overrides(
        log_level=args.log_level,
        row=getattr(args, 'row', None),
        bounds=tuple(args.bounds) if getattr(args, 'bounds', None) else None,
        strategy=getattr(args, 'strategy', None),
        tuning_multiplier=getattr(args, 'multiplier', None),
    )


def run_command(
    command: str,
    environment: Environment,
    config: EngineConfig
) -> Optional[Dict[str, Any]]:
    """
    Execute one query.

    Returns:
        JSON-compatible result, or None when a search finds nothing
    """
    if command == 'count-row':
        return {
            'row': config.row,
            'covered': environment.count_covered_cells(config.row),
        }

    if command == 'bbox':
        return environment.bounding_box().to_dict()

    point = environment.find_uncovered_point(
        config.search.bounds,
        strategy=config.search.strategy
    )
    if point is None:
        return None

    result = {'x': point.x, 'y': point.y}
    if command == 'tuning-frequency':
        result['tuning_frequency'] = point.x * config.search.tuning_multiplier + point.y
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    logger: StructuredLogger = create_logger("cli")

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError, TypeError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load config",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.set_level(config.log_level_value)
    if args.config:
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded engine config",
            metadata={'config': args.config, 'log_level': config.log_level}
        )

    # Execute command
    try:
        records = load_report(args.report, logger=logger)
        environment = Environment.from_pairs(
            records,
            logger=create_logger("environment", level=config.log_level_value)
        )
        result = run_command(args.command, environment, config)
    except (FileNotFoundError, BeaconZoneError) as e:
        # Parse and empty-set errors are already logged where they occur
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if result is None:
        logger.warning(
            event=LogEvent.SEARCH_EXHAUSTED,
            message="No uncovered point in bounds",
            metadata={'bounds': list(config.search.bounds)}
        )
        print(json.dumps({'found': False, 'bounds': list(config.search.bounds)}))
        return EXIT_NOT_FOUND

    print(json.dumps(result))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
