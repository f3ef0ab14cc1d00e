"""Main CLI entry point for scalar-astar."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging, finite_float, positive_int


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='scalar-astar',
        description='A* search over a continuous line using halving and constant-step moves',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scalar-astar solve 0.75
  scalar-astar solve --start 0.25 0.625
  scalar-astar solve --precision 1e-7 0.8125
  scalar-astar solve --precision 0.01 --constant 0.1 --start 0 1
  scalar-astar -c search.max_nodes_expanded=5000 solve 0.3
  scalar-astar config show
  scalar-astar config save run.yaml

Targets that need long move sequences at tight precision can exhaust the
search budget (default: 1000000 expansions or 60 s); raise --max-nodes and
--timeout for those.
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override, repeatable (e.g., search.precision=1e-07)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Search for a move sequence reaching a target value',
        description='Search for a move sequence from the start point to within precision of TARGET'
    )

    solve_parser.add_argument(
        'target',
        type=finite_float,
        help='The target point value'
    )

    solve_parser.add_argument(
        '--start',
        type=finite_float,
        help='Start point (default: 0.5)'
    )

    solve_parser.add_argument(
        '--precision',
        type=finite_float,
        help='Goal tolerance (default: 1e-6)'
    )

    solve_parser.add_argument(
        '--constant', '--step',
        dest='constant',
        type=finite_float,
        help='Constant movement value (default: 0.00589375)'
    )

    solve_parser.add_argument(
        '--max-nodes',
        type=positive_int,
        help='Maximum number of node expansions (default: 1000000)'
    )

    solve_parser.add_argument(
        '--timeout', '-t',
        type=finite_float,
        help='Search time budget in seconds (default: 60.0)'
    )

    solve_parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress reporting during the search'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect, validate or save the search configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    save_parser = config_subparsers.add_parser(
        'save',
        help='Save the composed configuration, overrides applied'
    )
    save_parser.add_argument(
        'path',
        help='Output YAML file'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
