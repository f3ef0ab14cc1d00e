"""CLI command implementations."""

import logging
import time
from typing import List, Optional

from omegaconf import OmegaConf

from scalar_astar.config import ConfigManager, validate_config, ConfigValidationError
from scalar_astar.core.data_models import Point
from scalar_astar.search.astar import AStarSearcher, SearchResult
from scalar_astar.search.progress import ProgressSnapshot, ProgressCallback
from scalar_astar import __version__

from .utils import save_results, format_duration

logger = logging.getLogger(__name__)


class SearchRunner:
    """Wires validated configuration into an A* searcher."""

    def __init__(self, config_overrides: Optional[List[str]] = None):
        """Initialize search runner.

        Args:
            config_overrides: List of configuration overrides
        """
        try:
            self.config_manager = ConfigManager()
            self.config = self.config_manager.load_config(overrides=config_overrides or [])
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        self.search_config = self.config_manager.search_config()
        self.start = self.config_manager.start_point()
        self.progress_enabled = self.config_manager.progress_enabled()
        self.searcher = AStarSearcher(self.search_config)

        logger.info("Search runner initialized successfully")

    def solve(self, target: float,
              progress_callback: Optional[ProgressCallback] = None) -> SearchResult:
        """Search from the configured start to ``target``."""
        if not self.progress_enabled:
            progress_callback = None
        return self.searcher.search(self.start, Point(target), progress_callback=progress_callback)


def _print_progress(snapshot: ProgressSnapshot) -> None:
    print(snapshot.format(), flush=True)


def _format_actions(result: SearchResult) -> str:
    return str([a.value if a is not None else None for a in result.actions])


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config_overrides = []
        if args.start is not None:
            config_overrides.append(f"search.start={args.start!r}")
        if args.precision is not None:
            config_overrides.append(f"search.precision={args.precision!r}")
        if args.constant is not None:
            config_overrides.append(f"search.step={args.constant!r}")
        if args.max_nodes is not None:
            config_overrides.append(f"search.max_nodes_expanded={args.max_nodes}")
        if args.timeout is not None:
            config_overrides.append(f"search.max_computation_time={args.timeout!r}")
        if args.no_progress or args.quiet:
            config_overrides.append("progress.enabled=false")

        # Add global config overrides
        if getattr(args, 'config', None):
            config_overrides.extend(args.config)

        runner = SearchRunner(config_overrides)
        target = Point(args.target)

        if not args.quiet:
            print(f"Using start = {runner.start}, target = {target}")
            print(f"Precision = {runner.search_config.precision}, "
                  f"Constant movement = {runner.search_config.step}")

        start_time = time.perf_counter()
        result = runner.solve(args.target, progress_callback=_print_progress)
        total_time = time.perf_counter() - start_time

        if args.output:
            payload = result.to_dict()
            payload.update({
                'start': runner.start.x,
                'target': target.x,
                'precision': runner.search_config.precision,
                'step': runner.search_config.step,
                'version': __version__,
                'total_time': total_time,
                'timestamp': time.time()
            })
            save_results(payload, args.output)
            logger.info(f"Results saved to {args.output}")

        if result.success:
            print(f"actions={_format_actions(result)}")
            for point in result.path:
                print(point)
        else:
            print(f"No path found ({result.termination_reason})")

        print(f"Execution time: {format_duration(total_time)}")

        return 0 if result.success else 1

    except Exception as e:
        logger.error(f"Solve command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = list(getattr(args, 'config', None) or [])
    try:
        manager = ConfigManager()

        if args.config_action == 'show':
            config = manager.load_config(overrides=overrides)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = manager.load_config(overrides=overrides, validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        elif args.config_action == 'save':
            manager.load_config(overrides=overrides)
            path = manager.save_config(args.path)
            print(f"Configuration saved to {path}")
            return 0

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
