"""Configuration validation for scalar-astar."""

import logging
from typing import Any
import numpy as np
from omegaconf import DictConfig

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and bool(np.isfinite(value))


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_progress_config(config.get('progress', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Non-finite values must never reach the search: the distance comparisons
    it relies on are meaningless for NaN or infinities.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    start = search_config.get('start', 0.5)
    if not _is_finite_number(start):
        raise ConfigValidationError(f"start must be a finite number, got {start}")

    precision = search_config.get('precision', 1e-6)
    if not _is_finite_number(precision) or precision <= 0:
        raise ConfigValidationError(
            f"precision must be a positive finite number, got {precision}"
        )

    step = search_config.get('step', 0.00589375)
    if not _is_finite_number(step) or step == 0:
        raise ConfigValidationError(
            f"step must be a non-zero finite number, got {step}"
        )

    max_nodes = search_config.get('max_nodes_expanded', None)
    if max_nodes is not None:
        if not isinstance(max_nodes, int) or isinstance(max_nodes, bool) or max_nodes < 1:
            raise ConfigValidationError(
                f"max_nodes_expanded must be a positive integer or null, got {max_nodes}"
            )

    max_time = search_config.get('max_computation_time', None)
    if max_time is not None:
        if not _is_number(max_time) or not max_time > 0:
            raise ConfigValidationError(
                f"max_computation_time must be a positive number or null, got {max_time}"
            )


def validate_progress_config(progress_config: DictConfig) -> None:
    """Validate progress configuration section.

    Args:
        progress_config: Progress configuration section
    """
    if not progress_config:
        return

    enabled = progress_config.get('enabled', True)
    if not isinstance(enabled, bool):
        raise ConfigValidationError(f"progress.enabled must be a boolean, got {enabled}")

    interval = progress_config.get('interval_seconds', 0.05)
    if not _is_finite_number(interval) or interval < 0:
        raise ConfigValidationError(
            f"progress.interval_seconds must be a non-negative number, got {interval}"
        )
