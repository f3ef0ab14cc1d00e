"""Configuration management for scalar-astar.

This module provides Hydra-based configuration management with runtime
override capabilities.
"""

from .config_manager import ConfigManager, load_config, search_config_from, DEFAULT_CONFIG_DIR
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'search_config_from',
    'DEFAULT_CONFIG_DIR',
    'validate_config',
    'ConfigValidationError'
]
