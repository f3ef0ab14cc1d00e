"""Hydra-backed configuration for the search and the CLI.

The shipped ``conf/config.yaml`` holds the search defaults (start, precision,
step, budgets) and progress settings. Command-line flags become Hydra
overrides, so every run goes through the same compose-then-validate path.
"""

import logging
from typing import Any, List, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from scalar_astar.core.data_models import Point
from scalar_astar.search.astar import SearchConfig
from .validators import validate_config

logger = logging.getLogger(__name__)

# Default config directory, installed as package data
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent / "conf"


class ConfigManager:
    """Composes, validates and exposes one search configuration."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``config_name`` with Hydra overrides.

        Args:
            config_name: Config file name without ``.yaml``
            overrides: Hydra overrides such as ``search.precision=1e-07``
            validate: Run ``validate_config`` on the composed result

        Raises:
            ConfigValidationError: If ``validate`` is set and a value is malformed
        """
        overrides = list(overrides or [])

        # compose() needs a fresh Hydra instance on every load
        GlobalHydra.instance().clear()
        with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
            cfg = compose(config_name=config_name, overrides=overrides)

        if validate:
            validate_config(cfg)

        self.config = cfg
        logger.info(f"Loaded {config_name} from {self.config_dir}"
                    + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Dot-notation lookup, e.g. ``search.start``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def start_point(self) -> Point:
        """The configured start of the search."""
        return Point(self.get_parameter('search.start', 0.5))

    def progress_enabled(self) -> bool:
        return bool(self.get_parameter('progress.enabled', True))

    def search_config(self) -> SearchConfig:
        return search_config_from(self._require_config())

    def save_config(self, output_path: Union[str, Path]) -> Path:
        """Write the composed configuration (overrides applied) as YAML.

        Returns:
            The path written
        """
        config = self._require_config()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w') as f:
            OmegaConf.save(config, f)

        logger.info(f"Configuration saved to: {output_path}")
        return output_path


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Compose a configuration with a throwaway ``ConfigManager``."""
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def search_config_from(config: DictConfig) -> SearchConfig:
    """Build a SearchConfig from the ``search`` and ``progress`` sections.

    Anchors are not configurable and keep their defaults.
    """
    search_cfg = config.get('search', {})
    progress_cfg = config.get('progress', {})
    defaults = SearchConfig()

    max_nodes = search_cfg.get('max_nodes_expanded', defaults.max_nodes_expanded)
    max_time = search_cfg.get('max_computation_time', defaults.max_computation_time)

    return SearchConfig(
        precision=float(search_cfg.get('precision', defaults.precision)),
        step=float(search_cfg.get('step', defaults.step)),
        max_nodes_expanded=int(max_nodes) if max_nodes is not None else None,
        max_computation_time=float(max_time) if max_time is not None else None,
        progress_interval=float(progress_cfg.get('interval_seconds', defaults.progress_interval))
    )
