"""Configuration management for smartdi.

Supports hierarchical configuration loading:
1. User config: ~/.smartdi/config.yaml
2. Project config: ./smartdi.yaml
3. Explicit config file
4. Environment variables (SMARTDI_<SECTION>_<KEY>)
"""

import copy
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from .loader import ConfigurationLoader
from .settings import Settings
from .validator import ConfigurationValidator

ENV_PREFIX = "SMARTDI_"


class ConfigurationManager:
    """Loads, merges and validates smartdi configuration."""

    def __init__(
        self,
        user_config_path: Optional[Path] = None,
        project_config_path: Optional[Path] = None,
        config_path: Optional[Path] = None,
    ):
        """Initialize configuration manager.

        Args:
            user_config_path: Path to user config file
            project_config_path: Path to project config file
            config_path: Explicit config file, highest file priority
        """
        self.loader = ConfigurationLoader()
        self.validator = ConfigurationValidator()

        self.user_config_path = user_config_path or Path.home() / ".smartdi" / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / "smartdi.yaml"
        self.config_path = config_path

        self._config_cache: Optional[Dict[str, Any]] = None
        self._settings: Optional[Settings] = None

    def load_configuration(self) -> Dict[str, Any]:
        """Load hierarchical configuration.

        Returns:
            Merged configuration dictionary

        Raises:
            FileNotFoundError: If an explicit config file is missing
            ConfigurationError: If a file or the merged result is invalid
        """
        if self._config_cache is not None:
            return self._config_cache

        config: Dict[str, Any] = {}

        for path in (self.user_config_path, self.project_config_path):
            if path.exists():
                logger.debug(f"Loading configuration from {path}")
                config = self.loader.merge_configs(config, self.loader.load_yaml(path))

        if self.config_path is not None:
            logger.debug(f"Loading configuration from {self.config_path}")
            config = self.loader.merge_configs(config, self.loader.load_yaml(self.config_path))

        config = self._apply_env_overrides(config)

        self._settings = self.validator.validate(config)
        self._config_cache = config
        return config

    @property
    def settings(self) -> Settings:
        """Validated, typed configuration."""
        if self._settings is None:
            self.load_configuration()
        return self._settings

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides.

        SMARTDI_RESOLUTION_STRICT_NAMES=true -> config.resolution.strict_names = True
        SMARTDI_WIRING_MODULES=app.services,app.repos -> config.wiring.modules

        Args:
            config: Base configuration

        Returns:
            Configuration with environment overrides applied
        """
        config = copy.deepcopy(config)

        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue

            # Sections are single words, keys may contain underscores
            parts = key[len(ENV_PREFIX):].lower().split("_", 1)
            if len(parts) != 2 or not all(parts):
                logger.warning(f"Ignoring malformed configuration variable {key}")
                continue

            section, final_key = parts
            current = config.setdefault(section, {})
            if isinstance(current, dict):
                current[final_key] = self._convert_env_value(value)

        return config

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        try:
            return int(value)
        except ValueError:
            pass

        try:
            number = float(value)
        except ValueError:
            return value
        # "nan" and "inf" stay strings
        return number if math.isfinite(number) else value

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g. "resolution.strict_names")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current: Any = self.load_configuration()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def reload_configuration(self) -> Dict[str, Any]:
        """Reload configuration from files and environment."""
        self._config_cache = None
        self._settings = None
        return self.load_configuration()
