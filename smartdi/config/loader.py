"""Configuration loading utilities."""

import copy
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..errors import ConfigurationError


class ConfigurationLoader:
    """Utility class for loading YAML configuration files."""

    def load_yaml(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Configuration dictionary, empty for an empty file

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If the YAML is invalid or not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError.invalid_file(path, str(e)) from e

        if not isinstance(content, dict):
            raise ConfigurationError.invalid_file(
                path, f"expected a mapping, got {type(content).__name__}"
            )

        return content

    def merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two configuration dictionaries with deep merging.

        The override dict takes precedence over the base dict.
        Nested dictionaries are merged recursively.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (key in result and
                    isinstance(result[key], dict) and
                    isinstance(value, dict)):
                result[key] = self.merge_configs(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result
