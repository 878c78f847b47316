"""Configuration validation against the typed settings schema."""

from typing import Any, Dict, List

from pydantic import ValidationError

from ..errors import ConfigurationError
from .settings import Settings


class ConfigurationValidator:
    """Configuration validation utility."""

    def __init__(self):
        self.validation_errors: List[str] = []

    def validate(self, config: Dict[str, Any]) -> Settings:
        """Validate a merged configuration dictionary.

        Args:
            config: Configuration to validate

        Returns:
            The typed settings

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.validation_errors.clear()

        try:
            return Settings.model_validate(config)
        except ValidationError as e:
            for error in e.errors():
                field_path = ".".join(str(part) for part in error["loc"])
                self.validation_errors.append(f"{field_path}: {error['msg']}")

            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(self.validation_errors),
                field_path=".".join(str(part) for part in e.errors()[0]["loc"]),
                cause=e,
            ) from e
