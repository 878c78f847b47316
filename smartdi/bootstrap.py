"""Application bootstrap for smartdi.

The bootstrap process follows this order:
1. Configuration loading and validation
2. Logging setup
3. Process-wide container setup
4. Import of the configured wiring modules
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from .config import ConfigurationManager
from .di import Container, ModuleScanner, get_container
from .utils.logging_config import setup_logging


class ApplicationBootstrap:
    """Wires the process-wide container from configuration."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        user_config_path: Optional[Path] = None,
        project_config_path: Optional[Path] = None,
    ):
        """Initialize bootstrap.

        Args:
            config_path: Explicit config file path
            user_config_path: User config file path
            project_config_path: Project config file path
        """
        self.config_manager = ConfigurationManager(
            user_config_path=user_config_path,
            project_config_path=project_config_path,
            config_path=config_path,
        )
        self.container: Optional[Container] = None
        self._initialized = False

    def initialize(self) -> Container:
        """Run the bootstrap once.

        Returns:
            The configured process-wide container

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if self._initialized:
            return self.container

        settings = self.config_manager.settings

        setup_logging(settings.logging.level, settings.logging.file)

        self.container = get_container()
        self.container.strict_names = settings.resolution.strict_names

        if settings.wiring.modules:
            discovered = ModuleScanner(self.container).scan_modules(settings.wiring.modules)
            logger.info(
                f"Wired {len(discovered)} injectables from "
                f"{len(settings.wiring.modules)} modules"
            )

        self._initialized = True
        return self.container


def bootstrap(config_path: Optional[Path] = None) -> Container:
    """Load configuration and wire the process-wide container.

    Args:
        config_path: Optional explicit config file

    Returns:
        The configured process-wide container
    """
    return ApplicationBootstrap(config_path=config_path).initialize()
