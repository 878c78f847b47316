"""Configuration management for smartdi.

This module provides:
- Hierarchical YAML loading (user, project, explicit file)
- Environment variable overrides
- Validation into typed settings
"""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .settings import LoggingSettings, ResolutionSettings, Settings, WiringSettings
from .validator import ConfigurationValidator

__all__ = [
    "ConfigurationManager",
    "ConfigurationLoader",
    "ConfigurationValidator",
    "Settings",
    "LoggingSettings",
    "ResolutionSettings",
    "WiringSettings",
]
