"""Module scanner for decorator-driven wiring.

Registration happens when a decorated class body runs, so wiring an
application means importing the modules that declare its injectables. The
scanner imports modules, walking packages, and reports what got registered.
"""

import importlib
import pkgutil
from types import ModuleType
from typing import Iterable, List, Optional

from loguru import logger

from .container import Container
from .registry import RegistrationEntry


class ModuleScanner:
    """Imports wiring modules and collects the entries they register."""

    def __init__(self, container: Container):
        """Initialize the scanner.

        Args:
            container: Container whose new entries are reported
        """
        self.container = container

    def scan_module(self, module_name: str) -> List[RegistrationEntry]:
        """Import a single module without descending into a package.

        Returns:
            Entries registered while importing
        """
        before = set(self.container.registry.names())
        self._import(module_name)
        return self._registered_since(before, module_name)

    def scan_package(self, package_name: str) -> List[RegistrationEntry]:
        """Import a package and every module beneath it.

        A plain module is imported on its own.

        Args:
            package_name: Dotted module or package path

        Returns:
            Entries registered while importing
        """
        before = set(self.container.registry.names())

        package = self._import(package_name)
        if package is not None and hasattr(package, "__path__"):
            for _, submodule_name, _ in pkgutil.walk_packages(
                package.__path__, package.__name__ + "."
            ):
                self._import(submodule_name)

        return self._registered_since(before, package_name)

    def scan_modules(self, module_names: Iterable[str]) -> List[RegistrationEntry]:
        """Scan several modules or packages.

        Returns:
            All entries registered while importing them
        """
        discovered = []
        for module_name in module_names:
            discovered.extend(self.scan_package(module_name))
        return discovered

    def _import(self, module_name: str) -> Optional[ModuleType]:
        logger.info(f"Scanning {module_name}")
        try:
            return importlib.import_module(module_name)
        except ImportError as e:
            logger.warning(f"Failed to import {module_name}: {e}")
            return None

    def _registered_since(self, before: set, module_name: str) -> List[RegistrationEntry]:
        discovered = [
            entry for entry in self.container.entries()
            if entry.name not in before
        ]
        for entry in discovered:
            logger.debug(f"Discovered '{entry.name}' in {module_name}")
        return discovered
