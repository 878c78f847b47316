"""Dependency injection engine.

This package provides:
- A name-keyed registry of singleton and transient classes
- Resolution by name, concrete class or abstract class
- Recursive, cycle-safe construction and field injection
- Decorators for registration and injection-site declaration
"""

from typing import Optional

from .container import Container
from .decorators import InjectionSite, inject, inject_array, injectable
from .factory import InstanceFactory
from .guard import CycleGuard
from .metadata import (
    Cardinality,
    InjectionDeclaration,
    MetadataStore,
    get_metadata_store,
)
from .registry import RegistrationEntry, Registry, Scope
from .resolver import Resolver, is_strict_subclass
from .scanner import ModuleScanner

# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the process-wide container, creating it on first use.

    Returns:
        The global Container instance
    """
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Discard the process-wide container and everything registered in it."""
    global _container
    _container = None


__all__ = [
    # Container
    "Container",
    "get_container",
    "reset_container",

    # Engine parts
    "Registry",
    "RegistrationEntry",
    "Scope",
    "Resolver",
    "is_strict_subclass",
    "CycleGuard",
    "InstanceFactory",

    # Metadata
    "MetadataStore",
    "InjectionDeclaration",
    "Cardinality",
    "get_metadata_store",

    # Decorators
    "injectable",
    "inject",
    "inject_array",
    "InjectionSite",

    # Scanner
    "ModuleScanner",
]
