"""smartdi: decorator-driven dependency injection.

Register classes with ``@injectable``, declare injected fields with
``inject`` / ``inject_array`` and resolve with ``get`` / ``get_all``.
"""

from typing import Any, List, Type, TypeVar

from .bootstrap import ApplicationBootstrap, bootstrap
from .di import (
    Container,
    Registry,
    RegistrationEntry,
    Scope,
    get_container,
    inject,
    inject_array,
    injectable,
    reset_container,
)
from .di.metadata import Clue
from .errors import (
    AmbiguousResolutionError,
    CircularDependencyError,
    ConfigurationError,
    DuplicateRegistrationError,
    SmartDIError,
    UnresolvedDependencyError,
)

__version__ = "0.1.0"

T = TypeVar("T")


def get(clue: Clue, *args: Any, **kwargs: Any) -> Any:
    """Resolve a clue from the process-wide container."""
    return get_container().get(clue, *args, **kwargs)


def get_all(clue: Type[T], *args: Any, **kwargs: Any) -> List[T]:
    """Resolve every registered strict subclass from the process-wide container."""
    return get_container().get_all(clue, *args, **kwargs)


__all__ = [
    # Resolution
    "get",
    "get_all",

    # Decorators
    "injectable",
    "inject",
    "inject_array",

    # Container
    "Container",
    "Registry",
    "RegistrationEntry",
    "Scope",
    "get_container",
    "reset_container",

    # Bootstrap
    "bootstrap",
    "ApplicationBootstrap",

    # Errors
    "SmartDIError",
    "DuplicateRegistrationError",
    "UnresolvedDependencyError",
    "AmbiguousResolutionError",
    "CircularDependencyError",
    "ConfigurationError",
]
