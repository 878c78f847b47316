"""Error taxonomy for smartdi.

Every error raised by the engine derives from :class:`SmartDIError` and carries
an :class:`ErrorContext` with technical details and suggestions.
"""

from .base import ErrorContext, SmartDIError
from .types import (
    AmbiguousResolutionError,
    CircularDependencyError,
    ConfigurationError,
    DuplicateRegistrationError,
    UnresolvedDependencyError,
)

__all__ = [
    "SmartDIError",
    "ErrorContext",
    "DuplicateRegistrationError",
    "UnresolvedDependencyError",
    "AmbiguousResolutionError",
    "CircularDependencyError",
    "ConfigurationError",
]
