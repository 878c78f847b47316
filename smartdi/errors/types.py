"""Specific error types raised by the smartdi engine."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from .base import SmartDIError


class DuplicateRegistrationError(SmartDIError):
    """A registration name collides with an existing registry entry."""

    code = "DUPLICATE_REGISTRATION"

    def __init__(
        self,
        name: str,
        *,
        existing: Optional[type] = None,
        rejected: Optional[type] = None,
        **kwargs: Any,
    ):
        details = {"name": name}
        if existing is not None:
            details["existing_class"] = existing.__qualname__
        if rejected is not None:
            details["rejected_class"] = rejected.__qualname__
        super().__init__(
            f"Duplicated injectable name '{name}'",
            subject=name,
            details=details,
            suggestions=["Pass an explicit name=... to one of the registrations"],
            **kwargs,
        )
        self.name = name


class UnresolvedDependencyError(SmartDIError, LookupError):
    """No registry entry matches a clue, by exact name or by subclass scan."""

    code = "UNRESOLVED_DEPENDENCY"

    def __init__(
        self,
        name: str,
        *,
        reason: Optional[str] = None,
        details: Optional[dict] = None,
        **kwargs: Any,
    ):
        message = f"Can not resolve injectable '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            subject=name,
            details={"name": name, **(details or {})},
            **kwargs,
        )
        self.name = name

    @classmethod
    def type_mismatch(
        cls, name: str, registered: type, clue: type
    ) -> "UnresolvedDependencyError":
        """Exact-name hit rejected because the registered class does not fit the clue."""
        return cls(
            name,
            reason=(
                f"registered class '{registered.__qualname__}' does not derive "
                f"from '{clue.__qualname__}'"
            ),
            details={
                "registered_class": registered.__qualname__,
                "clue": clue.__qualname__,
            },
            suggestions=[
                "Rename the registration or disable resolution.strict_names"
            ],
        )


class AmbiguousResolutionError(SmartDIError):
    """A single-cardinality structural lookup matched more than one entry."""

    code = "AMBIGUOUS_RESOLUTION"

    def __init__(self, name: str, candidates: Sequence[str], **kwargs: Any):
        self.name = name
        self.candidates = list(candidates)
        super().__init__(
            f"Multiple injectable classes found for '{name}': {', '.join(self.candidates)}",
            subject=name,
            details={"name": name, "candidates": self.candidates},
            suggestions=[
                "Inject by registration name, or use inject_array to receive all of them"
            ],
            **kwargs,
        )


class CircularDependencyError(SmartDIError):
    """A transient entry was re-entered while still under construction."""

    code = "CIRCULAR_DEPENDENCY"

    def __init__(self, name: str, chain: Iterable[str] = (), **kwargs: Any):
        self.name = name
        self.chain = list(chain) + [name]
        super().__init__(
            f"Circular dependency detected: {' -> '.join(self.chain)}",
            subject=name,
            details={"name": name, "chain": self.chain},
            suggestions=["Register one of the classes on the cycle as a singleton"],
            **kwargs,
        )


class ConfigurationError(SmartDIError):
    """Configuration-related errors."""

    code = "CONFIGURATION"

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[Path] = None,
        field_path: Optional[str] = None,
        **kwargs: Any,
    ):
        details = {}
        if config_path:
            details["config_path"] = str(config_path)
        if field_path:
            details["field_path"] = field_path
        super().__init__(message, subject=field_path, details=details, **kwargs)

    @classmethod
    def invalid_file(cls, config_path: Path, reason: str) -> "ConfigurationError":
        """Create error for an unreadable configuration file."""
        return cls(
            f"Invalid configuration file {config_path}: {reason}",
            config_path=config_path,
            error_code="CONFIG_INVALID_FILE",
            suggestions=["The file must contain a YAML mapping"],
        )
