"""Base error class for smartdi.

Every error carries an :class:`ErrorContext` describing the injectable it is
about. Subclasses fill the context before the base initializer runs, so the
loguru record emitted on creation already holds the full details.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel, Field


class ErrorContext(BaseModel):
    """What an error is about and how to get past it."""

    timestamp: datetime = Field(default_factory=datetime.now)
    # Registration name or clue the error concerns
    subject: Optional[str] = None
    technical_details: Dict[str, Any] = Field(default_factory=dict)
    suggestions: List[str] = Field(default_factory=list)
    related_errors: List[Dict[str, str]] = Field(default_factory=list)

    def add_suggestion(self, suggestion: str) -> None:
        self.suggestions.append(suggestion)

    def add_technical_detail(self, key: str, value: Any) -> None:
        self.technical_details[key] = value

    def add_related_error(self, error: BaseException) -> None:
        self.related_errors.append({"type": type(error).__name__, "message": str(error)})


T = TypeVar("T", bound="SmartDIError")


class SmartDIError(Exception):
    """Root of the smartdi error hierarchy."""

    code: ClassVar[str] = "SMARTDI"

    def __init__(
        self,
        message: str,
        *,
        subject: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        suggestions: Iterable[str] = (),
        cause: Optional[BaseException] = None,
        error_code: Optional[str] = None,
    ):
        """
        Args:
            message: Human-readable error message
            subject: Registration name or clue the error concerns
            details: Technical details for debugging and ``to_dict``
            suggestions: Hints for resolving the error
            cause: Exception this error was raised from
            error_code: Overrides the class's code
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.error_code = error_code or self.code
        self.context = ErrorContext(
            subject=subject,
            technical_details=dict(details or {}),
            suggestions=list(suggestions),
        )
        if cause is not None:
            self.context.add_related_error(cause)

        logger.bind(
            error_code=self.error_code,
            subject=subject,
            details=self.context.technical_details,
        ).error(message)

    def with_context(self: T, **details: Any) -> T:
        """Attach extra technical details."""
        self.context.technical_details.update(details)
        return self

    def with_suggestion(self: T, suggestion: str) -> T:
        self.context.add_suggestion(suggestion)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the error."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context.model_dump(mode="json"),
            "cause": str(self.cause) if self.cause is not None else None,
        }

    def format_for_cli(self, verbose: bool = False) -> str:
        """Rich console markup: message and hints, plus details when verbose."""
        lines = [f"[red]Error[/red]: {self.message}", f"[dim]Code: {self.error_code}[/dim]"]

        if self.context.suggestions:
            lines.append("\n[yellow]Suggestions:[/yellow]")
            lines.extend(f"  • {s}" for s in self.context.suggestions)

        if verbose:
            if self.context.technical_details:
                lines.append("\n[dim]Technical Details:[/dim]")
                lines.extend(
                    f"  {key}: {value}"
                    for key, value in self.context.technical_details.items()
                )
            for related in self.context.related_errors:
                lines.append(f"\n[dim]Caused by {related['type']}:[/dim] {related['message']}")

        return "\n".join(lines)
