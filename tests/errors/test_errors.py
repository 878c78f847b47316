"""Tests for the error hierarchy."""

import pytest
from loguru import logger

from smartdi.errors import (
    AmbiguousResolutionError,
    CircularDependencyError,
    ConfigurationError,
    DuplicateRegistrationError,
    ErrorContext,
    SmartDIError,
    UnresolvedDependencyError,
)


class Existing:
    pass


class Rejected:
    pass


class TestErrorCodes:
    """Test generated error codes."""

    @pytest.mark.parametrize(
        "error, code",
        [
            (SmartDIError("boom"), "SMARTDI"),
            (DuplicateRegistrationError("A"), "DUPLICATE_REGISTRATION"),
            (UnresolvedDependencyError("A"), "UNRESOLVED_DEPENDENCY"),
            (AmbiguousResolutionError("A", ["B", "C"]), "AMBIGUOUS_RESOLUTION"),
            (CircularDependencyError("A"), "CIRCULAR_DEPENDENCY"),
            (ConfigurationError("bad"), "CONFIGURATION"),
        ],
    )
    def test_generated_code(self, error, code):
        assert error.error_code == code

    def test_explicit_code(self):
        error = SmartDIError("boom", error_code="CUSTOM")
        assert error.error_code == "CUSTOM"

    def test_invalid_file_code(self, tmp_path):
        error = ConfigurationError.invalid_file(tmp_path / "smartdi.yaml", "not a mapping")

        assert error.error_code == "CONFIG_INVALID_FILE"
        assert "smartdi.yaml" in error.context.technical_details["config_path"]
        assert error.context.suggestions


class TestErrorTypes:
    """Test the engine's error types."""

    def test_duplicate_registration(self):
        error = DuplicateRegistrationError("clock", existing=Existing, rejected=Rejected)

        assert str(error) == "Duplicated injectable name 'clock'"
        assert error.name == "clock"
        assert error.context.technical_details["existing_class"] == "Existing"
        assert error.context.technical_details["rejected_class"] == "Rejected"

    def test_unresolved_is_lookup_error(self):
        """Unresolved dependencies can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise UnresolvedDependencyError("Repository")

    def test_type_mismatch(self):
        error = UnresolvedDependencyError.type_mismatch("Storage", Existing, Rejected)

        assert error.name == "Storage"
        assert str(error) == (
            "Can not resolve injectable 'Storage': registered class 'Existing' "
            "does not derive from 'Rejected'"
        )
        assert error.context.subject == "Storage"
        assert error.context.technical_details["registered_class"] == "Existing"
        assert error.context.technical_details["clue"] == "Rejected"
        assert "strict_names" in error.context.suggestions[-1]

    def test_ambiguous_candidates(self):
        error = AmbiguousResolutionError("Sink", ("FileSink", "ConsoleSink"))

        assert error.candidates == ["FileSink", "ConsoleSink"]
        assert "FileSink, ConsoleSink" in str(error)

    def test_circular_chain(self):
        error = CircularDependencyError("A", chain=["A", "B"])

        assert error.chain == ["A", "B", "A"]
        assert str(error) == "Circular dependency detected: A -> B -> A"

    def test_configuration_details(self, tmp_path):
        error = ConfigurationError(
            "bad level", config_path=tmp_path, field_path="logging.level"
        )

        assert error.context.technical_details["field_path"] == "logging.level"
        assert error.context.technical_details["config_path"] == str(tmp_path)


class TestSmartDIError:
    """Test the shared error behaviour."""

    def test_fluent_context(self):
        error = SmartDIError("boom").with_context(name="A").with_suggestion("retry")

        assert error.context.technical_details == {"name": "A"}
        assert error.context.suggestions == ["retry"]

    def test_cause_recorded(self):
        cause = KeyError("missing")
        error = SmartDIError("wrapped", cause=cause)

        assert error.cause is cause
        assert error.context.related_errors == [
            {"type": "KeyError", "message": "'missing'"}
        ]
        assert "Caused by KeyError" in error.format_for_cli(verbose=True)

    def test_log_record_carries_details(self):
        """The record logged on creation already holds the subclass details."""
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="ERROR")
        try:
            UnresolvedDependencyError.type_mismatch("Storage", Existing, Rejected)
        finally:
            logger.remove(handler_id)

        extra = records[-1]["extra"]
        assert extra["error_code"] == "UNRESOLVED_DEPENDENCY"
        assert extra["subject"] == "Storage"
        assert extra["details"]["registered_class"] == "Existing"
        assert extra["details"]["clue"] == "Rejected"

    def test_to_dict(self):
        error = UnresolvedDependencyError("Repository")
        data = error.to_dict()

        assert data["error_type"] == "UnresolvedDependencyError"
        assert data["error_code"] == "UNRESOLVED_DEPENDENCY"
        assert data["message"] == "Can not resolve injectable 'Repository'"
        assert data["context"]["technical_details"] == {"name": "Repository"}
        assert data["cause"] is None

    def test_format_for_cli(self):
        error = CircularDependencyError("A", chain=["A"])

        brief = error.format_for_cli()
        verbose = error.format_for_cli(verbose=True)

        assert "Circular dependency detected: A -> A" in brief
        assert "Suggestions" in brief
        assert "Technical Details" not in brief
        assert "chain" in verbose

    def test_context_defaults(self):
        context = ErrorContext()

        assert context.suggestions == []
        assert context.technical_details == {}
