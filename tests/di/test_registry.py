"""Tests for the registry and registration entries."""

import pytest

from smartdi.di.registry import Registry, RegistrationEntry, Scope, make_entry
from smartdi.errors import DuplicateRegistrationError


class Logger:
    pass


class FileLogger(Logger):
    pass


class TestMakeEntry:
    """Test entry construction defaults."""

    def test_defaults(self):
        """Name defaults to the class name, scope to singleton."""
        entry = make_entry(Logger)

        assert entry.name == "Logger"
        assert entry.cls is Logger
        assert entry.args == ()
        assert entry.kwargs == {}
        assert entry.scope is Scope.SINGLETON
        assert entry.singleton
        assert not entry.constructed

    def test_explicit_options(self):
        """Explicit name, arguments and string scope are applied."""
        entry = make_entry(
            Logger, name="log", args=[1, 2], kwargs={"level": "info"}, scope="transient"
        )

        assert entry.name == "log"
        assert entry.args == (1, 2)
        assert entry.kwargs == {"level": "info"}
        assert entry.scope is Scope.TRANSIENT
        assert not entry.singleton

    def test_invalid_scope_string(self):
        """Unknown scope names are rejected."""
        with pytest.raises(ValueError):
            make_entry(Logger, scope="request")

    def test_publish(self):
        """Publishing caches the instance, even a falsy one."""
        entry = make_entry(Logger)
        entry.publish(0)

        assert entry.constructed
        assert entry.instance == 0


class TestRegistry:
    """Test registry insertion and lookup."""

    def test_register_and_lookup(self):
        """Registered entries are found by exact name."""
        registry = Registry()
        entry = make_entry(Logger)

        registry.register(entry)

        assert registry.lookup("Logger") is entry
        assert registry.lookup("logger") is None
        assert "Logger" in registry
        assert len(registry) == 1

    def test_duplicate_name_rejected(self):
        """A second entry with the same name fails and is never inserted."""
        registry = Registry()
        first = make_entry(Logger, name="log")
        registry.register(first)

        with pytest.raises(DuplicateRegistrationError) as exc_info:
            registry.register(make_entry(FileLogger, name="log"))

        assert exc_info.value.name == "log"
        assert registry.lookup("log") is first
        assert len(registry) == 1

    def test_duplicate_default_name(self):
        """Registering the same class twice collides on its class name."""
        registry = Registry()
        registry.register(make_entry(Logger))

        with pytest.raises(DuplicateRegistrationError):
            registry.register(make_entry(Logger))

    def test_insertion_order(self):
        """Entries are listed in registration order."""
        registry = Registry()
        for name in ("c", "a", "b"):
            registry.register(make_entry(Logger, name=name))

        assert registry.names() == ["c", "a", "b"]
        assert [entry.name for entry in registry.entries()] == ["c", "a", "b"]
        assert [entry.name for entry in registry] == ["c", "a", "b"]

    def test_entries_returns_copy(self):
        """Mutating the returned list leaves the registry intact."""
        registry = Registry()
        registry.register(make_entry(Logger))

        registry.entries().clear()

        assert len(registry) == 1

    def test_entry_repr(self):
        """Entries render their name, class and scope."""
        entry = RegistrationEntry(name="log", cls=Logger, scope=Scope.TRANSIENT)

        assert "log" in repr(entry)
        assert "transient" in repr(entry)
