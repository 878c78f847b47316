"""Registry of injectable classes.

The registry maps a unique name to a :class:`RegistrationEntry` describing how
to build one family of instances. Entries are added once, at wiring time, and
are never removed.
"""

from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type, Union

from loguru import logger

from ..errors import DuplicateRegistrationError


class Scope(Enum):
    """Instance lifetimes."""
    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass(eq=False)
class RegistrationEntry:
    """How to build, and for singletons where to cache, one injectable family.

    Attributes:
        name: Unique registry key, the class name unless given explicitly
        cls: The class to construct
        args: Default positional constructor arguments
        kwargs: Default keyword constructor arguments
        scope: SINGLETON caches one shared instance, TRANSIENT builds per lookup
        instance: The cached singleton, once constructed
        constructed: Whether ``instance`` has been published
    """

    name: str
    cls: Type
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)
    scope: Scope = Scope.SINGLETON
    instance: Any = None
    constructed: bool = False

    @property
    def singleton(self) -> bool:
        return self.scope is Scope.SINGLETON

    def publish(self, instance: Any) -> None:
        """Cache the singleton instance."""
        self.instance = instance
        self.constructed = True

    def __repr__(self) -> str:
        return (
            f"RegistrationEntry(name={self.name!r}, cls={self.cls.__qualname__}, "
            f"scope={self.scope.value})"
        )


def make_entry(
    cls: Type,
    *,
    name: Optional[str] = None,
    args: Tuple[Any, ...] = (),
    kwargs: Optional[Dict[str, Any]] = None,
    scope: Union[Scope, str] = Scope.SINGLETON,
) -> RegistrationEntry:
    """Build a registration entry with the defaults applied."""
    if isinstance(scope, str):
        scope = Scope(scope)
    return RegistrationEntry(
        name=name or cls.__name__,
        cls=cls,
        args=tuple(args),
        kwargs=dict(kwargs or {}),
        scope=scope,
    )


class Registry:
    """Name-keyed table of registration entries, in insertion order."""

    def __init__(self):
        self._entries: Dict[str, RegistrationEntry] = {}
        self._lock = Lock()

    def register(self, entry: RegistrationEntry) -> None:
        """Insert an entry.

        Raises:
            DuplicateRegistrationError: If the name is already taken. The
                registry is left untouched.
        """
        with self._lock:
            existing = self._entries.get(entry.name)
            if existing is not None:
                raise DuplicateRegistrationError(
                    entry.name, existing=existing.cls, rejected=entry.cls
                )
            self._entries[entry.name] = entry

        logger.debug(
            f"Registered injectable '{entry.name}' -> {entry.cls.__qualname__} "
            f"(scope={entry.scope.value})"
        )

    def lookup(self, name: str) -> Optional[RegistrationEntry]:
        """Exact-key lookup."""
        return self._entries.get(name)

    def entries(self) -> List[RegistrationEntry]:
        """All entries in insertion order."""
        return list(self._entries.values())

    def names(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistrationEntry]:
        return iter(self.entries())
