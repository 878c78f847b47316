"""Dependency injection container for smartdi.

The container binds a :class:`Registry`, a :class:`Resolver` and an
:class:`InstanceFactory` together and exposes the public resolution surface.
"""

from threading import RLock
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union, overload

from .factory import InstanceFactory
from .guard import CycleGuard
from .metadata import Clue, MetadataStore, get_metadata_store
from .registry import RegistrationEntry, Registry, Scope, make_entry
from .resolver import Resolver

T = TypeVar("T")


class Container:
    """Registry-backed dependency injection container.

    Provides:
    - Name-keyed registration of singleton and transient classes
    - Resolution by name, concrete class or abstract class
    - Recursive field injection with cycle detection

    Top-level ``get`` / ``get_all`` calls on one container are serialised by a
    re-entrant lock, so a singleton is never constructed twice by racing
    threads.
    """

    def __init__(
        self,
        registry: Optional[Registry] = None,
        metadata: Optional[MetadataStore] = None,
        *,
        strict_names: bool = False,
    ):
        """Initialize the container.

        Args:
            registry: Registry to use, a fresh one by default
            metadata: Injection metadata store, the process-wide one by default
            strict_names: See :class:`Resolver`
        """
        self.registry = registry if registry is not None else Registry()
        self.metadata = metadata if metadata is not None else get_metadata_store()
        self.resolver = Resolver(self.registry, strict_names=strict_names)
        self.factory = InstanceFactory(self.resolver, self.metadata)
        self._lock = RLock()

    @property
    def strict_names(self) -> bool:
        return self.resolver.strict_names

    @strict_names.setter
    def strict_names(self, value: bool) -> None:
        self.resolver.strict_names = value

    def register(
        self,
        cls: Type[T],
        *,
        name: Optional[str] = None,
        args: Tuple[Any, ...] = (),
        kwargs: Optional[dict] = None,
        scope: Union[Scope, str] = Scope.SINGLETON,
    ) -> RegistrationEntry:
        """Register a class.

        Args:
            cls: The class to construct
            name: Registry name, ``cls.__name__`` by default
            args: Default positional constructor arguments
            kwargs: Default keyword constructor arguments
            scope: Singleton or transient lifetime

        Returns:
            The new registry entry

        Raises:
            DuplicateRegistrationError: If the name is already registered
        """
        entry = make_entry(cls, name=name, args=args, kwargs=kwargs, scope=scope)
        self.registry.register(entry)
        return entry

    @overload
    def get(self, clue: Type[T], *args: Any, **kwargs: Any) -> T: ...

    @overload
    def get(self, clue: str, *args: Any, **kwargs: Any) -> Any: ...

    def get(self, clue: Clue, *args: Any, **kwargs: Any) -> Any:
        """Resolve a clue to a fully injected instance.

        Args:
            clue: Registration name, concrete class or abstract class
            *args: Positional constructor overrides for this call
            **kwargs: Keyword constructor overrides for this call. Ignored for
                an already cached singleton.

        Returns:
            The resolved instance

        Raises:
            UnresolvedDependencyError: Nothing matches the clue or a nested one
            AmbiguousResolutionError: A class clue matches several subclasses
            CircularDependencyError: A transient is re-entered during injection
        """
        with self._lock:
            entry = self.resolver.resolve_one(clue)
            return self.factory.obtain(entry, CycleGuard(), args, kwargs)

    def get_all(self, clue: Type[T], *args: Any, **kwargs: Any) -> List[T]:
        """Resolve every registered strict subclass of ``clue``.

        Args:
            clue: Class whose registered descendants are wanted
            *args: Positional constructor overrides, applied to each entry
            **kwargs: Keyword constructor overrides, applied to each entry

        Returns:
            Instances in registration order

        Raises:
            UnresolvedDependencyError: No registered class derives from ``clue``
        """
        with self._lock:
            guard = CycleGuard()
            return [
                self.factory.obtain(entry, guard, args, kwargs)
                for entry in self.resolver.resolve_all(clue)
            ]

    def has(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self.registry

    def entries(self) -> List[RegistrationEntry]:
        """All registry entries in registration order."""
        return self.registry.entries()

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __len__(self) -> int:
        return len(self.registry)
