"""Instance construction and field injection."""

from typing import Any, Dict, Optional, Sequence

from loguru import logger

from .guard import CycleGuard
from .metadata import InjectionDeclaration, MetadataStore
from .registry import RegistrationEntry
from .resolver import Resolver


class InstanceFactory:
    """Builds instances from registry entries and injects their declared fields.

    Singletons are published to their entry right after construction and
    before any field is injected. A singleton reached again through a cycle is
    therefore returned from the cache, possibly with fields still missing,
    instead of being built a second time. Transients are tracked by the
    :class:`CycleGuard` while their fields are injected.
    """

    def __init__(self, resolver: Resolver, metadata: MetadataStore):
        self.resolver = resolver
        self.metadata = metadata

    def obtain(
        self,
        entry: RegistrationEntry,
        guard: CycleGuard,
        args: Sequence[Any] = (),
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Return an instance for ``entry``.

        Args:
            entry: The entry to build
            guard: Cycle guard of the current top-level call
            args: Positional constructor overrides
            kwargs: Keyword constructor overrides. Overrides, when any are
                given, replace the entry's defaults as a whole.

        Returns:
            The cached singleton, or a newly built and injected instance
        """
        if entry.singleton and entry.constructed:
            return entry.instance

        if args or kwargs:
            call_args, call_kwargs = tuple(args), dict(kwargs or {})
        else:
            call_args, call_kwargs = entry.args, dict(entry.kwargs)

        instance = entry.cls(*call_args, **call_kwargs)
        logger.debug(f"Constructed {entry.cls.__qualname__} for '{entry.name}'")

        if entry.singleton:
            entry.publish(instance)

        declarations = self.metadata.declarations_for(type(instance))
        if not declarations:
            return instance

        if entry.singleton:
            self._inject(instance, declarations, guard)
        else:
            with guard.constructing(entry.name):
                self._inject(instance, declarations, guard)

        return instance

    def _inject(
        self,
        instance: Any,
        declarations: Sequence[InjectionDeclaration],
        guard: CycleGuard,
    ) -> None:
        for declaration in declarations:
            if declaration.multiple:
                value: Any = [
                    self.obtain(match, guard, declaration.args, declaration.kwargs)
                    for match in self.resolver.resolve_all(declaration.clue)
                ]
            else:
                match = self.resolver.resolve_one(declaration.clue)
                value = self.obtain(match, guard, declaration.args, declaration.kwargs)

            setattr(instance, declaration.property_key, value)
            logger.debug(
                f"Injected {type(instance).__qualname__}.{declaration.property_key}"
            )
