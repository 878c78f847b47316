"""Clue -> registry entry resolution.

A clue is a registration name, a concrete class or an abstract class. Single
lookups try the exact name first and fall back to a structural scan over the
registry for strict subclasses of a class clue. List lookups always scan.
"""

import inspect
from typing import List, Type

from loguru import logger

from ..errors import AmbiguousResolutionError, UnresolvedDependencyError
from .metadata import Clue, clue_name
from .registry import RegistrationEntry, Registry


def is_strict_subclass(sub: Type, sup: Type) -> bool:
    """Whether ``sub`` derives from ``sup`` through at least one inheritance step.

    Only real inheritance counts: ``sup`` must appear in ``sub``'s MRO after
    ``sub`` itself. Virtual subclasses registered on an ABC and structural
    Protocol matches do not.
    """
    return sup in sub.__mro__[1:]


class Resolver:
    """Turns clues into registry entries."""

    def __init__(self, registry: Registry, *, strict_names: bool = False):
        """
        Args:
            registry: The registry to search
            strict_names: Reject an exact-name hit for a class clue when the
                registered class is neither the clue nor derived from it
        """
        self.registry = registry
        self.strict_names = strict_names

    def resolve_one(self, clue: Clue) -> RegistrationEntry:
        """Resolve a clue to exactly one entry.

        Raises:
            UnresolvedDependencyError: Nothing matches
            AmbiguousResolutionError: A class clue has several subclass matches
        """
        name = clue_name(clue)

        entry = self.registry.lookup(name)
        if entry is not None:
            if self.strict_names and inspect.isclass(clue) and not (
                entry.cls is clue or is_strict_subclass(entry.cls, clue)
            ):
                raise UnresolvedDependencyError.type_mismatch(name, entry.cls, clue)
            logger.debug(f"Resolved '{name}' by exact name")
            return entry

        if not inspect.isclass(clue):
            raise UnresolvedDependencyError(name)

        matched = self.matching_entries(clue)
        if len(matched) > 1:
            raise AmbiguousResolutionError(name, [e.name for e in matched])
        if not matched:
            raise UnresolvedDependencyError(name)

        logger.debug(f"Resolved '{name}' structurally to '{matched[0].name}'")
        return matched[0]

    def resolve_all(self, clue: Type) -> List[RegistrationEntry]:
        """Resolve a class clue to every strict-subclass entry, in registry order.

        Raises:
            UnresolvedDependencyError: No entry derives from ``clue``
        """
        if not inspect.isclass(clue):
            raise TypeError(f"List resolution needs a class clue, got {clue!r}")

        matched = self.matching_entries(clue)
        if not matched:
            raise UnresolvedDependencyError(clue.__name__)

        logger.debug(
            f"Resolved '{clue.__name__}' to {len(matched)} entries: "
            f"{', '.join(e.name for e in matched)}"
        )
        return matched

    def matching_entries(self, clue: Type) -> List[RegistrationEntry]:
        """Entries whose class strictly derives from ``clue``."""
        return [
            entry for entry in self.registry.entries()
            if is_strict_subclass(entry.cls, clue)
        ]
