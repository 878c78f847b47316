"""Injection metadata side-table.

Injection sites are declared in class bodies and recorded here, keyed by the
declaring class, at class-definition time. The instance factory only reads it.
"""

from dataclasses import dataclass, field
from enum import Enum
from threading import Lock
from typing import Any, Dict, List, Tuple, Type, Union

Clue = Union[str, Type]


class Cardinality(Enum):
    """How many instances an injection site receives."""
    SINGLE = "single"
    MULTIPLE = "multiple"


def clue_name(clue: Clue) -> str:
    """Registry name a clue looks up: the string itself or the class name."""
    return clue if isinstance(clue, str) else clue.__name__


@dataclass(frozen=True)
class InjectionDeclaration:
    """One injected field on a target class.

    Attributes:
        property_key: Attribute name the resolved value is assigned to
        cardinality: SINGLE for one instance, MULTIPLE for a list
        clue: Registration name, concrete class or abstract class
        args: Positional constructor overrides for this site
        kwargs: Keyword constructor overrides for this site
    """

    property_key: str
    cardinality: Cardinality
    clue: Clue
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @property
    def multiple(self) -> bool:
        return self.cardinality is Cardinality.MULTIPLE


class MetadataStore:
    """Class -> {property key -> InjectionDeclaration} mapping."""

    def __init__(self):
        self._declarations: Dict[Type, Dict[str, InjectionDeclaration]] = {}
        self._lock = Lock()

    def declare(self, cls: Type, declaration: InjectionDeclaration) -> None:
        """Record an injection site declared directly on ``cls``."""
        with self._lock:
            self._declarations.setdefault(cls, {})[declaration.property_key] = declaration

    def own_declarations(self, cls: Type) -> List[InjectionDeclaration]:
        """Declarations made in ``cls``'s own body, in declaration order."""
        return list(self._declarations.get(cls, {}).values())

    def declarations_for(self, cls: Type) -> List[InjectionDeclaration]:
        """Effective declarations of ``cls``, inherited ones first.

        A subclass redeclaring an inherited key replaces it in place.
        """
        merged: Dict[str, InjectionDeclaration] = {}
        for klass in reversed(cls.__mro__):
            for key, declaration in self._declarations.get(klass, {}).items():
                merged[key] = declaration
        return list(merged.values())

    def __contains__(self, cls: object) -> bool:
        return cls in self._declarations

    def clear(self) -> None:
        """Drop all declarations (mainly for testing)."""
        with self._lock:
            self._declarations.clear()


_default_store = MetadataStore()


def get_metadata_store() -> MetadataStore:
    """The process-wide store written by :func:`inject` / :func:`inject_array`."""
    return _default_store
