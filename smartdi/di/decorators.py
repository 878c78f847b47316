"""Registration and injection-site decorators.

```python
@injectable
class Logger: ...

@injectable(multiple=True)
class ConsoleSink(Sink):
    logger = inject(Logger)

@injectable(name="pipeline")
class Pipeline:
    sinks = inject_array(Sink)
```
"""

from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar, Union, overload

from .container import Container
from .metadata import Cardinality, Clue, InjectionDeclaration, get_metadata_store
from .registry import Scope

T = TypeVar("T")


def _normalize_scope(
    multiple: Optional[bool], scope: Optional[Union[Scope, str]]
) -> Scope:
    if scope is None:
        return Scope.TRANSIENT if multiple else Scope.SINGLETON

    scope_enum = Scope(scope) if isinstance(scope, str) else scope
    if multiple is not None and multiple != (scope_enum is Scope.TRANSIENT):
        raise ValueError(
            f"multiple={multiple} conflicts with scope={scope_enum.value}"
        )
    return scope_enum


@overload
def injectable(cls: Type[T]) -> Type[T]: ...


@overload
def injectable(
    cls: None = None,
    *,
    name: Optional[str] = None,
    args: Tuple[Any, ...] = (),
    kwargs: Optional[Dict[str, Any]] = None,
    multiple: Optional[bool] = None,
    scope: Optional[Union[Scope, str]] = None,
    container: Optional[Container] = None,
) -> Callable[[Type[T]], Type[T]]: ...


def injectable(
    cls: Optional[Type[T]] = None,
    *,
    name: Optional[str] = None,
    args: Tuple[Any, ...] = (),
    kwargs: Optional[Dict[str, Any]] = None,
    multiple: Optional[bool] = None,
    scope: Optional[Union[Scope, str]] = None,
    container: Optional[Container] = None,
) -> Union[Type[T], Callable[[Type[T]], Type[T]]]:
    """
    Register a class as injectable.

    Works as ``@injectable`` and as ``@injectable(...)``.

    Args:
        name: Registry name, the class name by default
        args: Default positional constructor arguments
        kwargs: Default keyword constructor arguments
        multiple: True for a new instance per resolution (transient),
            False for one shared instance (singleton, the default)
        scope: Alternative spelling of ``multiple``
        container: Container to register with, the process-wide one by default

    Raises:
        DuplicateRegistrationError: If the name is already registered
        ValueError: If ``multiple`` and ``scope`` disagree
    """
    scope_enum = _normalize_scope(multiple, scope)

    def decorator(cls: Type[T]) -> Type[T]:
        if container is not None:
            target = container
        else:
            from . import get_container
            target = get_container()

        target.register(cls, name=name, args=args, kwargs=kwargs, scope=scope_enum)
        return cls

    if cls is None:
        return decorator
    return decorator(cls)


class InjectionSite:
    """Class-body marker for an injected field.

    On class creation it records an :class:`InjectionDeclaration` for the
    owner. The container later assigns the resolved value as a plain instance
    attribute, which shadows the marker.
    """

    def __init__(
        self,
        cardinality: Cardinality,
        clue: Clue,
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
    ):
        self.cardinality = cardinality
        self.clue = clue
        self.args = args
        self.kwargs = kwargs
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        get_metadata_store().declare(
            owner,
            InjectionDeclaration(
                property_key=name,
                cardinality=self.cardinality,
                clue=self.clue,
                args=self.args,
                kwargs=self.kwargs,
            ),
        )

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        raise AttributeError(
            f"'{type(instance).__name__}.{self.name}' has not been injected"
        )

    def __repr__(self) -> str:
        clue = self.clue if isinstance(self.clue, str) else self.clue.__qualname__
        return f"InjectionSite({self.cardinality.value}, {clue!r})"


def inject(clue: Clue, *args: Any, **kwargs: Any) -> Any:
    """
    Declare a field that receives one resolved instance.

    Args:
        clue: Registration name, concrete class or abstract class
        *args: Positional constructor overrides for the injected instance
        **kwargs: Keyword constructor overrides for the injected instance
    """
    return InjectionSite(Cardinality.SINGLE, clue, args, kwargs)


def inject_array(clue: Type, *args: Any, **kwargs: Any) -> Any:
    """
    Declare a field that receives a list of every registered strict subclass.

    Args:
        clue: Class whose registered descendants are injected
        *args: Positional constructor overrides, applied to each instance
        **kwargs: Keyword constructor overrides, applied to each instance
    """
    if isinstance(clue, str):
        raise TypeError("inject_array needs a class clue, not a name")
    return InjectionSite(Cardinality.MULTIPLE, clue, args, kwargs)
