"""@typeclass decorator and dispatch on the type of the first argument.

Traversal uses this to pick a view for the collection it is handed (sequence,
mapping or absent) without an if/else chain over concrete types. Instances may
be registered for concrete classes or for abstract base classes such as
`collections.abc.Sequence`, which concrete types satisfy by registration
rather than inheritance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type implementations.

    The decorated function supplies the name, docstring and signature; its body
    is never called. Register a catch-all with `.instance(object)`.

    Lookup order for a value of type `T`:

    1. an instance registered for exactly `T`;
    2. an instance registered for a class in `T.__mro__`;
    3. the first registered abstract base class that `T` is a virtual subclass
       of, in registration order.

    Resolved types are cached; registering a new instance clears the cache.
    Misses are not cached, so a type later registered with an ABC (for
    example `Sequence.register(T)`) dispatches on its next call.

    Example:
        ```python
        @typeclass
        def size(value) -> int:
            '''Number of elements.'''

        @size.instance(Sized)
        def _size_sized(value: Sized) -> int:
            return len(value)

        size([1, 2])  # 2
        ```
    """

    def __init__(self, signature_fn: F) -> None:
        super().__init__(signature_fn)
        self._self_name = signature_fn.__name__
        self._self_instances: dict[type, Callable[..., Any]] = {}
        self._self_cache: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for `type_` and its subclasses."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            self._self_cache.clear()
            return fn

        return decorator

    def _find_instance(self, value_type: type) -> Callable[..., Any] | None:
        if value_type in self._self_cache:
            return self._self_cache[value_type]

        found: Callable[..., Any] | None = None
        for base in value_type.__mro__:
            if base in self._self_instances:
                found = self._self_instances[base]
                break

        if found is None or found is self._self_instances.get(object):
            for registered, fn in self._self_instances.items():
                if registered is not object and issubclass(value_type, registered):
                    found = fn
                    break

        if found is not None:
            self._self_cache[value_type] = found
        return found

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the instance matching the first argument's type."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        value_type = type(args[0])
        instance_fn = self._find_instance(value_type)
        if instance_fn is None:
            raise NoInstanceError(self._self_name, value_type)
        return instance_fn(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F) -> TypeClass[F]:
    """Create a typeclass from a function signature.

    Args:
        fn: Function providing the typeclass name, docstring and signature.

    Returns:
        A TypeClass with no instances registered yet.
    """
    return TypeClass(fn)
