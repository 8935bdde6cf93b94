"""Option type: Some[T] | Nothing, the result of an unseeded reduction.

Reducing an empty collection without a seed has no well-defined value, so
`reduce` returns `Nothing` instead of a bare sentinel. Any non-empty (or seeded)
reduction returns `Some(accumulator)`.

Example:
    ```python
    from downdash import reduce, Nothing

    reduce([1, 2, 3], lambda a, b: a + b)  # Some(value=6)
    reduce([], lambda a, b: a + b) is Nothing  # True
    reduce([], lambda a, b: a + b).unwrap_or(0)  # 0
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present value of an Option.

    `Some(None)` is a legitimate value: reducing `[None]` yields `Some(None)`,
    which is not `Nothing`.

    Examples:
        >>> Some(6).unwrap()
        6
        >>> Some(6).map(lambda x: x * 2)
        Some(value=12)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Some containing f(value).
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function returning an Option to the contained value."""
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value if the predicate holds, else return Nothing."""
        if predicate(self.value):
            return self
        return Nothing


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent value of an Option.

    Use the `Nothing` singleton rather than instantiating this class; separate
    instances still compare equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, carrying msg.
        """
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing; there is no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing; there is no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by f."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing; there is no value to test."""
        return self


Nothing: NothingType = NothingType()
"""Singleton for the absent value."""


type Option[T] = Some[T] | NothingType
