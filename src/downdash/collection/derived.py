"""Operations derived from traversal and reduction.

Each one is a single pass over the collection. `every` and `includes` do not
stop the traversal early: once the answer is known they skip the predicate or
comparison, but every remaining element is still visited.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from downdash.collection.lookup import strict_equals
from downdash.collection.reduction import fold
from downdash.collection.traverse import Collection, each

__all__ = ['all', 'every', 'filter', 'includes', 'map', 'partition']


def map[T, U](collection: Collection[Any, T], transform: Callable[[T], U]) -> list[U]:  # noqa: A001
    """Apply `transform` to every value, in traversal order.

    Example:
        ```python
        map([1, 2], lambda n: n * 3)  # [3, 6]
        map({'a': 1, 'b': 2}, str)  # ['1', '2']
        ```
    """
    results: list[U] = []
    each(collection, lambda value, _key, _collection: results.append(transform(value)))
    return results


def filter[T](collection: Collection[Any, T], predicate: Callable[[T], object]) -> list[T]:  # noqa: A001
    """Values for which `predicate` is truthy, in traversal order.

    Example:
        ```python
        filter([4, 5, 6], lambda n: n % 2 == 0)  # [4, 6]
        ```
    """

    def keep(results: list[T], value: T) -> list[T]:
        if predicate(value):
            results.append(value)
        return results

    return fold(collection, keep, [])


def every[T](collection: Collection[Any, T], predicate: Callable[[T], object]) -> bool:
    """True if `predicate` is truthy for every value; True for empty or None.

    The predicate is not called again after it first returns a falsy value.

    Example:
        ```python
        every([True, 1, None, 'yes'], bool)  # False
        every([], bool)  # True
        ```
    """

    def holds(result: bool, value: T) -> bool:
        if not result:
            return False
        return bool(predicate(value))

    return fold(collection, holds, True)


all = every  # noqa: A001


def includes(collection: Collection[Any, Any], target: object) -> bool:
    """True if some value is strictly equal to `target`.

    Example:
        ```python
        includes([1, 2, 3], 1)  # True
        includes([1, 2, 3], 1.0)  # False
        ```
    """

    def found(result: bool, value: object) -> bool:
        return result or strict_equals(value, target)

    return fold(collection, found, False)


def partition[T](
    collection: Collection[Any, T],
    predicate: Callable[[T], object],
) -> tuple[list[T], list[T]]:
    """Split values into `(matched, unmatched)`, each in traversal order.

    Example:
        ```python
        partition([1, 2, 3], lambda n: n % 2)  # ([1, 3], [2])
        ```
    """

    def split(groups: tuple[list[T], list[T]], value: T) -> tuple[list[T], list[T]]:
        matched, unmatched = groups
        (matched if predicate(value) else unmatched).append(value)
        return groups

    return fold(collection, split, ([], []))
