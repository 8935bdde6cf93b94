"""Reduction: fold a collection into one accumulated value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from downdash._logging import get_logger, is_debug_enabled
from downdash.collection.traverse import Collection, each
from downdash.option import Nothing, NothingType, Some

__all__ = ['fold', 'reduce']

logger = get_logger(__name__)


class _UnsetRef:
    """Sentinel for an omitted seed; None is a valid seed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return '<unset>'


_UNSET: Any = _UnsetRef()


def reduce[T](
    collection: Collection[Any, T],
    combine: Callable[[Any, T], Any],
    seed: Any = _UNSET,
) -> Some[Any] | NothingType:
    """Fold `collection` left to right with `combine(accumulator, value)`.

    Without a seed the first element visited becomes the accumulator and
    `combine` starts at the second one. With a seed, `combine` runs for
    every element.

    Args:
        collection: A sequence, a mapping, or None.
        combine: Binary function returning the next accumulator.
        seed: Initial accumulator. Omit it to start from the first element.

    Returns:
        Some(accumulator), or Nothing if the collection is empty and no seed
        was given.

    Example:
        ```python
        reduce([1, 2, 3], lambda a, b: a + b)  # Some(value=6)
        reduce([1, 2, 3], lambda a, b: a + b, 10)  # Some(value=16)
        reduce([], lambda a, b: a + b)  # Nothing
        ```
    """
    accumulator = seed
    started = seed is not _UNSET

    def step(value: T, _key: object, _collection: object) -> None:
        nonlocal accumulator, started
        if started:
            accumulator = combine(accumulator, value)
        else:
            accumulator = value
            started = True

    each(collection, step)

    if not started:
        if is_debug_enabled():
            logger.debug('reduce.empty_without_seed')
        return Nothing
    return Some(accumulator)


def fold[T, U](collection: Collection[Any, T], combine: Callable[[U, T], U], seed: U) -> U:
    """Seeded reduction returning the bare accumulator.

    `fold(None, f, seed)` and `fold([], f, seed)` return `seed` unchanged.
    """
    return reduce(collection, combine, seed).unwrap()
