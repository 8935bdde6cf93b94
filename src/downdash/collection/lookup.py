"""Lookup helpers: strict equality, indexed selection and linear search."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any

from downdash._logging import get_logger, is_debug_enabled
from downdash.collection.reduction import fold
from downdash.collection.traverse import Collection
from downdash.typeclass import typeclass

__all__ = ['at', 'at_indices', 'index_of', 'strict_equals']

logger = get_logger(__name__)

_MISSING = object()


def strict_equals(left: object, right: object) -> bool:
    """Equality without cross-type coercion.

    True for the same object, or for objects of exactly the same type that
    compare equal. `1` is not strictly equal to `1.0` or `True`, and a list is
    not strictly equal to an equal tuple.
    """
    return left is right or (type(left) is type(right) and bool(left == right))


@typeclass
def _item_at(collection: Collection[Any, Any], position: Any, default: Any) -> Any:
    """Value stored at `position`, or `default` if there is none."""


@_item_at.instance(type(None))
def _item_at_absent(collection: None, position: Any, default: Any) -> Any:
    return default


@_item_at.instance(Sequence)
def _item_at_sequence(collection: Sequence[Any], position: Any, default: Any) -> Any:
    # Negative positions count as missing, not as offsets from the end.
    if type(position) is int and 0 <= position < len(collection):
        return collection[position]
    return default


@_item_at.instance(Mapping)
def _item_at_mapping(collection: Mapping[Any, Any], position: Any, default: Any) -> Any:
    # Unhashable positions can never be keys.
    if isinstance(position, Hashable) and position in collection:
        return collection[position]
    return default


def at_indices(
    collection: Collection[Any, Any],
    indices: Iterable[Any],
    *,
    default: Any = None,
) -> list[Any]:
    """Select `collection[index]` for each requested index, in request order.

    Args:
        collection: A sequence, a mapping, or None.
        indices: Positions (sequence indices or mapping keys) to select.
        default: Value placed where a position is missing.

    Returns:
        One entry per requested index. Sequence positions are present only for
        `0 <= index < len(collection)`.

    Example:
        ```python
        at_indices(['a', 'b', 'c'], [0, 2])  # ['a', 'c']
        at_indices(['a', 'b', 'c'], [5])  # [None]
        ```
    """

    def select(results: list[Any], index: Any) -> list[Any]:
        value = _item_at(collection, index, _MISSING)
        if value is _MISSING:
            if is_debug_enabled():
                logger.debug('at.missing_position', position=repr(index))
            value = default
        results.append(value)
        return results

    positions = indices if isinstance(indices, Sequence) else list(indices)
    return fold(positions, select, [])


def at(collection: Collection[Any, Any], *indices: Any, default: Any = None) -> list[Any]:
    """Select positions given either as arguments or as one list.

    `at(items, 0, 2)` and `at(items, [0, 2])` both equal `at_indices(items, [0, 2])`.
    Any other single argument, a tuple included, is one position.
    """
    if len(indices) == 1 and isinstance(indices[0], list):
        return at_indices(collection, indices[0], default=default)
    return at_indices(collection, indices, default=default)


def index_of(sequence: Sequence[Any], value: object) -> int:
    """Index of the first element strictly equal to `value`, or -1.

    Raises:
        TypeError: If `sequence` is not a sequence (mappings and None included).

    Example:
        ```python
        index_of([1, 2, 1, 2], 2)  # 1
        index_of([1, 2, 3], 9)  # -1
        ```
    """
    if not isinstance(sequence, Sequence):
        msg = f'index_of() expects a sequence, got {type(sequence).__name__}'
        raise TypeError(msg)

    for index, element in enumerate(sequence):
        if strict_equals(element, value):
            return index
    return -1

