"""Traversal: the one primitive every other collection operation is built on.

`entries` turns a collection into `(key, value)` pairs (index for sequences,
key for mappings, nothing for None); `each` feeds those pairs to a visitor.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

from downdash._logging import get_logger, is_debug_enabled
from downdash.typeclass import typeclass

__all__ = ['Collection', 'each', 'entries']

logger = get_logger(__name__)

type Collection[K, V] = Sequence[V] | Mapping[K, V] | None


@typeclass
def entries(collection: Collection[Any, Any]) -> Iterator[tuple[Any, Any]]:
    """Iterate `(key, value)` pairs of a sequence, a mapping, or None.

    Sequences yield `(index, element)` in ascending index order. Mappings
    yield `(key, value)` in the mapping's own iteration order. None yields
    nothing.

    Raises:
        NoInstanceError: If the collection is neither a sequence, a mapping
            nor None.
    """


@entries.instance(type(None))
def _entries_absent(collection: None) -> Iterator[tuple[Any, Any]]:
    if is_debug_enabled():
        logger.debug('traverse.absent_collection')
    return iter(())


@entries.instance(Sequence)
def _entries_sequence[V](collection: Sequence[V]) -> Iterator[tuple[int, V]]:
    return enumerate(collection)


@entries.instance(Mapping)
def _entries_mapping[K, V](collection: Mapping[K, V]) -> Iterator[tuple[K, V]]:
    return iter(collection.items())


def each(collection: Collection[Any, Any], visit: Callable[[Any, Any, Any], Any]) -> None:
    """Call `visit(value, key_or_index, collection)` once per element.

    None is treated as an empty collection. Exceptions raised by `visit`
    propagate unchanged and stop the traversal.

    Args:
        collection: A sequence, a mapping, or None.
        visit: Visitor receiving the value, its index or key, and the collection.

    Example:
        ```python
        seen = []
        each(['a', 'b'], lambda value, index, _: seen.append((index, value)))
        seen  # [(0, 'a'), (1, 'b')]
        ```
    """
    for key, value in entries(collection):
        visit(value, key, collection)
