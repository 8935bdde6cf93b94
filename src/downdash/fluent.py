"""Fluent wrapper over the collection operations.

Example:
    ```python
    from downdash import chain

    chain([1, 2, 3, 4]).filter(lambda n: n % 2 == 0).map(str).value()  # ['2', '4']
    chain({'a': 1, 'b': 2}).every(lambda n: n > 0)  # True
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from downdash.collection import (
    at,
    each,
    every,
    filter,  # noqa: A004
    includes,
    index_of,
    map,  # noqa: A004
    partition,
    reduce,
)
from downdash.option import NothingType, Some

__all__ = ['Chain', 'chain']


class Chain(msgspec.Struct, frozen=True):
    """Immutable wrapper threading a collection through the operations.

    Operations producing a new collection (`map`, `filter`, `at`) return a new
    Chain; `each` returns the same Chain; the others return their plain result.
    Call `value()` to get the wrapped collection back.
    """

    collection: Any

    def value(self) -> Any:
        """Return the wrapped collection."""
        return self.collection

    def each(self, visit: Callable[[Any, Any, Any], Any]) -> Chain:
        """Visit every element, then return this chain."""
        each(self.collection, visit)
        return self

    def map(self, transform: Callable[[Any], Any]) -> Chain:
        return Chain(map(self.collection, transform))

    def filter(self, predicate: Callable[[Any], object]) -> Chain:
        return Chain(filter(self.collection, predicate))

    def at(self, *indices: Any, default: Any = None) -> Chain:
        return Chain(at(self.collection, *indices, default=default))

    def reduce(self, combine: Callable[[Any, Any], Any], *seed: Any) -> Some[Any] | NothingType:
        """Forward to `reduce`; pass a seed positionally or leave it out."""
        return reduce(self.collection, combine, *seed)

    def every(self, predicate: Callable[[Any], object]) -> bool:
        return every(self.collection, predicate)

    all = every

    def includes(self, target: object) -> bool:
        return includes(self.collection, target)

    def partition(self, predicate: Callable[[Any], object]) -> tuple[list[Any], list[Any]]:
        return partition(self.collection, predicate)

    def index_of(self, target: object) -> int:
        return index_of(self.collection, target)


def chain(collection: Any) -> Chain:
    """Wrap a sequence, a mapping, or None for fluent chaining."""
    return Chain(collection)
