"""Collection kernel: traversal, reduction and the operations built on them.

Every operation accepts a sequence, a mapping, or None (treated as empty),
never mutates its input, and returns a new list, tuple, bool, int or Option.
"""

from downdash.collection.derived import all, every, filter, includes, map, partition  # noqa: A004
from downdash.collection.lookup import at, at_indices, index_of, strict_equals
from downdash.collection.reduction import fold, reduce
from downdash.collection.traverse import Collection, each, entries

__all__ = [
    'Collection',
    'all',
    'at',
    'at_indices',
    'each',
    'entries',
    'every',
    'filter',
    'fold',
    'includes',
    'index_of',
    'map',
    'partition',
    'reduce',
    'strict_equals',
]
