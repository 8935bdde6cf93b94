"""downdash: small functional helpers over sequences and mappings.

Flat imports (preferred):
    import downdash as dd
    dd.map([1, 2], lambda n: n * 3)  # [3, 6]
    dd.reduce([1, 2, 3], lambda a, b: a + b)  # Some(value=6)

Submodule imports (for organization):
    from downdash.collection import each, reduce, fold
    from downdash.option import Some, Nothing, Option
    from downdash.fluent import chain

`map`, `filter`, `reduce` and `all` shadow builtins; prefer `dd.map` to a
star import.
"""

# Configuration
from downdash._config import DowndashConfig, get_config, init

# Logging
from downdash._logging import configure_logging, get_logger

# Fluent wrapper
from downdash.fluent import Chain, chain

# Collection kernel
from downdash.collection import (  # noqa: A004
    Collection,
    all,
    at,
    at_indices,
    each,
    entries,
    every,
    filter,
    fold,
    includes,
    index_of,
    map,
    partition,
    reduce,
    strict_equals,
)

# Option types
from downdash.option import Nothing, NothingType, Option, Some

# Typeclass
from downdash.typeclass import NoInstanceError, typeclass

__all__ = [
    # Fluent wrapper
    'Chain',
    # Collection kernel
    'Collection',
    # Configuration
    'DowndashConfig',
    # Typeclass
    'NoInstanceError',
    # Option types
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'all',
    'at',
    'at_indices',
    'chain',
    # Logging
    'configure_logging',
    'each',
    'entries',
    'every',
    'filter',
    'fold',
    'get_config',
    'get_logger',
    'includes',
    'index_of',
    'init',
    'map',
    'partition',
    'reduce',
    'strict_equals',
    'typeclass',
]
