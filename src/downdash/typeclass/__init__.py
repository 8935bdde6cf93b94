"""Typeclass utilities for ad-hoc polymorphism."""

from downdash.typeclass.core import NoInstanceError, TypeClass, typeclass

__all__ = [
    'NoInstanceError',
    'TypeClass',
    'typeclass',
]
