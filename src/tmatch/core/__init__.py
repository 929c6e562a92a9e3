"""Core matching logic: value kinds, loose equality, buffers and the matcher."""

from . import buffers, coercion, kinds, matching

__all__ = [
    "buffers",
    "coercion",
    "kinds",
    "matching",
]
