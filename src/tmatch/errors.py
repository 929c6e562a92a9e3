"""Exceptions raised by tmatch.

Matching itself never raises for well-formed input; a mismatch is a normal
False result. These cover configuration and document loading.
"""

from __future__ import annotations


class TmatchError(Exception):
    """Base class for tmatch errors."""


class HookError(TmatchError):
    """The accelerated buffer comparator was reassigned after being set."""


class DocumentError(TmatchError):
    """A value or pattern document could not be read or parsed."""
