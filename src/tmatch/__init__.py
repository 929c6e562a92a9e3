"""Loose structural matching of values against patterns."""

from .core.buffers import get_fast_equal, set_fast_equal
from .core.coercion import loose_equals
from .core.kinds import UNDEFINED, Kind, classify
from .core.matching import Matcher, match
from .errors import DocumentError, HookError, TmatchError

__all__ = [
    "UNDEFINED",
    "DocumentError",
    "HookError",
    "Kind",
    "Matcher",
    "TmatchError",
    "classify",
    "get_fast_equal",
    "loose_equals",
    "match",
    "set_fast_equal",
]
