"""Structural pattern matching of values against patterns.

The decision procedure, first rule wins:

1. Two primitives (neither object-typed) compare with loose equality.
2. None is the null singleton object: if either side is None, loose equality
   decides, so None only matches None or UNDEFINED.
3. A string value against a compiled regex pattern matches if the regex
   finds a match anywhere in the string.
4. An object never matches a primitive, and vice versa.
5. Byte buffers compare byte-for-byte.
6. Dates compare by instant, not by representation.
7. Regexes compare by source and flags.
8. Arguments-like sequences (tuples and other non-list sequences) are
   sliced to lists on both sides, keeping only indexed elements. The
   original pair goes through the same cycle guard as objects.
9. Everything else is an object compared field-wise:
   - two objects without keys match
   - the value must have at least as many keys as the pattern
   - a (value, pattern) pair already being compared further up the stack
     is assumed to match, so cyclic structures terminate
   - every pattern key must match the value's entry for the same key

Extra fields on the value are fine, extra fields on the pattern are not.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from . import buffers, coercion
from .kinds import Kind, classify, lookup, own_keys, to_list

logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def _instant(value: datetime.date) -> datetime.timedelta:
    """Offset of a date or datetime from the epoch.

    Naive datetimes are read as UTC and plain dates as UTC midnight.
    """
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time(), tzinfo=datetime.timezone.utc)
    elif value.utcoffset() is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value - _EPOCH


def _in_progress(visited: list[tuple[Any, Any]], value: Any, pattern: Any) -> bool:
    """Whether this exact (value, pattern) pair is already being compared up the stack."""
    for seen_value, seen_pattern in reversed(visited):
        if seen_value is value and seen_pattern is pattern:
            logger.debug("cycle detected on %s/%s pair", type(value).__name__, type(pattern).__name__)
            return True
    return False


class Matcher:
    """Matches values against patterns.

    `fast_equal` is an optional `(buffer_a, buffer_b) -> bool` comparator used
    for byte buffers that have no native equality. It only affects speed,
    never the result.
    """

    def __init__(self, fast_equal: buffers.FastEqual | None = None) -> None:
        self.fast_equal = fast_equal

    def match(self, value: Any, pattern: Any) -> bool:
        """Check if value matches pattern."""
        return self.match_with_visited(value, pattern, [])

    def match_with_visited(self, value: Any, pattern: Any, visited: list[tuple[Any, Any]]) -> bool:
        """Match value against pattern, tracking (value, pattern) pairs in progress.

        `visited` is owned by one top-level `match` call and shared down the
        recursion; pairs are compared by identity.
        """
        value_kind = classify(value)
        pattern_kind = classify(pattern)

        if not value_kind.is_object and not pattern_kind.is_object:
            return coercion.loose_equals(value, pattern)

        if value_kind is Kind.NULL or pattern_kind is Kind.NULL:
            return coercion.loose_equals(value, pattern)

        if value_kind is Kind.STRING and pattern_kind is Kind.REGEX:
            # a bytes regex cannot search a str
            return isinstance(pattern.pattern, str) and pattern.search(value) is not None

        if not value_kind.is_object or not pattern_kind.is_object:
            return False

        if value_kind is Kind.BYTES and pattern_kind is Kind.BYTES:
            return buffers.buffers_equal(value, pattern, self.fast_equal)

        if value_kind is Kind.DATE and pattern_kind is Kind.DATE:
            return _instant(value) == _instant(pattern)

        if value_kind is Kind.REGEX and pattern_kind is Kind.REGEX:
            return value.pattern == pattern.pattern and value.flags == pattern.flags

        if value_kind is Kind.ARGUMENTS or pattern_kind is Kind.ARGUMENTS:
            # slicing makes fresh lists, so guard the original pair
            if _in_progress(visited, value, pattern):
                return True
            visited.append((value, pattern))
            if not self.match_with_visited(to_list(value), to_list(pattern), visited):
                return False
            visited.pop()
            return True

        return self._match_object(value, pattern, visited)

    def _match_object(self, value: Any, pattern: Any, visited: list[tuple[Any, Any]]) -> bool:
        value_keys = own_keys(value)
        pattern_keys = own_keys(pattern)

        if not value_keys and not pattern_keys:
            return True

        # the value may have extra fields, the pattern may not
        if len(value_keys) < len(pattern_keys):
            return False

        if _in_progress(visited, value, pattern):
            return True
        visited.append((value, pattern))

        for key in reversed(pattern_keys):
            if not self.match_with_visited(lookup(value, key), lookup(pattern, key), visited):
                # the abandoned call discards the ledger, no pop needed
                return False

        visited.pop()
        return True


def match(value: Any, pattern: Any) -> bool:
    """Check if value matches pattern, using the installed fast_equal hook if any."""
    return Matcher(fast_equal=buffers.get_fast_equal()).match(value, pattern)
