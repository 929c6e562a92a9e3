"""Byte-buffer equality and the accelerated comparator hook."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from tmatch.errors import HookError

logger = logging.getLogger(__name__)

FastEqual = Callable[[Any, Any], bool]

# process-wide accelerated comparator; set once at startup, read-only after
_fast_equal: FastEqual | None = None


def get_fast_equal() -> FastEqual | None:
    """Return the installed accelerated comparator, if any."""
    return _fast_equal


def set_fast_equal(func: FastEqual | None, replace: bool = False) -> None:
    """Install the process-wide accelerated buffer comparator.

    The slot is meant to be assigned once before matching starts. Assigning a
    different comparator over an installed one raises HookError unless
    `replace` is set; `set_fast_equal(None, replace=True)` clears the slot.
    """
    global _fast_equal

    if func is not None and not callable(func):
        raise HookError(f"fast_equal must be callable, got {type(func).__name__}")
    if _fast_equal is not None and func is not _fast_equal and not replace:
        raise HookError("fast_equal is already installed (pass replace=True to override)")

    logger.debug("fast_equal hook set to %r", func)
    _fast_equal = func


def _byte_view(buf: Any) -> memoryview:
    view = memoryview(buf)
    if view.format == "B" and view.ndim == 1:
        return view
    # multi-byte, multi-dimensional or strided views are flattened to raw bytes
    return memoryview(view.tobytes())


def buffers_equal(a: Any, b: Any, fast_equal: FastEqual | None = None) -> bool:
    """Compare two byte buffers byte-for-byte.

    bytes and bytearray compare natively. Other buffers (memoryviews) go
    through `fast_equal` when one is given, otherwise a byte loop over both.
    """
    if isinstance(a, (bytes, bytearray)) and isinstance(b, (bytes, bytearray)):
        return a == b

    if fast_equal is not None:
        logger.debug("comparing buffers with fast_equal hook")
        return bool(fast_equal(a, b))

    view_a, view_b = _byte_view(a), _byte_view(b)
    if len(view_a) != len(view_b):
        return False

    for x, y in zip(view_a, view_b):
        if x != y:
            return False

    return True
