"""Shared CLI utilities for terminal output."""

from __future__ import annotations

import os
import sys
from typing import Any


class C:
    """Terminal colors using ANSI escape codes."""

    _enabled = sys.stdout.isatty() and os.environ.get("NO_COLOR") is None

    BOLD = "\033[1m" if _enabled else ""
    DIM = "\033[2m" if _enabled else ""
    RED = "\033[91m" if _enabled else ""
    GREEN = "\033[92m" if _enabled else ""
    RESET = "\033[0m" if _enabled else ""

    @classmethod
    def bold(cls, s: str) -> str:
        return f"{cls.BOLD}{s}{cls.RESET}"

    @classmethod
    def dim(cls, s: str) -> str:
        return f"{cls.DIM}{s}{cls.RESET}"

    @classmethod
    def green(cls, s: str) -> str:
        return f"{cls.GREEN}{s}{cls.RESET}"

    @classmethod
    def red(cls, s: str) -> str:
        return f"{cls.RED}{s}{cls.RESET}"


def summarize(value: Any, width: int = 60) -> str:
    """One-line repr of a value, truncated to width with '...'."""
    text = " ".join(repr(value).split())
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."


def document_label(name: str, index: int, total: int) -> str:
    """Label a document for output, e.g. 'values.yml' or 'values.yml#2' in a multi-document file."""
    if total == 1:
        return name
    return f"{name}#{index + 1}"
