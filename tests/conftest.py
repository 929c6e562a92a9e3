"""Shared pytest fixtures for tmatch tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from tmatch.core import buffers

# keep CLI output free of ANSI codes
os.environ.setdefault("NO_COLOR", "1")

# a value document covering most kinds the YAML loader produces
SAMPLE_VALUE_YAML = """\
name: tmatch-0.1.0
version: 1
released: 2024-03-01 12:30:00
tags: [match, pattern, assert]
author:
  name: Ada
  email: ada@example.com
"""

SAMPLE_PATTERN_YAML = """\
name: !regex /^tmatch-/
version: "1"
author:
  email: !regex /@example\\.com$/
"""

MISMATCH_PATTERN_YAML = """\
name: !regex /^other-/
"""


@pytest.fixture
def cyclic_value() -> dict:
    """A mapping that contains itself under 'self'."""
    value: dict = {"id": 1}
    value["self"] = value
    return value


@pytest.fixture
def no_fast_equal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start with an empty accelerated comparator slot, restored afterwards."""
    monkeypatch.setattr(buffers, "_fast_equal", None)


@pytest.fixture
def value_path(tmp_path: Path) -> Path:
    """Write the sample value document and return its path."""
    path = tmp_path / "values.yml"
    path.write_text(SAMPLE_VALUE_YAML)
    return path


@pytest.fixture
def pattern_path(tmp_path: Path) -> Path:
    """Write a pattern the sample value matches and return its path."""
    path = tmp_path / "pattern.yml"
    path.write_text(SAMPLE_PATTERN_YAML)
    return path


@pytest.fixture
def mismatch_pattern_path(tmp_path: Path) -> Path:
    """Write a pattern the sample value does not match and return its path."""
    path = tmp_path / "mismatch.yml"
    path.write_text(MISMATCH_PATTERN_YAML)
    return path


@pytest.fixture
def restore_logging():
    """Restore root logger handlers after a CLI run installs its own."""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
