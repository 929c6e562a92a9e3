"""Tests for tmatch.cli.config module."""

from __future__ import annotations

import datetime
import io
import re
from pathlib import Path

import pytest

from tmatch.cli.config import (
    load_documents,
    load_pattern,
    parse_flags,
    parse_regex,
    resolve_format,
)
from tmatch.core.kinds import UNDEFINED
from tmatch.errors import DocumentError


class TestParseFlags:
    """Tests for parse_flags function."""

    @pytest.mark.parametrize(
        "letters,expected",
        [
            ("", 0),
            ("i", re.IGNORECASE),
            ("im", re.IGNORECASE | re.MULTILINE),
            ("sx", re.DOTALL | re.VERBOSE),
        ],
    )
    def test_valid(self, letters: str, expected: int):
        assert parse_flags(letters) == expected

    def test_unknown_flag(self):
        with pytest.raises(ValueError, match="Unknown regex flag 'g'"):
            parse_flags("g")


class TestParseRegex:
    """Tests for parse_regex function."""

    def test_slashed_with_flags(self):
        regex = parse_regex("/^abc$/i")
        assert regex.pattern == "^abc$"
        assert regex.flags & re.IGNORECASE

    def test_bare_source(self):
        regex = parse_regex("world$")
        assert regex.pattern == "world$"
        assert not regex.flags & re.IGNORECASE

    def test_bare_source_with_flags(self):
        assert parse_regex("abc", "m").flags & re.MULTILINE

    def test_slash_inside_source(self):
        assert parse_regex("/a/b/").pattern == "a/b"

    def test_leading_slash_only(self):
        assert parse_regex("/abc").pattern == "/abc"

    def test_flags_given_twice(self):
        with pytest.raises(ValueError, match="Flags given twice"):
            parse_regex("/a/i", "m")

    def test_invalid_regex(self):
        with pytest.raises(ValueError, match="Invalid regex"):
            parse_regex("(")


class TestResolveFormat:
    """Tests for resolve_format function."""

    @pytest.mark.parametrize(
        "name,fmt,expected",
        [
            ("values.json", "auto", "json"),
            ("VALUES.JSON", "auto", "json"),
            ("values.yml", "auto", "yaml"),
            ("<stdin>", "auto", "yaml"),
            ("values.json", "yaml", "yaml"),
            ("values.yml", "json", "json"),
        ],
    )
    def test_resolve(self, name: str, fmt: str, expected: str):
        assert resolve_format(name, fmt) == expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown format"):
            resolve_format("values.yml", "toml")


class TestLoadDocuments:
    """Tests for load_documents and load_pattern functions."""

    def test_yaml_tags(self):
        stream = io.StringIO("""\
name: !regex /^tm/i
rx: !regex {pattern: "^a", flags: m}
args: !tuple [1, 2]
missing: !undefined
when: 2024-01-01 12:00:00
day: 2024-01-01
blob: !!binary aGk=
""")
        [doc] = load_documents(stream)

        assert doc["name"].pattern == "^tm"
        assert doc["name"].flags & re.IGNORECASE
        assert doc["rx"].pattern == "^a"
        assert doc["rx"].flags & re.MULTILINE
        assert doc["args"] == (1, 2)
        assert doc["missing"] is UNDEFINED
        assert doc["when"] == datetime.datetime(2024, 1, 1, 12, 0)
        assert doc["day"] == datetime.date(2024, 1, 1)
        assert doc["blob"] == b"hi"

    def test_multiple_yaml_documents(self):
        docs = load_documents(io.StringIO("a: 1\n---\na: 2\n"))
        assert docs == [{"a": 1}, {"a": 2}]

    def test_empty_yaml(self):
        assert load_documents(io.StringIO("")) == []

    def test_json_by_format(self):
        assert load_documents(io.StringIO('{"a": [1, 2]}'), "json") == [{"a": [1, 2]}]

    def test_json_by_suffix(self, tmp_path: Path):
        path = tmp_path / "values.json"
        path.write_text('{"a": null}')
        with open(path, encoding="utf-8") as f:
            assert load_documents(f) == [{"a": None}]

    @pytest.mark.parametrize(
        "text,fmt",
        [
            ("a: [", "yaml"),
            ("name: !regex /(/", "yaml"),
            ("name: !regex /a/q", "yaml"),
            ("name: !regex {flags: i}", "yaml"),
            ("{bad json", "json"),
        ],
    )
    def test_invalid(self, text: str, fmt: str):
        with pytest.raises(DocumentError, match="Failed to load"):
            load_documents(io.StringIO(text), fmt)

    def test_unknown_tag(self):
        with pytest.raises(DocumentError):
            load_documents(io.StringIO("a: !python/object:os.system ls"))

    def test_single_pattern(self):
        assert load_pattern(io.StringIO("a: 1\n")) == {"a": 1}

    @pytest.mark.parametrize("text", ["", "a: 1\n---\na: 2\n"])
    def test_pattern_count(self, text: str):
        with pytest.raises(DocumentError, match="exactly one pattern document"):
            load_pattern(io.StringIO(text))
