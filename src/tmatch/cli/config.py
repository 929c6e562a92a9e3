"""Loading value and pattern documents for the tmatch CLI."""

from __future__ import annotations

import json
import re
from pathlib import PurePath
from typing import Any, TextIO

import yaml

from tmatch.core.kinds import UNDEFINED
from tmatch.errors import DocumentError

FORMATS = ("auto", "yaml", "json")

# regex flag letters accepted by !regex
REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "a": re.ASCII,
    "u": re.UNICODE,
}


def parse_flags(letters: str) -> int:
    """Parse regex flag letters (e.g., 'im') into re flags."""
    flags = 0
    for letter in letters:
        if letter not in REGEX_FLAGS:
            raise ValueError(f"Unknown regex flag '{letter}' (valid: {''.join(REGEX_FLAGS)})")
        flags |= REGEX_FLAGS[letter]
    return flags


def parse_regex(text: str, flags: str = "") -> re.Pattern:
    """Compile a regex from '/source/flags' or a bare source string.

    e.g., '/^abc$/i' -> re.compile('^abc$', re.IGNORECASE), 'world$' -> re.compile('world$')
    """
    end = text.rfind("/")
    if text.startswith("/") and end > 0:
        if flags:
            raise ValueError(f"Flags given twice for regex '{text}'")
        text, flags = text[1:end], text[end + 1 :]
    try:
        return re.compile(text, parse_flags(flags))
    except re.error as e:
        raise ValueError(f"Invalid regex '{text}': {e}") from e


class DocumentLoader(yaml.SafeLoader):
    """YAML loader understanding the !regex, !undefined and !tuple tags."""


def _construct_regex(loader: DocumentLoader, node: yaml.Node) -> re.Pattern:
    if isinstance(node, yaml.MappingNode):
        data = loader.construct_mapping(node, deep=True)
        source, flags = data.get("pattern"), data.get("flags", "")
    else:
        source, flags = loader.construct_scalar(node), ""

    if not isinstance(source, str) or not isinstance(flags, str):
        raise yaml.constructor.ConstructorError(None, None, "!regex needs a string pattern and flags", node.start_mark)
    try:
        return parse_regex(source, flags)
    except ValueError as e:
        raise yaml.constructor.ConstructorError(None, None, str(e), node.start_mark) from e


def _construct_undefined(loader: DocumentLoader, node: yaml.Node) -> Any:
    return UNDEFINED


def _construct_tuple(loader: DocumentLoader, node: yaml.Node) -> tuple:
    return tuple(loader.construct_sequence(node, deep=True))


DocumentLoader.add_constructor("!regex", _construct_regex)
DocumentLoader.add_constructor("!undefined", _construct_undefined)
DocumentLoader.add_constructor("!tuple", _construct_tuple)


def resolve_format(name: str, fmt: str = "auto") -> str:
    """Pick the document format; 'auto' means JSON for .json files, YAML otherwise."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt}. Valid options: {', '.join(FORMATS)}")
    if fmt != "auto":
        return fmt
    return "json" if PurePath(name).suffix.lower() == ".json" else "yaml"


def load_documents(stream: TextIO, fmt: str = "auto") -> list[Any]:
    """Load every document from a YAML or JSON stream.

    JSON streams hold a single document; YAML streams may hold several.
    """
    name = getattr(stream, "name", "<stream>")
    try:
        if resolve_format(name, fmt) == "json":
            return [json.load(stream)]
        return list(yaml.load_all(stream, Loader=DocumentLoader))
    except (json.JSONDecodeError, yaml.YAMLError, ValueError) as e:
        raise DocumentError(f"Failed to load {name}: {e}") from e


def load_pattern(stream: TextIO, fmt: str = "auto") -> Any:
    """Load the single pattern document from a stream."""
    documents = load_documents(stream, fmt)
    if len(documents) != 1:
        name = getattr(stream, "name", "<stream>")
        raise DocumentError(f"Expected exactly one pattern document in {name}, found {len(documents)}")
    return documents[0]
