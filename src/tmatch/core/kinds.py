"""Value classification and key access for structural matching."""

from __future__ import annotations

import datetime
import enum
import numbers
import re
from collections.abc import Mapping, Sequence
from typing import Any


class _Undefined:
    """Marker for a missing key or absent value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class Kind(enum.Enum):
    """Closed set of value kinds the matcher dispatches on."""

    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    NULL = "null"
    DATE = "date"
    REGEX = "regex"
    BYTES = "bytes"
    ARGUMENTS = "arguments"
    OBJECT = "object"

    @property
    def is_object(self) -> bool:
        """Whether values of this kind take the object branches of the matcher.

        NULL counts as an object type; it is the null singleton object.
        """
        return self not in _PRIMITIVE_KINDS


_PRIMITIVE_KINDS = frozenset({Kind.UNDEFINED, Kind.BOOLEAN, Kind.NUMBER, Kind.STRING, Kind.FUNCTION})

BUFFER_TYPES = (bytes, bytearray, memoryview)


def is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def classify(value: Any) -> Kind:
    """Classify a value into its Kind.

    Order matters: bool is an int subclass, and classes and callable
    instances are only treated as function references once every
    structural kind has been ruled out.
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Number):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, BUFFER_TYPES):
        return Kind.BYTES
    if isinstance(value, (datetime.datetime, datetime.date)):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.REGEX
    if isinstance(value, (list, Mapping)) or is_namedtuple(value):
        return Kind.OBJECT
    if isinstance(value, Sequence):
        return Kind.ARGUMENTS
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT


def _slot_names(value: Any) -> list[str]:
    """Collect assigned __slots__ attribute names across the MRO."""
    names: list[str] = []
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            if hasattr(value, name):
                names.append(name)
    return names


def _raw(value: Any) -> Any:
    return value.tobytes() if isinstance(value, memoryview) else value


def own_keys(value: Any) -> list:
    """Enumerate the own keys of an object-typed value, in enumeration order."""
    if isinstance(value, (list, *BUFFER_TYPES)):
        return list(range(len(_raw(value))))
    if isinstance(value, Mapping):
        return list(value.keys())
    if is_namedtuple(value):
        return list(type(value)._fields)
    if isinstance(value, (datetime.date, re.Pattern)):
        return []
    if hasattr(value, "__dict__"):
        return list(vars(value))
    return _slot_names(value)


def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isascii() and key.isdigit() and (key == "0" or not key.startswith("0")):
        try:
            return int(key)
        except ValueError:
            return None
    return None


def _alias(key: Any) -> Any:
    """The other spelling of an index key: 1 -> "1", "1" -> 1, else None."""
    if isinstance(key, int) and not isinstance(key, bool):
        try:
            return str(key)
        except ValueError:
            return None
    if isinstance(key, str):
        return _as_index(key)
    return None


def lookup(container: Any, key: Any) -> Any:
    """Fetch container[key] the way property access would, or UNDEFINED.

    Indices and their decimal-string spellings name the same slot.
    """
    if isinstance(container, (list, *BUFFER_TYPES)):
        container = _raw(container)
        index = _as_index(key)
        if index is None or not 0 <= index < len(container):
            return UNDEFINED
        return container[index]
    if isinstance(container, Mapping):
        if key in container:
            return container[key]
        alias = _alias(key)
        if alias is not None and alias in container:
            return container[alias]
        return UNDEFINED
    if is_namedtuple(container) and isinstance(key, int) and not isinstance(key, bool):
        return container[key] if 0 <= key < len(container) else UNDEFINED
    if not isinstance(key, str):
        return UNDEFINED
    return getattr(container, key, UNDEFINED)


def to_list(value: Any) -> list:
    """Slice an object-typed value into a plain list.

    Sequences and buffers keep their indexed elements; mappings and other
    objects have no indexed elements and become empty lists.
    """
    if isinstance(value, BUFFER_TYPES):
        return list(_raw(value))
    if isinstance(value, Sequence) and not isinstance(value, str):
        return list(value)
    return []
