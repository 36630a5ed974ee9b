"""The value contract, as functions over the closed set of kinds.

Every kind answers the same four questions: what kind it is, how long its
canonical encoding is, what its fingerprint is, and how it reads as text.
The set of kinds is fixed, so dispatch is a plain isinstance chain rather
than an open protocol; an object outside the set is a TypeError.

Native Python data is lifted with to_value() first, so
``fingerprint_of(5) == Integer(5).fingerprint``.
"""

from __future__ import annotations

from typing import Any

from ._compound import Dictionary, Indirect, List, to_value
from ._fingerprint import Fingerprint
from ._integer import Integer
from ._kinds import ValueKind
from ._scalars import Binary, Boolean, Null, Text


def _contract(value: Any) -> Any:
    # Indirect stands in for a value inside compounds; it answers the
    # contract from its stored fingerprint.
    if isinstance(value, Indirect):
        return value
    return to_value(value)


def kind_of(value: Any) -> ValueKind:
    v = _contract(value)
    if isinstance(v, Null):
        return ValueKind.NULL
    if isinstance(v, Boolean):
        return ValueKind.BOOLEAN
    if isinstance(v, Integer):
        return ValueKind.INTEGER
    if isinstance(v, Binary):
        return ValueKind.BINARY
    if isinstance(v, Text):
        return ValueKind.TEXT
    if isinstance(v, List):
        return ValueKind.LIST
    if isinstance(v, Dictionary):
        return ValueKind.DICTIONARY
    return v.kind  # Indirect


def encoding_length_of(value: Any) -> int:
    """Exact byte length of the canonical encoding, without encoding."""
    return _contract(value).encoding_length


def fingerprint_of(value: Any) -> Fingerprint:
    return _contract(value).fingerprint


def inspect(value: Any, load_all: bool = False) -> str:
    """Canonical human-readable text.

    *load_all* forces lazily-held children of compounds to be loaded and
    rendered; otherwise unloaded children print as placeholders.
    """
    return _contract(value).inspect(load_all)
