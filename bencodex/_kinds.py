"""The closed set of Bencodex value kinds."""

from __future__ import annotations

from enum import IntEnum


class ValueKind(IntEnum):
    """Tag identifying which variant a value is.

    The numeric values are part of the fingerprint serialization and must
    never be renumbered.
    """

    NULL = 0
    BOOLEAN = 1
    INTEGER = 2
    BINARY = 3
    TEXT = 4
    LIST = 5
    DICTIONARY = 6
