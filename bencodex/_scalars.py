"""Leaf kinds other than INTEGER: NULL, BOOLEAN, BINARY and TEXT.

Encodings (measured, never produced):

    NULL     n
    BOOLEAN  t | f
    BINARY   <byte count> : <bytes>
    TEXT     u <UTF-8 byte count> : <UTF-8 bytes>

BINARY and TEXT use their raw payload as the fingerprint digest when it
fits in 20 bytes and its SHA-1 otherwise, the same rule INTEGER applies to
its two's-complement bytes.
"""

from __future__ import annotations

import json
from typing import Optional, Union

from ._constants import LENGTH_SEPARATOR, MARKER_FALSE, MARKER_NULL, MARKER_TEXT, MARKER_TRUE
from ._errors import ERR_UTF8, BencodexError
from ._fingerprint import Fingerprint, compact_digest
from ._integer import count_decimal_digits
from ._kinds import ValueKind


class Null:
    """The single NULL value.  ``Null()`` always returns ``NULL``."""

    __slots__ = ()
    _instance: Optional["Null"] = None

    def __new__(cls) -> "Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NULL

    @property
    def encoding_length(self) -> int:
        return len(MARKER_NULL)

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(ValueKind.NULL, len(MARKER_NULL))

    def inspect(self, load_all: bool = False) -> str:
        return "null"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Null)

    def __hash__(self) -> int:
        return hash(Null)

    def __repr__(self) -> str:
        return "bencodex.Null"


class Boolean:
    """TRUE or FALSE.  ``Boolean(x)`` returns one of the two singletons."""

    __slots__ = ("_value",)
    _cache: dict = {}

    def __new__(cls, value: bool = False) -> "Boolean":
        value = bool(value)
        inst = cls._cache.get(value)
        if inst is None:
            inst = super().__new__(cls)
            inst._value = value
            cls._cache[value] = inst
        return inst

    @property
    def value(self) -> bool:
        return self._value

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOLEAN

    @property
    def encoding_length(self) -> int:
        return len(MARKER_TRUE if self._value else MARKER_FALSE)

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(ValueKind.BOOLEAN, self.encoding_length, b"\x01" if self._value else b"\x00")

    def inspect(self, load_all: bool = False) -> str:
        return "true" if self._value else "false"

    def __bool__(self) -> bool:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Boolean):
            return self._value is other._value
        if isinstance(other, bool):
            return self._value is other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "bencodex.Boolean {}".format(self.inspect())


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def _framed_length(payload_size: int) -> int:
    # "<count>:" followed by the payload
    return count_decimal_digits(payload_size) + len(LENGTH_SEPARATOR) + payload_size


class Binary:
    """An immutable byte string, ordered bytewise."""

    __slots__ = ("_value",)

    def __init__(self, value: Union[bytes, bytearray, memoryview, "Binary"] = b"") -> None:
        if isinstance(value, Binary):
            value = value._value
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("Binary needs bytes, not {}".format(type(value).__name__))
        self._value = bytes(value)

    @property
    def value(self) -> bytes:
        return self._value

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BINARY

    @property
    def encoding_length(self) -> int:
        return _framed_length(len(self._value))

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(ValueKind.BINARY, self.encoding_length, compact_digest(self._value))

    def inspect(self, load_all: bool = False) -> str:
        return 'b"' + "".join("\\x{:02x}".format(b) for b in self._value) + '"'

    def __len__(self) -> int:
        return len(self._value)

    def __bytes__(self) -> bytes:
        return self._value

    @staticmethod
    def _operand(other: object) -> Optional[bytes]:
        if isinstance(other, Binary):
            return other._value
        if isinstance(other, bytes):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value == o

    def __lt__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value < o

    def __le__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value <= o

    def __gt__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value > o

    def __ge__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value >= o

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "bencodex.Binary {}".format(self.inspect())


class Text:
    """An immutable Unicode string.

    Ordering is by code point, which for valid strings is the same as
    ordering by UTF-8 bytes.  Strings holding a lone surrogate have no UTF-8
    form and are rejected with ERR_UTF8.
    """

    __slots__ = ("_value", "_utf8")

    def __init__(self, value: Union[str, "Text"] = "") -> None:
        if isinstance(value, Text):
            self._value = value._value
            self._utf8 = value._utf8
            return
        if not isinstance(value, str):
            raise TypeError("Text needs str, not {}".format(type(value).__name__))
        try:
            utf8 = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise BencodexError(
                ERR_UTF8, "surrogate code-point U+{:04X}".format(ord(value[e.start]))
            ) from e
        self._value = value
        self._utf8 = utf8

    @property
    def value(self) -> str:
        return self._value

    @property
    def utf8(self) -> bytes:
        return self._utf8

    @property
    def kind(self) -> ValueKind:
        return ValueKind.TEXT

    @property
    def encoding_length(self) -> int:
        return len(MARKER_TEXT) + _framed_length(len(self._utf8))

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(ValueKind.TEXT, self.encoding_length, compact_digest(self._utf8))

    def inspect(self, load_all: bool = False) -> str:
        return json.dumps(self._value, ensure_ascii=False)

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return self._value

    @staticmethod
    def _operand(other: object) -> Optional[str]:
        if isinstance(other, Text):
            return other._value
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value == o

    def __lt__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value < o

    def __le__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value <= o

    def __gt__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value > o

    def __ge__(self, other: object) -> bool:
        o = self._operand(other)
        return NotImplemented if o is None else self._value >= o

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "bencodex.Text {}".format(self.inspect())
