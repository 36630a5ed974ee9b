"""Bencodex INTEGER: arbitrary-precision signed integers.

Canonical encoding (never materialized here, only measured):

    i <decimal digits> e

Digits are ASCII, with a single leading "-" for negatives, no leading
zeros, and "0" for zero.  The encoding length reported by this module is
``2 + count_decimal_digits(value)``, and the digit count does not include
the sign.

Fingerprint digest: the minimal little-endian two's-complement bytes of
the value, or their SHA-1 when that form is longer than 20 bytes.  Most
integers in real state trees are small, so most integer fingerprints never
touch a hash function.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from . import _coerce
from ._constants import DIGIT_THRESHOLDS, MARKER_END, MARKER_INTEGER
from ._errors import FormatError
from ._fingerprint import Fingerprint, compact_digest
from ._kinds import ValueKind

_DIGITS = re.compile(r"[0-9]+", re.ASCII)

# CPython refuses int<->str conversions past sys.get_int_max_str_digits()
# (4300 by default, 640 at the lowest).  Work in chunks below that floor
# so that very large values still parse and render.
_CHUNK_DIGITS = 600

_FRAMING = len(MARKER_INTEGER) + len(MARKER_END)


@dataclass(frozen=True)
class NumberFormat:
    """Sign symbols accepted when parsing decimal text.

    The invariant format is the default everywhere; a custom format only
    changes which sign symbols are recognized, never the digits (always
    ASCII 0-9) and never the canonical output.
    """

    negative_sign: str = "-"
    positive_sign: str = "+"

    INVARIANT: ClassVar["NumberFormat"]


NumberFormat.INVARIANT = NumberFormat()


# ── Decimal text ⇄ int ────────────────────────────────────────

def _digits_to_int(digits: str) -> int:
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    low = digits[split:]
    return _digits_to_int(digits[:split]) * 10 ** len(low) + _digits_to_int(low)


def _int_to_digits(n: int) -> str:
    """Render a non-negative int in decimal, however large."""
    if n < 10 ** _CHUNK_DIGITS:
        return str(n)
    half = count_decimal_digits(n) // 2
    high, low = divmod(n, 10 ** half)
    return _int_to_digits(high) + _int_to_digits(low).zfill(half)


def parse_decimal(text: str, number_format: Optional[NumberFormat] = None) -> int:
    """Parse an optionally-signed run of ASCII digits.

    Leading zeros are accepted ("007" is 7, "-0" is 0).  Whitespace,
    underscores, non-ASCII digits and repeated signs are not: Python's own
    int() would accept most of those, so it is only used on text that has
    already been validated.
    """
    if not isinstance(text, str):
        raise TypeError("decimal text must be str, not {}".format(type(text).__name__))
    fmt = number_format or NumberFormat.INVARIANT

    sign = 1
    body = text
    if fmt.negative_sign and text.startswith(fmt.negative_sign):
        sign = -1
        body = text[len(fmt.negative_sign):]
    elif fmt.positive_sign and text.startswith(fmt.positive_sign):
        body = text[len(fmt.positive_sign):]

    if not _DIGITS.fullmatch(body):
        raise FormatError("not a decimal integer literal: {!r}".format(text[:64]))
    return sign * _digits_to_int(body)


def canonical_decimal(value: int) -> str:
    """Canonical decimal text: "-" prefix for negatives, no leading zeros."""
    if value < 0:
        return "-" + _int_to_digits(-value)
    return _int_to_digits(value)


def count_decimal_digits(value: int) -> int:
    """Number of decimal digits in *value*, sign excluded.

    Small magnitudes are answered by comparison alone.  Larger ones start
    from a bit-length estimate and correct it against powers of ten, which
    gives the exact count without rendering the decimal string.
    """
    n = -value if value < 0 else value
    for digits, bound in enumerate(DIGIT_THRESHOLDS, start=1):
        if n < bound:
            return digits
    # 2**(b-1) <= n < 2**b, so the estimate is off by at most one.
    estimate = int((n.bit_length() - 1) * 0.30102999566398120) + 1
    while n >= 10 ** estimate:
        estimate += 1
    while estimate > 1 and n < 10 ** (estimate - 1):
        estimate -= 1
    return estimate


def twos_complement_bytes(value: int) -> bytes:
    """Shortest little-endian two's-complement bytes that round-trip *value*.

    0 -> 00, 127 -> 7f, 128 -> 80 00, -1 -> ff, -128 -> 80, -129 -> 7f ff.
    """
    magnitude = value if value >= 0 else ~value
    return value.to_bytes(magnitude.bit_length() // 8 + 1, "little", signed=True)


# ── Integer value ─────────────────────────────────────────────

class Integer:
    """An immutable arbitrary-precision Bencodex integer.

    Accepts an int (any fixed-width source value fits without loss), another
    Integer, or decimal text.  Compares numerically with Integers and plain
    ints; bools are deliberately not ints here.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Union[int, str, "Integer"] = 0,
        number_format: Optional[NumberFormat] = None,
    ) -> None:
        # bool must be checked before int: isinstance(True, int) is True.
        if isinstance(value, bool):
            raise TypeError("bool is not an integer value; use Boolean")
        if isinstance(value, Integer):
            self._value = value._value
        elif isinstance(value, int):
            self._value = int(value)
        elif isinstance(value, str):
            self._value = parse_decimal(value, number_format)
        else:
            raise TypeError("cannot make an Integer from {}".format(type(value).__name__))

    @classmethod
    def parse(cls, text: str, number_format: Optional[NumberFormat] = None) -> "Integer":
        return cls(parse_decimal(text, number_format))

    @property
    def value(self) -> int:
        return self._value

    # ── Value contract ───────────────────────────────────────

    @property
    def kind(self) -> ValueKind:
        return ValueKind.INTEGER

    @property
    def encoding_length(self) -> int:
        return _FRAMING + count_decimal_digits(self._value)

    @property
    def fingerprint(self) -> Fingerprint:
        digest = compact_digest(twos_complement_bytes(self._value))
        return Fingerprint(ValueKind.INTEGER, self.encoding_length, digest)

    @property
    def canonical_text(self) -> str:
        return canonical_decimal(self._value)

    def inspect(self, load_all: bool = False) -> str:
        # Integers hold nothing lazily; load_all is accepted for the contract.
        return canonical_decimal(self._value)

    # ── Fixed-width conversions (truncating, see _coerce) ────

    def to_int16(self) -> int:
        return _coerce.to_int16(self._value)

    def to_uint16(self) -> int:
        return _coerce.to_uint16(self._value)

    def to_int32(self) -> int:
        return _coerce.to_int32(self._value)

    def to_uint32(self) -> int:
        return _coerce.to_uint32(self._value)

    def to_int64(self) -> int:
        return _coerce.to_int64(self._value)

    def to_uint64(self) -> int:
        return _coerce.to_uint64(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    # ── Equality and ordering ─────────────────────────────────

    @staticmethod
    def _operand(other: object) -> Optional[int]:
        # Promote plain ints; everything else (bools included) is foreign.
        if isinstance(other, Integer):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self._value == o

    def __lt__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self._value < o

    def __le__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self._value <= o

    def __gt__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self._value > o

    def __ge__(self, other: object) -> bool:
        o = self._operand(other)
        if o is None:
            return NotImplemented
        return self._value >= o

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.inspect()

    def __repr__(self) -> str:
        return "bencodex.Integer {}".format(self.inspect())
