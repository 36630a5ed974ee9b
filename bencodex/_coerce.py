"""Explicit fixed-width integer conversions.

Narrowing to a fixed width keeps the low-order bits and reinterprets them,
exactly like a C cast: ``to_int16(40000) == -25536`` and
``to_uint32(-1) == 4294967295``.  There is no overflow check at this
boundary.  This is intended behavior, not an accident: callers that need a
range check must do it before converting.

Widening needs no function at all.  Every fixed-width value is already a
Python int and ``Integer(n)`` takes it as-is.
"""

from __future__ import annotations

from typing import SupportsIndex


def truncate(value: SupportsIndex, bits: int, signed: bool) -> int:
    """Reduce *value* to its low *bits* bits, two's complement if *signed*."""
    mask = (1 << bits) - 1
    n = value.__index__() & mask
    if signed and n >> (bits - 1):
        n -= 1 << bits
    return n


def to_int16(value: SupportsIndex) -> int:
    return truncate(value, 16, signed=True)


def to_uint16(value: SupportsIndex) -> int:
    return truncate(value, 16, signed=False)


def to_int32(value: SupportsIndex) -> int:
    return truncate(value, 32, signed=True)


def to_uint32(value: SupportsIndex) -> int:
    return truncate(value, 32, signed=False)


def to_int64(value: SupportsIndex) -> int:
    return truncate(value, 64, signed=True)


def to_uint64(value: SupportsIndex) -> int:
    return truncate(value, 64, signed=False)
