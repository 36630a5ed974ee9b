"""bencodex: value contract and fingerprints for Bencodex values.

Every value knows its kind, the exact length of its canonical encoding
(without producing it), and a fixed-shape fingerprint that compound values
combine recursively.

Quick start:
    >>> from bencodex import Integer
    >>> Integer("-007").inspect()
    '-7'
    >>> Integer(12345).encoding_length
    7
    >>> Integer(100).fingerprint == Integer("100").fingerprint
    True
    >>> Integer(100).fingerprint.digest
    b'd'

Large integers still get a bounded digest:
    >>> len(Integer(10**200).fingerprint.digest)
    20
"""

from __future__ import annotations

from ._coerce import (
    to_int16,
    to_int32,
    to_int64,
    to_uint16,
    to_uint32,
    to_uint64,
    truncate,
)
from ._compound import Dictionary, Indirect, List, to_value
from ._errors import (
    ERR_FINGERPRINT,
    ERR_FORMAT,
    ERR_UTF8,
    BencodexError,
    FormatError,
)
from ._fingerprint import Fingerprint
from ._integer import (
    Integer,
    NumberFormat,
    canonical_decimal,
    count_decimal_digits,
    parse_decimal,
    twos_complement_bytes,
)
from ._kinds import ValueKind
from ._scalars import FALSE, NULL, TRUE, Binary, Boolean, Null, Text
from ._value import encoding_length_of, fingerprint_of, inspect, kind_of

__version__ = "0.1.0"

__all__ = [
    # Kinds and fingerprints
    "ValueKind",
    "Fingerprint",
    # Values
    "Null",
    "NULL",
    "Boolean",
    "TRUE",
    "FALSE",
    "Integer",
    "NumberFormat",
    "Binary",
    "Text",
    "List",
    "Dictionary",
    "Indirect",
    # Value contract
    "kind_of",
    "encoding_length_of",
    "fingerprint_of",
    "inspect",
    "to_value",
    # Decimal helpers
    "parse_decimal",
    "canonical_decimal",
    "count_decimal_digits",
    "twos_complement_bytes",
    # Fixed-width conversions
    "truncate",
    "to_int16",
    "to_uint16",
    "to_int32",
    "to_uint32",
    "to_int64",
    "to_uint64",
    # Errors
    "BencodexError",
    "FormatError",
    "ERR_FORMAT",
    "ERR_UTF8",
    "ERR_FINGERPRINT",
]
