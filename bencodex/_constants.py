"""Bencodex constants: wire markers, digest bounds, fixed-width ranges.

None of these are tunable.  Changing any marker or the digest cap changes
every fingerprint computed from it.
"""

from __future__ import annotations

# ── Wire markers (single ASCII byte each) ────────────────────
# Only the integer markers are needed to size an integer; the rest are
# used by the leaf and compound kinds to compute their framing overhead.
MARKER_NULL: bytes = b"n"
MARKER_TRUE: bytes = b"t"
MARKER_FALSE: bytes = b"f"
MARKER_INTEGER: bytes = b"i"
MARKER_TEXT: bytes = b"u"
MARKER_LIST: bytes = b"l"
MARKER_DICTIONARY: bytes = b"d"
MARKER_END: bytes = b"e"           # terminates integers, lists, dictionaries
LENGTH_SEPARATOR: bytes = b":"     # between a byte count and its payload

# ── Fingerprints ─────────────────────────────────────────────
# Digests longer than this are replaced by their SHA-1 hash, which is
# exactly this size.  Compound digests are always hashed.
MAX_DIGEST_SIZE: int = 20
DIGEST_ALGORITHM: str = "sha1"

# Serialized fingerprint header: kind (1) + int64 length (8) + digest size (1).
FINGERPRINT_HEADER_SIZE: int = 10

# ── Decimal digit fast path ──────────────────────────────────
# Magnitudes below the last threshold are sized by comparison alone.
# Index i holds 10**(i+1); anything at or above the last entry falls back
# to rendering the decimal string.
DIGIT_THRESHOLDS = (10, 100, 1_000, 10_000)

# ── Fixed-width integer ranges ───────────────────────────────
# Python ints never overflow, so every narrowing conversion must say
# explicitly what it does with out-of-range values.  See _coerce.py.
INT16_MIN: int = -(2**15)
INT16_MAX: int = 2**15 - 1
UINT16_MAX: int = 2**16 - 1
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
UINT32_MAX: int = 2**32 - 1
INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1
