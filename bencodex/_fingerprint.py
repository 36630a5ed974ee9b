"""Fingerprints: fixed-shape content digests of Bencodex values.

A fingerprint is three things: the value's kind, the exact length of its
canonical encoding, and a digest of at most 20 bytes.  Two values of the
same kind are equal exactly when their fingerprints are (up to hash
collisions), so fingerprints double as content addresses.

Serialized form (what compound values feed into their own digest):

    kind            1 byte
    encoding length 8 bytes, signed little-endian
    digest size     1 byte  (0..20)
    digest          digest-size bytes

The digest size is explicit so that a run of concatenated fingerprints is
self-delimiting.
"""

from __future__ import annotations

import hashlib
import struct
from typing import Tuple

from ._constants import (
    DIGEST_ALGORITHM,
    FINGERPRINT_HEADER_SIZE,
    INT64_MAX,
    INT64_MIN,
    MAX_DIGEST_SIZE,
)
from ._errors import ERR_FINGERPRINT, BencodexError
from ._kinds import ValueKind

_HEADER = struct.Struct("<BqB")


def new_hasher():
    """Return a fresh hash object producing MAX_DIGEST_SIZE-byte digests."""
    return hashlib.new(DIGEST_ALGORITHM)


def compact_digest(payload: bytes) -> bytes:
    """Use *payload* itself as a digest when it is small enough, else hash it.

    Small values (most integers, short keys) skip hashing entirely; large
    ones still produce a bounded 20-byte digest.
    """
    if len(payload) <= MAX_DIGEST_SIZE:
        return bytes(payload)
    return hashlib.new(DIGEST_ALGORITHM, payload).digest()


class Fingerprint:
    """Immutable (kind, encoding_length, digest) triple."""

    __slots__ = ("_kind", "_encoding_length", "_digest")

    def __init__(self, kind: ValueKind, encoding_length: int, digest: bytes = b"") -> None:
        digest = bytes(digest)
        if len(digest) > MAX_DIGEST_SIZE:
            raise BencodexError(
                ERR_FINGERPRINT,
                "digest is {} bytes; at most {} allowed".format(len(digest), MAX_DIGEST_SIZE),
            )
        if encoding_length < INT64_MIN or encoding_length > INT64_MAX:
            raise BencodexError(ERR_FINGERPRINT, "encoding length outside int64 range")
        try:
            self._kind = ValueKind(kind)
        except ValueError:
            raise BencodexError(ERR_FINGERPRINT, "unknown kind tag {!r}".format(kind))
        self._encoding_length = encoding_length
        self._digest = digest

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def encoding_length(self) -> int:
        return self._encoding_length

    @property
    def digest(self) -> bytes:
        return self._digest

    # ── Serialization ─────────────────────────────────────────

    def serialize(self) -> bytes:
        """Return the byte-exact form consumed by compound hashing."""
        return _HEADER.pack(int(self._kind), self._encoding_length, len(self._digest)) + self._digest

    @classmethod
    def deserialize(cls, data: bytes) -> "Fingerprint":
        """Inverse of serialize().  *data* must hold exactly one fingerprint."""
        fp, end = cls.read(data, 0)
        if end != len(data):
            raise BencodexError(ERR_FINGERPRINT, "trailing bytes after fingerprint")
        return fp

    @classmethod
    def read(cls, data: bytes, off: int) -> Tuple["Fingerprint", int]:
        """Read one fingerprint from *data* at *off*; return it and the next offset."""
        if off + FINGERPRINT_HEADER_SIZE > len(data):
            raise BencodexError(ERR_FINGERPRINT, "truncated fingerprint header")
        kind, length, size = _HEADER.unpack_from(data, off)
        off += FINGERPRINT_HEADER_SIZE
        if size > MAX_DIGEST_SIZE:
            raise BencodexError(ERR_FINGERPRINT, "digest size {} exceeds {}".format(size, MAX_DIGEST_SIZE))
        if off + size > len(data):
            raise BencodexError(ERR_FINGERPRINT, "truncated fingerprint digest")
        return cls(kind, length, data[off:off + size]), off + size

    # ── Value semantics ───────────────────────────────────────

    def _key(self) -> Tuple[int, int, bytes]:
        return (int(self._kind), self._encoding_length, self._digest)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def hex(self) -> str:
        return self.serialize().hex()

    def __str__(self) -> str:
        return "{}:{}:{}".format(self._kind.name.lower(), self._encoding_length, self._digest.hex())

    def __repr__(self) -> str:
        return "Fingerprint({}, {}, bytes.fromhex({!r}))".format(
            self._kind.name, self._encoding_length, self._digest.hex()
        )
