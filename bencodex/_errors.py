"""Bencodex error codes and exception classes.

Three things can go wrong in this package, all at construction time:
decimal text that does not parse as an integer, text that has no UTF-8
form (lone surrogates), and a fingerprint whose shape is invalid.  Once a
value exists, its kind, fingerprint, encoding length and inspection text
cannot fail.
"""

from __future__ import annotations

# ── Error codes ──────────────────────────────────────────────
# Grep-friendly, stable across releases.

ERR_FORMAT: str = "ERR_FORMAT"            # malformed decimal text
ERR_UTF8: str = "ERR_UTF8"                # text with no UTF-8 encoding
ERR_FINGERPRINT: str = "ERR_FINGERPRINT"  # bad fingerprint shape or mismatch


class BencodexError(Exception):
    """Base exception for Bencodex value errors.

    The `.code` attribute is one of the ERR_* strings above and is what
    tests and the CLI report.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


class FormatError(BencodexError, ValueError):
    """Decimal text is not an optionally-signed run of ASCII digits.

    Subclasses ValueError so callers that already guard ``int(text)`` keep
    working unchanged.
    """

    def __init__(self, msg: str = "") -> None:
        super().__init__(ERR_FORMAT, msg)
