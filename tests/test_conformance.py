"""Bencodex INTEGER conformance suite.

Runs every vector in conformance/integer_vectors.json: decimal input ->
canonical text, encoding length, and fingerprint digest (raw or hashed).

Usage:
    python tests/test_conformance.py [--vectors-dir DIR]
    python -m pytest tests/test_conformance.py -v
    BENCODEX_VECTORS_DIR=conformance python tests/test_conformance.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import unittest
from typing import Any, Dict, List, Optional, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bencodex import BencodexError, Integer, ValueKind

# ── Locate conformance data ───────────────────────────────────

_VECTORS_DIR: Optional[str] = os.environ.get("BENCODEX_VECTORS_DIR", None)
_VECTORS_FILE = "integer_vectors.json"


def _find_vectors_dir() -> str:
    if _VECTORS_DIR:
        return _VECTORS_DIR
    candidates = [
        os.path.join(os.path.dirname(__file__), "..", "conformance"),
        os.path.join(os.path.dirname(__file__), "conformance"),
    ]
    for d in candidates:
        if os.path.isfile(os.path.join(d, _VECTORS_FILE)):
            return d
    raise FileNotFoundError(
        "Cannot find conformance vectors. Set BENCODEX_VECTORS_DIR or --vectors-dir."
    )


def _load_data() -> Tuple[List[dict], List[dict], str]:
    """Load vectors.  Returns (value vectors, error vectors, version)."""
    d = _find_vectors_dir()
    with open(os.path.join(d, _VECTORS_FILE), "r", encoding="utf-8") as f:
        data = json.load(f)
    return data["vectors"], data["errors"], data["version"]


def _run_vector(vec: dict) -> Dict[str, Any]:
    """Execute one vector.  Returns the observed fields or {"err": code}."""
    try:
        value = Integer(vec["input"])
    except BencodexError as e:
        return {"err": e.code}
    fp = value.fingerprint
    return {
        "canonical": value.inspect(),
        "encoding_length": value.encoding_length,
        "kind": fp.kind,
        "fp_length": fp.encoding_length,
        "digest": fp.digest.hex(),
        "hashed": fp.digest != _raw_bytes(value),
    }


def _raw_bytes(value: Integer) -> bytes:
    v = value.value
    size = (v if v >= 0 else ~v).bit_length() // 8 + 1
    return v.to_bytes(size, "little", signed=True)


def _expected(vec: dict) -> Dict[str, Any]:
    if "error" in vec:
        return {"err": vec["error"]}
    exp = {
        "canonical": vec["canonical"],
        "encoding_length": vec["encoding_length"],
        "kind": ValueKind.INTEGER,
        "fp_length": vec["encoding_length"],
        "hashed": vec["hashed"],
    }
    if vec["digest"] is not None:
        exp["digest"] = vec["digest"]
    return exp


def _compare(got: Dict[str, Any], exp: Dict[str, Any]) -> bool:
    # Vectors may leave a hashed digest unspecified; everything else must match.
    return {k: got.get(k) for k in exp} == exp and (
        "err" in exp or len(bytes.fromhex(got["digest"])) <= 20
    )


# ── unittest integration ──────────────────────────────────────

class ConformanceTests(unittest.TestCase):
    """Dynamically generated: one test method per vector."""
    pass


def _make_test(vec: dict):
    def test_fn(self: unittest.TestCase) -> None:
        got = _run_vector(vec)
        exp = _expected(vec)
        self.assertTrue(_compare(got, exp),
                        "{}: got {} expected {}".format(vec["id"], got, exp))
    return test_fn


# Attach test methods at import time.
try:
    _vectors, _errors, _version = _load_data()
    for _vec in _vectors + _errors:
        _tid = _vec["id"].replace("-", "_")
        _fn = _make_test(_vec)
        _fn.__name__ = "test_{}".format(_tid)
        _fn.__qualname__ = "ConformanceTests.test_{}".format(_tid)
        setattr(ConformanceTests, "test_{}".format(_tid), _fn)
except FileNotFoundError:
    pass


# ── Standalone CLI runner ─────────────────────────────────────

def main() -> None:
    global _VECTORS_DIR

    parser = argparse.ArgumentParser(description="Bencodex INTEGER conformance runner")
    parser.add_argument("--vectors-dir", default=None,
                        help="Directory with conformance vector files")
    args, _remaining = parser.parse_known_args()

    if args.vectors_dir:
        _VECTORS_DIR = args.vectors_dir
        os.environ["BENCODEX_VECTORS_DIR"] = args.vectors_dir

    vectors, errors, version = _load_data()

    passed = 0
    failed = 0
    failures: List[Tuple[str, dict, dict]] = []

    for vec in vectors + errors:
        got = _run_vector(vec)
        exp = _expected(vec)
        if _compare(got, exp):
            passed += 1
        else:
            failed += 1
            failures.append((vec["id"], got, exp))

    total = passed + failed
    print("CONFORMANCE (v{}): {}/{} PASS".format(version, passed, total))
    for tid, got, exp in failures:
        print("  FAIL {}: got={} expected={}".format(tid, got, exp))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
