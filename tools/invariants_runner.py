#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Seeded property checks for Bencodex INTEGER and compound fingerprints.
#
# This runner:
# - generates random integers across magnitudes (tiny, fixed-width edges, huge)
# - checks the integer contract invariants in Python
# - checks that compound fingerprints track single-child edits
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, random
from typing import Any, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from bencodex import Integer, List as BList, count_decimal_digits, to_value

SEED = int(os.environ.get("BENCODEX_SEED", "1337"))
TRIALS = int(os.environ.get("BENCODEX_TRIALS", "2000"))
MAX_DIGITS = int(os.environ.get("BENCODEX_GEN_MAX_DIGITS", "400"))
MAX_LIST = int(os.environ.get("BENCODEX_GEN_MAX_LIST", "8"))

random.seed(SEED)

EDGES = [0, 9, 10, 99, 100, 999, 1000, 9999, 10000, 127, 128, 255, 256,
         2**15, 2**16, 2**31, 2**32, 2**63, 2**64, 2**159, 2**160]

def rand_int() -> int:
    r = random.random()
    if r < 0.30:
        n = random.choice(EDGES) + random.randint(-1, 1)
    elif r < 0.70:
        n = random.randint(0, 10**random.randint(1, 20))
    else:
        n = int("".join(random.choice("0123456789") for _ in range(random.randint(1, MAX_DIGITS))))
    return -n if random.random() < 0.5 else n

def rand_decimal(n: int) -> str:
    # Same value, non-canonical spelling.
    sign = "-" if n < 0 else random.choice(["", "+"])
    return sign + "0" * random.randint(0, 3) + str(abs(n))

def fail(msg: str, *ctx: Any) -> None:
    print("INVARIANT FAIL:", msg, *ctx)
    raise SystemExit(1)

def check_integer(n: int) -> None:
    v = Integer(n)
    text = rand_decimal(n)
    w = Integer(text)

    # (1) canonical text round-trip
    if v.inspect() != str(n) or w.inspect() != str(n):
        fail("canonical text", n, text)

    # (2) encoding length is 2 + digit count, sign excluded
    if v.encoding_length != 2 + len(str(abs(n))) or count_decimal_digits(n) != len(str(abs(n))):
        fail("encoding length", n)

    # (3) equal values, equal fingerprints
    if v != w or v.fingerprint != w.fingerprint:
        fail("fingerprint of equal values", n, text)

    # (4) digest bounded
    if len(v.fingerprint.digest) > 20:
        fail("digest bound", n)

    # (5) neighbours differ and order numerically
    u = Integer(n + 1)
    if u.fingerprint == v.fingerprint or not (v < u):
        fail("neighbour", n)

def check_list_edit() -> None:
    items: List[int] = [rand_int() for _ in range(random.randint(1, MAX_LIST))]
    lst = BList(items)
    i = random.randrange(len(items))
    edited = lst.set(i, items[i] + 1)
    items[i] += 1
    rebuilt = to_value(items)
    if edited.fingerprint != rebuilt.fingerprint:
        fail("list edit fingerprint", items)
    if edited.fingerprint == lst.fingerprint:
        fail("list edit unchanged", items)

def main() -> int:
    for _ in range(TRIALS):
        check_integer(rand_int())
        check_list_edit()
    print(f"OK: invariants passed for TRIALS={TRIALS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
