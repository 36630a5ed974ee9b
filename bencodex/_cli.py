"""Bencodex command-line interface.

Usage:
    python3 -m bencodex inspect 007 -0 +42
    python3 -m bencodex length 12345 -5
    python3 -m bencodex fingerprint 100 --serialized
    echo 123456789 | python3 -m bencodex fingerprint -
    python3 -m bencodex version
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, List, Optional

import structlog

from . import BencodexError, Integer, __version__
from ._log import configure_logging

log = structlog.get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bencodex",
        description="Bencodex values: canonical text, encoding length, fingerprints",
    )
    parser.add_argument("--log-level", metavar="LEVEL",
                        help="Log level (default: $BENCODEX_LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command")

    # ── inspect ──
    inspect_p = sub.add_parser("inspect", help="Print canonical decimal text")
    inspect_p.add_argument("values", nargs="+", metavar="DECIMAL",
                           help="Decimal integers ('-' reads one per line from stdin)")

    # ── length ──
    length_p = sub.add_parser("length", help="Print canonical encoding lengths")
    length_p.add_argument("values", nargs="+", metavar="DECIMAL")

    # ── fingerprint ──
    fp_p = sub.add_parser("fingerprint", help="Print fingerprints")
    fp_p.add_argument("values", nargs="+", metavar="DECIMAL")
    fp_p.add_argument("--serialized", action="store_true",
                      help="Print the serialized fingerprint as hex")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _iter_values(raw: List[str]) -> Iterator[Integer]:
    """Parse the positional arguments; '-' expands to stdin lines."""
    for item in raw:
        if item == "-":
            for line in sys.stdin:
                line = line.strip()
                if line:
                    yield Integer(line)
        else:
            yield Integer(item)


def _cmd_inspect(args: argparse.Namespace) -> None:
    for value in _iter_values(args.values):
        print(value.inspect(True))


def _cmd_length(args: argparse.Namespace) -> None:
    for value in _iter_values(args.values):
        print(value.encoding_length)


def _cmd_fingerprint(args: argparse.Namespace) -> None:
    for value in _iter_values(args.values):
        fp = value.fingerprint
        print(fp.hex() if args.serialized else str(fp))


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    # No option looks like a negative number, so argparse keeps "-5" positional.
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"bencodex {__version__}")
        return

    log.debug("cli.command", command=args.command)
    try:
        if args.command == "inspect":
            _cmd_inspect(args)
        elif args.command == "length":
            _cmd_length(args)
        elif args.command == "fingerprint":
            _cmd_fingerprint(args)
    except BencodexError as e:
        print(f"bencodex: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
