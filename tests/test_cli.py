"""Tests for the `python -m bencodex` command line."""

from __future__ import annotations

import contextlib
import io
import os
import sys
import unittest
from unittest import mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bencodex import __version__
from bencodex._cli import main


def _run(*argv, stdin=""):
    out, err = io.StringIO(), io.StringIO()
    code = 0
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err), \
            mock.patch.object(sys, "stdin", io.StringIO(stdin)):
        try:
            main(list(argv))
        except SystemExit as e:
            code = e.code
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):
    def test_inspect(self):
        code, out, _ = _run("inspect", "007", "-0", "+42", "-5")
        self.assertEqual(code, 0)
        self.assertEqual(out.split(), ["7", "0", "42", "-5"])

    def test_length(self):
        _, out, _ = _run("length", "12345", "-5", "100")
        self.assertEqual(out.split(), ["7", "3", "5"])

    def test_fingerprint(self):
        _, out, _ = _run("fingerprint", "100")
        self.assertEqual(out.strip(), "integer:5:64")

    def test_fingerprint_serialized(self):
        _, out, _ = _run("fingerprint", "--serialized", "100")
        self.assertEqual(out.strip(), "0205000000000000000164")

    def test_stdin(self):
        _, out, _ = _run("inspect", "-", stdin="0010\n\n-3\n")
        self.assertEqual(out.split(), ["10", "-3"])

    def test_format_error(self):
        code, _, err = _run("inspect", "12a")
        self.assertEqual(code, 2)
        self.assertIn("[ERR_FORMAT]", err)

    def test_version(self):
        _, out, _ = _run("version")
        self.assertEqual(out.strip(), "bencodex {}".format(__version__))

    def test_no_command(self):
        code, _, _ = _run()
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
