"""
Tests for the lexparse command line tool.

Author: lexparse contributors
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lexparse.cli import build_parser, main


class TestCommandLine(unittest.TestCase):
    """Run main() against temporary source files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, text):
        path = os.path.join(self.tmpdir.name, "prog.lang")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_prints_tokens(self):
        path = self._write('let x = "hi";')
        status, out, _ = self._run(path)
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "let ()",
            "identifier (x)",
            "assignment ()",
            'string ("hi")',
            "semicolon ()",
            "eof ()",
        ])

    def test_locations_and_count(self):
        path = self._write("a\n  b")
        status, out, _ = self._run(path, "--locations", "--count")
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tidentifier (a)",
            "2:3\tidentifier (b)",
            "2:4\teof ()",
            "3 tokens",
        ])

    def test_unrecognized_input(self):
        path = self._write("let a = @;")
        status, out, err = self._run(path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("ERROR[L001]", err)
        self.assertIn("prog.lang:1:9", err)

    def test_missing_file(self):
        status, out, err = self._run(os.path.join(self.tmpdir.name, "nope.lang"))
        self.assertEqual(status, 1)
        self.assertIn("cannot read", err)

    def test_invalid_utf8(self):
        path = os.path.join(self.tmpdir.name, "latin1.lang")
        with open(path, "wb") as f:
            f.write(b'let s = "caf\xe9";')
        status, out, err = self._run(path)
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("not valid UTF-8", err)

    def test_invalid_log_level_from_environment(self):
        path = self._write("x")
        with mock.patch.dict(os.environ, {"LEXPARSE_LOG_LEVEL": "verbose"}):
            with self.assertRaises(SystemExit) as ctx:
                self._run(path)
        self.assertEqual(ctx.exception.code, 2)

    def test_default_path(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.path, os.path.join("examples", "01.lang"))

    def test_log_level_from_environment(self):
        with mock.patch.dict(os.environ, {"LEXPARSE_LOG_LEVEL": "debug"}):
            args = build_parser().parse_args(["x.lang"])
        self.assertEqual(args.log_level, "DEBUG")


if __name__ == '__main__':
    unittest.main()
