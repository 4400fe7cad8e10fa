"""
Tests for the line-oriented front end.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.repl import main, process_line, run


class TestRepl(unittest.TestCase):
    """Test cases for the REPL helpers and entry point."""

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()

    def test_process_valid_line(self):
        ok = process_line("1 + 2 * 3", self.out, self.err)
        self.assertTrue(ok)
        self.assertEqual(self.out.getvalue(), "(+ 1 (* 2 3))\n")
        self.assertEqual(self.err.getvalue(), "")

    def test_process_malformed_line(self):
        ok = process_line("1 2", self.out, self.err)
        self.assertFalse(ok)
        self.assertEqual(self.out.getvalue(), "")
        self.assertEqual(self.err.getvalue(), "[column 3] Error at '2': Expect end of expression\n")

    def test_process_tokens(self):
        ok = process_line("-7", self.out, self.err, show_tokens=True)
        self.assertTrue(ok)
        lines = self.out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("MINUS", lines[0])
        self.assertIn("'7'", lines[1])
        self.assertIn("EOF", lines[2])

    def test_process_tokens_with_error_token(self):
        ok = process_line("1 @", self.out, self.err, show_tokens=True)
        self.assertFalse(ok)
        lines = self.out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("ERROR", lines[1])
        self.assertIn("Unexpected character", lines[1])

    def test_main_tokens_with_error_token(self):
        with redirect_stdout(self.out), redirect_stderr(self.err):
            status = main(["-c", "@", "--tokens"])
        self.assertEqual(status, 1)

        self.out = io.StringIO()
        with redirect_stdout(self.out), redirect_stderr(self.err):
            status = main(["-c", "-7", "--tokens"])
        self.assertEqual(status, 0)

    def test_run_reads_until_eof(self):
        stdin = io.StringIO("1-2-3\n\n1?2\n-1*2\n")
        status = run(stdin, self.out, self.err)
        self.assertEqual(status, 0)
        self.assertEqual(self.out.getvalue().splitlines(), ["(- (- 1 2) 3)", "(* (- 1) 2)"])
        self.assertIn("Expected ':' after true condition", self.err.getvalue())

    def test_main_single_expression(self):
        with redirect_stdout(self.out), redirect_stderr(self.err):
            status = main(["-c", "1?2:3?4:5"])
        self.assertEqual(status, 0)
        self.assertEqual(self.out.getvalue(), "(?: 1 2 (?: 3 4 5))\n")

    def test_main_single_expression_with_error(self):
        with redirect_stdout(self.out), redirect_stderr(self.err):
            status = main(["-c", "1@2"])
        self.assertEqual(status, 1)
        self.assertIn("Error: Unexpected character", self.err.getvalue())


if __name__ == '__main__':
    unittest.main()
