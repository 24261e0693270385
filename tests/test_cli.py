"""
Tests for the window-lm command line entry point.
"""

import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from window_lm.cli import main


class TestCLI(unittest.TestCase):
    """Tests for command line runs."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.corpus = self.tmp / "corpus.txt"
        self.corpus.write_text("abab", encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([str(a) for a in argv])
        return code, out.getvalue()

    def test_generates_text(self):
        code, out = self.run_cli(self.corpus, "-w", 2, "-t", "ab", "-n", 6, "--seed", 1)
        self.assertEqual(code, 0)
        self.assertEqual(out, "ababab\n")

    def test_show_model(self):
        self.corpus.write_text("aaaa", encoding="utf-8")
        code, out = self.run_cli(self.corpus, "-w", 1, "-t", "a", "-n", 3, "--show-model")
        self.assertEqual(code, 0)
        self.assertEqual(out, "a : ((a 3 1.0 1.0))\naaa\n")

    def test_config_file_with_override(self):
        config_path = self.tmp / "config.json"
        config_path.write_text(
            json.dumps({"window_length": 2, "initial_text": "ba", "text_length": 4, "extra": True}),
            encoding="utf-8",
        )
        code, out = self.run_cli(self.corpus, "--config", config_path, "-n", 5)
        self.assertEqual(code, 0)
        self.assertEqual(out, "babab\n")

    def test_missing_corpus(self):
        with self.assertLogs("window_lm", level="ERROR") as logs:
            code, out = self.run_cli(self.tmp / "missing.txt", "-w", 2)
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_lowercase_keeps_tabs(self):
        self.corpus.write_text("A\tA\t", encoding="utf-8")
        code, out = self.run_cli(self.corpus, "-w", 2, "-t", "a\t", "-n", 5, "--lowercase")
        self.assertEqual(code, 0)
        self.assertEqual(out, "a\ta\ta\n")

    def test_config_file_not_an_object(self):
        config_path = self.tmp / "config.json"
        config_path.write_text("[1, 2]", encoding="utf-8")
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli(self.corpus, "--config", config_path)
        self.assertEqual(ctx.exception.code, 2)

    def test_invalid_window_length(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli(self.corpus, "-w", 0)
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
