"""
Tests for the Run Scanner
=========================

These tests verify character classification, run boundaries and
positions, configuration handling, and file decoding errors.
"""

import pytest

from peekcursor.config import ScanConfig
from peekcursor.errors import ScanError
from peekcursor.scanner import (
    Run,
    RunKind,
    RunScanner,
    classify,
    read_source,
    scan_runs,
)
from peekcursor.text import TextCursor


def runs(source, **config):
    """Helper: scan with an explicit config (never the environment)."""
    return list(scan_runs(source, config=ScanConfig(**config)))


# =============================================================================
# Classification
# =============================================================================

class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize("char,kind", [
        ("a", RunKind.WORD),
        ("_", RunKind.WORD),
        ("é", RunKind.WORD),
        ("7", RunKind.NUMBER),
        (" ", RunKind.WHITESPACE),
        ("\t", RunKind.WHITESPACE),
        ("\r", RunKind.WHITESPACE),
        ("\n", RunKind.NEWLINE),
        ("+", RunKind.PUNCT),
        ("(", RunKind.PUNCT),
    ])
    def test_classify(self, char, kind):
        assert classify(char) is kind


# =============================================================================
# Scanning
# =============================================================================

class TestScan:
    """Tests for run boundaries and positions."""

    def test_empty(self):
        assert runs("") == []

    def test_simple_statement(self):
        assert runs("x1 = 42;") == [
            Run(RunKind.WORD, "x1", 1, 0),
            Run(RunKind.PUNCT, "=", 1, 3),
            Run(RunKind.NUMBER, "42", 1, 5),
            Run(RunKind.PUNCT, ";", 1, 7),
        ]

    def test_word_absorbs_digits(self):
        assert [r.text for r in runs("abc123 456abc")] == ["abc123", "456", "abc"]

    def test_punctuation_runs_are_maximal(self):
        assert [r.text for r in runs("a==b")] == ["a", "==", "b"]

    def test_newlines(self):
        result = runs("a\n\nb")
        assert result == [
            Run(RunKind.WORD, "a", 1, 0),
            Run(RunKind.NEWLINE, "\n\n", 1, 1),
            Run(RunKind.WORD, "b", 3, 0),
        ]

    def test_whitespace_hidden_by_default(self):
        kinds = [r.kind for r in runs("a  b")]
        assert RunKind.WHITESPACE not in kinds

    def test_whitespace_shown(self):
        result = runs("a \t b", show_whitespace=True)
        assert result[1] == Run(RunKind.WHITESPACE, " \t ", 1, 1)

    def test_max_runs(self):
        result = runs("a b c d", max_runs=2)
        assert [r.text for r in result] == ["a", "b"]

    def test_max_runs_leaves_cursor_after_last_run(self):
        cursor = TextCursor("a b c")
        scanner = RunScanner(cursor, config=ScanConfig(max_runs=1))
        list(scanner.scan())
        assert cursor.next() == " "

    def test_run_str(self):
        assert str(Run(RunKind.WORD, "hi", 2, 4)) == "Run(WORD, 'hi', 2:4)"

    def test_concatenated_runs_rebuild_input(self):
        source = "def f(x):\n    return x*2  # twice\n"
        text = "".join(r.text for r in runs(source, show_whitespace=True))
        assert text == source

    def test_default_config_from_environment(self, monkeypatch):
        from peekcursor import config as config_module

        monkeypatch.setenv("PEEKCURSOR_MAX_RUNS", "1")
        monkeypatch.setattr(config_module, "_default_config", None)
        assert len(list(scan_runs("a b c"))) == 1


# =============================================================================
# File Input
# =============================================================================

class TestReadSource:
    """Tests for read_source()."""

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_bytes("héllo\n".encode("utf-8"))
        assert read_source(path) == "héllo\n"

    def test_other_encoding(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_bytes("héllo".encode("latin-1"))
        assert read_source(path, "latin-1") == "héllo"

    def test_decode_error_location(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"ok\nab\xffcd\n")
        with pytest.raises(ScanError) as exc_info:
            read_source(path)
        error = exc_info.value
        assert error.location.line == 2
        assert error.location.column == 3
        assert "cannot decode byte 0xff" in str(error)
        assert "hint: pass --encoding" in str(error)

    def test_decode_error_column_counts_characters(self, tmp_path):
        """Multibyte characters before the bad byte count as one column each."""
        path = tmp_path / "bad.txt"
        path.write_bytes("éé".encode("utf-8") + b"\xffx\n")
        with pytest.raises(ScanError) as exc_info:
            read_source(path)
        error = exc_info.value
        assert (error.location.line, error.location.column) == (1, 3)
        lines = str(error).splitlines()
        assert lines[1] == "    éé\ufffdx"
        assert lines[2] == "      ^"

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_text("x")
        with pytest.raises(ScanError, match="unknown encoding"):
            read_source(path, "no-such-codec")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_source(tmp_path / "missing.txt")
