"""
Tests for peekscan - Character Run Scanner CLI
==============================================

These tests verify that peekscan prints runs with positions, honours
its options and environment configuration, and maps errors to the
documented exit codes.
"""

from click.testing import CliRunner

from peekcursor.cli.errors import ExitCode
from peekcursor.cli.peekscan import format_run, main
from peekcursor.scanner import Run, RunKind


def write_input(tmp_path, content, name="input.txt"):
    """Helper: write a UTF-8 input file and return its path as a string."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


# =============================================================================
# Formatting
# =============================================================================

class TestFormatRun:
    """Tests for format_run()."""

    def test_one_based_column(self):
        line = format_run(Run(RunKind.WORD, "hello", 3, 0))
        assert line.startswith("3:1")
        assert "WORD" in line
        assert line.endswith("'hello'")

    def test_newline_is_escaped(self):
        assert format_run(Run(RunKind.NEWLINE, "\n", 1, 4)).endswith("'\\n'")


# =============================================================================
# CLI Behaviour
# =============================================================================

class TestPeekscanCLI:
    """Tests for the peekscan command."""

    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Split a text file into character-class runs" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "peekscan" in result.output

    def test_basic_scan(self, tmp_path):
        path = write_input(tmp_path, "let x = 10\n")
        result = CliRunner().invoke(main, [path])
        assert result.exit_code == ExitCode.SUCCESS
        lines = result.output.splitlines()
        assert len(lines) == 5
        assert lines[0].startswith("1:1") and "'let'" in lines[0]
        assert lines[1].startswith("1:5") and "'x'" in lines[1]
        assert "NUMBER" in lines[3] and "'10'" in lines[3]
        assert "NEWLINE" in lines[4]

    def test_whitespace_flag(self, tmp_path):
        path = write_input(tmp_path, "a b")
        result = CliRunner().invoke(main, [path, "--whitespace"])
        assert result.exit_code == 0
        assert "WHITESPACE" in result.output

    def test_max_runs(self, tmp_path):
        path = write_input(tmp_path, "a b c d e")
        result = CliRunner().invoke(main, [path, "-n", "2"])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 2

    def test_negative_max_runs_rejected(self, tmp_path):
        path = write_input(tmp_path, "a")
        result = CliRunner().invoke(main, [path, "-n", "-1"])
        assert result.exit_code == 2

    def test_empty_file(self, tmp_path):
        path = write_input(tmp_path, "")
        result = CliRunner().invoke(main, [path])
        assert result.exit_code == 0
        assert result.output == ""

    def test_output_file(self, tmp_path):
        path = write_input(tmp_path, "word")
        out = tmp_path / "runs.txt"
        result = CliRunner().invoke(main, [path, "-o", str(out)])
        assert result.exit_code == 0
        assert "'word'" in out.read_text(encoding="utf-8")
        assert result.output == ""

    def test_environment_config(self, tmp_path, monkeypatch):
        path = write_input(tmp_path, "a b c")
        monkeypatch.setenv("PEEKCURSOR_MAX_RUNS", "1")
        result = CliRunner().invoke(main, [path])
        assert len(result.output.splitlines()) == 1

    def test_flag_overrides_environment(self, tmp_path, monkeypatch):
        path = write_input(tmp_path, "a b c")
        monkeypatch.setenv("PEEKCURSOR_MAX_RUNS", "1")
        result = CliRunner().invoke(main, [path, "--max-runs", "0"])
        assert len(result.output.splitlines()) == 3

    def test_encoding_option(self, tmp_path):
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))
        result = CliRunner().invoke(main, [str(path), "--encoding", "latin-1"])
        assert result.exit_code == 0
        assert "'café'" in result.output


# =============================================================================
# Error Handling
# =============================================================================

class TestPeekscanErrors:
    """Tests for exit codes and error messages."""

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(main, [str(tmp_path / "nope.txt")])
        assert result.exit_code == 2

    def test_decode_error(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"abc\xff\n")
        result = CliRunner().invoke(main, [str(path)])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "bad.txt:1:4: error: cannot decode byte 0xff" in result.output

    def test_unknown_encoding(self, tmp_path):
        path = write_input(tmp_path, "x")
        result = CliRunner().invoke(main, [path, "--encoding", "no-such-codec"])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "unknown encoding" in result.output

    def test_verbose_reports_counts(self, tmp_path):
        path = write_input(tmp_path, "a b")
        result = CliRunner().invoke(main, [path, "-v"])
        assert result.exit_code == 0
        assert "Runs reported: 2" in result.output
