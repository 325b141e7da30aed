"""
Run Scanner
===========

Splits text into maximal runs of a single character class using
TextCursor.next_while(). Each run records where it started, so this is the
first stage of a hand-written lexer: keywords, literals and operators can be
recognized from runs without re-counting positions.

Run Kinds
---------
| Kind       | Starts with            | Continues with          |
|------------|------------------------|-------------------------|
| WORD       | letter or "_"          | letter, digit or "_"    |
| NUMBER     | digit                  | digit                   |
| WHITESPACE | whitespace except "\\n" | whitespace except "\\n"  |
| NEWLINE    | "\\n"                   | "\\n"                    |
| PUNCT      | anything else          | anything else           |

Example Usage
-------------
>>> from peekcursor.scanner import scan_runs
>>> for run in scan_runs("x1 = 42;"):
...     print(run)
Run(WORD, 'x1', 1:0)
Run(PUNCT, '=', 1:3)
Run(NUMBER, '42', 1:5)
Run(PUNCT, ';', 1:7)

Copyright (c) 2025-2026 peekcursor contributors
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Iterator, Optional

from peekcursor.config import ScanConfig, get_default_config
from peekcursor.errors import ScanError, SourceLocation
from peekcursor.text import TextCursor


logger = logging.getLogger(__name__)


class RunKind(Enum):
    """Character class shared by every character of a run."""
    WORD = auto()
    NUMBER = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    PUNCT = auto()


@dataclass(frozen=True)
class Run:
    """
    A maximal run of same-class characters.

    Attributes:
        kind: The RunKind of every character in the run
        text: The characters of the run
        line: Line where the run starts (1-indexed)
        column: Column where the run starts (0-indexed)
    """
    kind: RunKind
    text: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"Run({self.kind.name}, {self.text!r}, {self.line}:{self.column})"


def classify(char: str) -> RunKind:
    """Return the RunKind a run starting with ``char`` would have."""
    if char == "\n":
        return RunKind.NEWLINE
    if char.isspace():
        return RunKind.WHITESPACE
    if char.isdigit():
        return RunKind.NUMBER
    if char.isalpha() or char == "_":
        return RunKind.WORD
    return RunKind.PUNCT


# Continuation tests; each accepts every character classify() maps to its kind
_CONTINUES: dict[RunKind, Callable[[str], bool]] = {
    RunKind.WORD: lambda c: c.isalnum() or c == "_",
    RunKind.NUMBER: str.isdigit,
    RunKind.WHITESPACE: lambda c: c != "\n" and c.isspace(),
    RunKind.NEWLINE: lambda c: c == "\n",
    RunKind.PUNCT: lambda c: classify(c) is RunKind.PUNCT,
}


# =============================================================================
# Scanner
# =============================================================================

class RunScanner:
    """
    Produces Run objects from a TextCursor.

    Usage:
        scanner = RunScanner(source_text, "notes.txt")
        runs = list(scanner.scan())

    Attributes:
        cursor: The TextCursor being scanned
        config: Scan settings (whitespace reporting, run limit)
    """

    def __init__(
        self,
        source,
        filename: str = "<input>",
        config: Optional[ScanConfig] = None,
    ):
        if isinstance(source, TextCursor):
            self.cursor = source
        else:
            self.cursor = TextCursor(source, filename)
        self.config = config or get_default_config()

    def scan(self) -> Iterator[Run]:
        """
        Generate runs until the input is exhausted or max_runs is reached.

        WHITESPACE runs are consumed but only yielded when
        ``config.show_whitespace`` is set; they do not count toward
        ``config.max_runs``.
        """
        reported = 0
        while True:
            first = self.cursor.peek()
            if first is None:
                break

            kind = classify(first)
            line, column = self.cursor.line, self.cursor.col
            text = self.cursor.next_while(_CONTINUES[kind])

            if kind is RunKind.WHITESPACE and not self.config.show_whitespace:
                continue

            yield Run(kind, text, line, column)
            reported += 1
            if self.config.max_runs and reported >= self.config.max_runs:
                logger.debug(f"Stopping after {reported} runs at {self.cursor.location}")
                return


def scan_runs(
    source,
    filename: str = "<input>",
    config: Optional[ScanConfig] = None,
) -> Iterator[Run]:
    """Convenience wrapper: ``RunScanner(source, filename, config).scan()``."""
    return RunScanner(source, filename, config).scan()


# =============================================================================
# File Input
# =============================================================================

def read_source(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file for scanning.

    Newlines are kept exactly as stored; "\\r" counts as one column.

    Raises:
        FileNotFoundError: If the file does not exist
        ScanError: If the bytes cannot be decoded, with the location of
            the first bad byte
    """
    data = Path(path).read_bytes()
    try:
        return data.decode(encoding)
    except LookupError as e:
        raise ScanError(
            f"unknown encoding '{encoding}'",
            hint="use a codec name such as utf-8 or latin-1",
        ) from e
    except UnicodeDecodeError as e:
        line_start = data.rfind(b"\n", 0, e.start) + 1
        line_end = data.find(b"\n", e.start)
        if line_end == -1:
            line_end = len(data)
        # Column counts decoded characters, matching the caret under source_line
        prefix = data[line_start:e.start].decode(encoding, errors="replace")
        location = SourceLocation(
            str(path),
            data.count(b"\n", 0, e.start) + 1,
            len(prefix) + 1,
        )
        source_line = data[line_start:line_end].decode(encoding, errors="replace")
        raise ScanError(
            f"cannot decode byte 0x{data[e.start]:02x} as {encoding}",
            location,
            hint="pass --encoding to pick another codec",
            source_line=source_line,
        ) from e
