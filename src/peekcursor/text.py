"""
Text Lookahead Cursor
=====================

A LookaheadCursor over characters that also tracks where it is in the text.
Text parsers use it to hand out token positions for error messages.

Position Rules
--------------
- Line numbers start at 1, column numbers at 0
- Committing a newline increments the line and resets the column to 0
- Committing any other character increments the column by 1

Columns count characters, not display cells: a tab or a wide character
advances the column by one. Peeking never moves the position; only
committed characters have been "seen".

Example Usage
-------------
>>> from peekcursor import TextCursor
>>> cursor = TextCursor("ab\\ncd")
>>> cursor.next_while(str.isalpha)
'ab'
>>> cursor.line, cursor.col
(1, 2)
>>> cursor.next()
'\\n'
>>> cursor.line, cursor.col
(2, 0)
"""

from dataclasses import dataclass
from typing import Any, Callable

from peekcursor.cursor import LookaheadCursor
from peekcursor.errors import SourceLocation


# =============================================================================
# Position Tracking
# =============================================================================

@dataclass(frozen=True)
class SourcePosition:
    """
    A committed position in text.

    Attributes:
        line: Line number (1-indexed)
        column: Characters committed on this line (0-indexed)
    """
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionTracker:
    """
    Commit hook that counts lines and columns.

    Called with every committed character. Assumes every character other
    than newline is one column wide.
    """

    def __init__(self, line: int = 1, column: int = 0):
        self.line = line
        self.column = column

    def __call__(self, char: str) -> None:
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    @property
    def position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)


# =============================================================================
# Text Cursor
# =============================================================================

class TextCursor(LookaheadCursor[str]):
    """
    Lookahead cursor over characters with line/column tracking.

    Usage:
        cursor = TextCursor(source_text, "config.ini")
        key = cursor.next_while(str.isalnum)
        if cursor.peek() != "=":
            raise ScanError("expected '='", cursor.location)

    Attributes:
        filename: Name reported in locations (or "<input>" for strings)
    """

    def __init__(
        self,
        source: Any,
        filename: str = "<input>",
        line_number: int = 1,
    ):
        """
        Wrap character input.

        Args:
            source: A string, or any duplicable producer of characters
            filename: Name of the source file (for locations)
            line_number: Starting line number (useful for embedded snippets)
        """
        self._tracker = PositionTracker(line=line_number)
        super().__init__(source, on_commit=self._tracker)
        self.filename = filename

    def next_while(self, predicate: Callable[[str], bool]) -> str:
        """
        Commit and return the longest run of characters satisfying ``predicate``.

        Same stop/commit protocol as LookaheadCursor.next_while(), but the
        run is returned as a string.
        """
        return "".join(super().next_while(predicate))

    def skip_whitespace(self) -> int:
        """Commit leading whitespace (newlines included) and return how much."""
        return len(self.next_while(str.isspace))

    @property
    def line(self) -> int:
        """Line of the last committed position (1-indexed)."""
        return self._tracker.line

    @property
    def col(self) -> int:
        """Characters committed on the current line (0-indexed)."""
        return self._tracker.column

    @property
    def position(self) -> SourcePosition:
        return self._tracker.position

    @property
    def location(self) -> SourceLocation:
        """
        Location of the next uncommitted character, for error reporting.

        SourceLocation columns are 1-indexed, so this is ``col + 1``.
        """
        return SourceLocation(self.filename, self._tracker.line, self._tracker.column + 1)
