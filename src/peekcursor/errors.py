"""
peekcursor Error Hierarchy
==========================

This module defines the exception hierarchy for the peekcursor package.
All exceptions inherit from CursorError, allowing callers to catch every
package error with a single except clause if desired.

Running out of elements is NOT an error: ``next()``, ``peek()`` and
``peek_nth()`` report end-of-sequence by returning their ``default``.
The exceptions below cover misuse and bad input only.

Exception Hierarchy
-------------------
CursorError (base)
├── NotDuplicableError - source cannot be duplicated at its current position
├── CursorConsumedError - cursor used after into_inner()
└── ScanError - scanner input that cannot be read as text

Error messages for ScanError follow the same format used by compilers:
    filename:line:column: error: description
    source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class CursorError(Exception):
    """
    Base exception for all peekcursor errors.

        try:
            cursor = LookaheadCursor(source)
        except CursorError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in text input for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Cursor Exceptions
# =============================================================================

class NotDuplicableError(CursorError, TypeError):
    """
    The wrapped source cannot be independently duplicated.

    Lookahead is derived from a second producer copied from the first, so
    one-shot sources such as generators and open files are rejected when
    the cursor is built rather than failing on the first peek.
    """
    pass


class CursorConsumedError(CursorError):
    """
    An operation was attempted on a cursor after into_inner().

    into_inner() hands the base producer back to the caller; the cursor
    no longer owns anything it could step.
    """
    pass


# =============================================================================
# Scanner Exceptions
# =============================================================================

class ScanError(CursorError):
    """
    Input handed to the run scanner could not be read.

    Attributes:
        message: The error description
        location: Where in the input the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            notes.txt:3:7: error: cannot decode byte 0xff as utf-8
                hello ?world
                      ^
            hint: pass --encoding to pick another codec
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)
