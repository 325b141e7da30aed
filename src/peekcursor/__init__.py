"""
peekcursor - Unbuffered Lookahead Cursors
=========================================

This package provides cursors that can peek arbitrarily far ahead in a
sequence without losing their place, then either commit to the peeked
position or throw the lookahead away.

Lookahead is never buffered. The cursor keeps a second producer, copied
from the first when peeking begins, and simply steps the copy. Any source
that can duplicate its position cheaply works: strings, lists, tuples,
ranges, or a custom Producer.

Main Components
---------------
- **cursor**: LookaheadCursor, the generic two-producer state machine
- **text**: TextCursor, a character cursor that tracks line and column
- **producers**: the duplicable Producer capability and adapters
- **scanner**: splits text into character-class runs (peekscan)

Quick Start
-----------
Peek and commit:
    >>> from peekcursor import LookaheadCursor
    >>> cursor = LookaheadCursor(range(4))
    >>> cursor.next_while(lambda x: x < 2)
    [0, 1]
    >>> cursor.peek()
    2

Track positions while lexing:
    >>> from peekcursor import TextCursor
    >>> cursor = TextCursor("ab\\nc")
    >>> cursor.next_while(lambda c: c != "c")
    'ab\\n'
    >>> cursor.line, cursor.col
    (2, 0)

Or use the command-line tool:
    $ peekscan notes.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from peekcursor.cursor import LookaheadCursor, CursorState, MAX_LOOKAHEAD
from peekcursor.text import TextCursor, PositionTracker, SourcePosition
from peekcursor.producers import (
    Producer,
    SequenceProducer,
    CopyProducer,
    duplicable,
)
from peekcursor.errors import (
    CursorError,
    NotDuplicableError,
    CursorConsumedError,
    ScanError,
    SourceLocation,
)
from peekcursor.scanner import Run, RunKind, RunScanner, scan_runs
from peekcursor.config import ScanConfig, get_default_config, set_default_config

__all__ = [
    # Version info
    "__version__",
    # Cursors
    "LookaheadCursor",
    "CursorState",
    "MAX_LOOKAHEAD",
    "TextCursor",
    "PositionTracker",
    "SourcePosition",
    # Producers
    "Producer",
    "SequenceProducer",
    "CopyProducer",
    "duplicable",
    # Exception hierarchy
    "CursorError",
    "NotDuplicableError",
    "CursorConsumedError",
    "ScanError",
    "SourceLocation",
    # Scanner
    "Run",
    "RunKind",
    "RunScanner",
    "scan_runs",
    # Configuration
    "ScanConfig",
    "get_default_config",
    "set_default_config",
]
