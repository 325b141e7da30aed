"""
Lookahead Cursor
================

This module implements the dual-producer lookahead cursor. A cursor wraps a
duplicable producer (the *base*) and peeks through a second producer (the
*lookahead*) copied from the base the first time peeking begins. Nothing
peeked is ever buffered; looking further ahead simply steps the copy.

States
------
| State    | Lookahead | Entered by                                       |
|----------|-----------|--------------------------------------------------|
| ALIGNED  | none      | creation, next, rewind_peeking, advance_to_peeked |
| DIVERGED | present   | peek, peek_nth                                   |

Committing
----------
Only the base producer commits. ``next()`` drops the lookahead and reads
one element from the base; ``advance_to_peeked()`` commits everything the
lookahead has yielded in one go.

An optional ``on_commit`` hook is called with every committed element. The
text cursor uses it to count lines and columns.

Example Usage
-------------
>>> from peekcursor import LookaheadCursor
>>> cursor = LookaheadCursor(range(3))
>>> cursor.next()
0
>>> cursor.peek(), cursor.peek()
(1, 2)
>>> cursor.next()
1
>>> cursor.peek(), cursor.peek()
(2, None)

Copyright (c) 2025-2026 peekcursor contributors
"""

import logging
import sys
from enum import Enum, auto
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from peekcursor.errors import CursorConsumedError
from peekcursor.producers import Producer, duplicable


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Internal end-of-sequence marker; distinct from any element, None included
_END = object()

# Lookahead depth is an index; n + 1 past this cannot be looked at
MAX_LOOKAHEAD = sys.maxsize


class CursorState(Enum):
    """Whether a lookahead producer is currently active."""
    ALIGNED = auto()    # No lookahead; the next peek copies the base
    DIVERGED = auto()   # Lookahead present, at or ahead of the base


class LookaheadCursor(Generic[T]):
    """
    Cursor over a duplicable producer with unbounded, unbuffered peeking.

    The cursor is also an iterator: iterating commits elements exactly like
    repeated ``next()`` calls.

    Usage:
        cursor = LookaheadCursor("let x")
        word = cursor.next_while(str.isalpha)     # ['l', 'e', 't']
        cursor.peek()                             # ' '

    Attributes:
        on_commit: Callable invoked with every committed element (or None)
    """

    def __init__(
        self,
        source: Any,
        on_commit: Optional[Callable[[T], None]] = None,
    ):
        """
        Wrap a source.

        Args:
            source: Anything duplicable() accepts: a Producer, a Sequence,
                or an iterator whose copies advance independently
            on_commit: Optional hook called with each committed element

        Raises:
            NotDuplicableError: If the source cannot be duplicated
        """
        self._base: Optional[Producer[T]] = duplicable(source)
        self._lookahead: Optional[Producer[T]] = None
        self._depth = 0
        self.on_commit = on_commit

    # =========================================================================
    # Committing
    # =========================================================================

    def next(self, default: Any = None) -> Any:
        """
        Commit and return the next element of the base producer.

        Discards any lookahead first.

        Returns:
            The next element, or ``default`` at end-of-sequence
        """
        base = self._live_base()
        self._lookahead = None
        self._depth = 0

        item = next(base, _END)
        if item is _END:
            return default
        if self.on_commit is not None:
            self.on_commit(item)
        return item

    def advance_to_peeked(self) -> None:
        """
        Commit every element yielded by peeking since the last commit.

        The elements are not returned again; the next ``next()`` returns
        the element after the last peeked one. Does nothing when no
        lookahead is active.
        """
        self._live_base()
        if self._lookahead is None:
            return

        if self.on_commit is None:
            # Promote the lookahead; it already sits at the peeked position
            self._base = self._lookahead
        else:
            # Step the base over the peeked elements so the hook sees each one
            for _ in range(self._depth):
                self.on_commit(next(self._base))

        self._lookahead = None
        self._depth = 0

    # =========================================================================
    # Peeking
    # =========================================================================

    def peek(self, default: Any = None) -> Any:
        """
        Return the next element of the lookahead without committing it.

        The first peek after a commit returns what ``next()`` would return;
        each further peek returns the element after that.

        Returns:
            The peeked element, or ``default`` at end-of-sequence
        """
        base = self._live_base()
        if self._lookahead is None:
            self._lookahead = base.clone()
            self._depth = 0

        item = next(self._lookahead, _END)
        if item is _END:
            return default
        self._depth += 1
        return item

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """
        Peek ``n + 1`` times and return the last result.

        ``peek_nth(0)`` is the same as one ``peek()``. Continues from the
        current lookahead position, like ``peek()`` does.

        Args:
            n: Zero-based distance from the current lookahead position
            default: Returned if the sequence ends before reaching ``n``,
                or if ``n + 1`` exceeds MAX_LOOKAHEAD

        Raises:
            ValueError: If ``n`` is negative
        """
        self._live_base()
        if n < 0:
            raise ValueError(f"lookahead distance must be non-negative, got {n}")
        if n >= MAX_LOOKAHEAD:
            return default

        item = _END
        for _ in range(n + 1):
            item = self.peek(_END)
            if item is _END:
                return default
        return item

    def rewind_peeking(self) -> None:
        """
        Discard lookahead progress.

        The lookahead producer is dropped, so the next ``peek()`` starts
        again from the base position.
        """
        self._live_base()
        self._lookahead = None
        self._depth = 0

    # =========================================================================
    # Runs
    # =========================================================================

    def next_while(self, predicate: Callable[[T], bool]) -> List[T]:
        """
        Commit and return the longest run of elements satisfying ``predicate``.

        The predicate is called once per candidate, in order, and stops
        being called at the first rejection. The rejected element is not
        committed, so the next ``peek()`` or ``next()`` returns it.

        Args:
            predicate: Test applied to each candidate element; it must not
                touch the cursor

        Returns:
            The committed run, possibly empty
        """
        self.rewind_peeking()

        run = []
        while True:
            item = self.peek(_END)
            if item is _END or not predicate(item):
                break
            run.append(item)
            self.next()

        self.rewind_peeking()
        return run

    # =========================================================================
    # Unwrapping and Introspection
    # =========================================================================

    def into_inner(self) -> Producer[T]:
        """
        Return the base producer and retire the cursor.

        Pending lookahead is discarded. Any later call on this cursor
        raises CursorConsumedError.
        """
        base = self._live_base()
        self._base = None
        self._lookahead = None
        self._depth = 0
        logger.debug(f"Cursor released base producer {base!r}")
        return base

    @property
    def state(self) -> CursorState:
        """ALIGNED when no lookahead is active, DIVERGED otherwise."""
        if self._lookahead is None:
            return CursorState.ALIGNED
        return CursorState.DIVERGED

    @property
    def peek_depth(self) -> int:
        """Number of elements the active lookahead has yielded."""
        return self._depth

    @property
    def consumed(self) -> bool:
        """True once into_inner() has been called."""
        return self._base is None

    def _live_base(self) -> Producer[T]:
        if self._base is None:
            raise CursorConsumedError("cursor was consumed by into_inner()")
        return self._base

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self.next(_END)
        if item is _END:
            raise StopIteration
        return item

    def __repr__(self) -> str:
        if self.consumed:
            return f"{type(self).__name__}(consumed)"
        return f"{type(self).__name__}({self.state.name}, depth={self._depth})"
