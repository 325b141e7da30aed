"""
Duplicable Sequence Producers
=============================

A cursor never buffers what it peeks. It re-derives lookahead by stepping a
second producer copied from the first, so every source it wraps must be able
to duplicate its current position. This module models that capability.

Producer Capability
-------------------
- ``__next__()`` yields the next element or raises StopIteration
- ``clone()`` returns an independent producer at the same position

Python's iterator protocol says nothing about duplication, so plain
iterators are only accepted when their copies are known to be independent:
the built-in iterators over str, bytes, list, tuple, range and dict, their
reversed forms, and classes that define ``__copy__``. Generators, files and
wrappers such as map, filter, zip and enumerate are rejected.

Example Usage
-------------
>>> from peekcursor.producers import duplicable
>>> producer = duplicable("abc")
>>> next(producer)
'a'
>>> twin = producer.clone()
>>> next(producer), next(twin)
('b', 'b')
"""

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar

from peekcursor.errors import NotDuplicableError


logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Producer Base Class
# =============================================================================

class Producer(ABC, Generic[T]):
    """
    Forward-only sequence producer that can duplicate its position.

    Subclasses implement ``__next__`` and ``clone``. A clone must yield
    exactly the elements its source would yield from that point on,
    and stepping one must never move the other.
    """

    def __iter__(self) -> "Producer[T]":
        return self

    @abstractmethod
    def __next__(self) -> T:
        ...

    @abstractmethod
    def clone(self) -> "Producer[T]":
        """Return an independent producer positioned where this one is."""
        ...

    def __copy__(self) -> "Producer[T]":
        return self.clone()


# =============================================================================
# Concrete Producers
# =============================================================================

class SequenceProducer(Producer[T]):
    """
    Index cursor over any random-access sequence.

    Works for str, list, tuple, range, bytes and anything else registered
    as a ``collections.abc.Sequence``. Cloning copies one integer, so
    peeking through a SequenceProducer costs O(1) per fresh lookahead.

    Attributes:
        sequence: The wrapped sequence (never modified)
    """

    def __init__(self, sequence: Sequence[T], start: int = 0):
        if not 0 <= start <= len(sequence):
            raise ValueError(
                f"start index {start} outside sequence of length {len(sequence)}"
            )
        self.sequence = sequence
        self._pos = start

    def __next__(self) -> T:
        pos = self._pos
        if pos >= len(self.sequence):
            raise StopIteration
        self._pos = pos + 1
        return self.sequence[pos]

    def clone(self) -> "SequenceProducer[T]":
        return SequenceProducer(self.sequence, self._pos)

    @property
    def position(self) -> int:
        """Index of the element the next step will yield."""
        return self._pos

    def remaining(self) -> Sequence[T]:
        """Return the not-yet-produced tail without stepping."""
        return self.sequence[self._pos:]

    def __repr__(self) -> str:
        return f"SequenceProducer(len={len(self.sequence)}, position={self._pos})"


class CopyProducer(Producer[T]):
    """
    Adapter for iterators that support ``copy.copy()``.

    The copy must be independent of the wrapped iterator; duplicable() checks that
    before building one of these.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator

    def __next__(self) -> T:
        return next(self._iterator)

    def clone(self) -> "CopyProducer[T]":
        return CopyProducer(copy.copy(self._iterator))

    def __repr__(self) -> str:
        return f"CopyProducer({type(self._iterator).__name__})"


# =============================================================================
# Adapter
# =============================================================================

# Built-in iterators whose copies keep their own position. Wrapper iterators
# such as map, filter, zip and enumerate copy into a new wrapper around the
# same inner iterator, so stepping the copy moves the original.
INDEPENDENT_ITERATOR_TYPES: frozenset = frozenset({
    type(iter("")),
    type(iter(b"")),
    type(iter(bytearray())),
    type(iter([])),
    type(iter(())),
    type(iter(range(0))),
    type(iter(range(1 << 64))),
    type(iter({})),
    type(iter({}.values())),
    type(iter({}.items())),
    type(reversed([])),
    type(reversed(())),
    type(reversed({})),
})


def _copies_independently(iterator: Iterator) -> bool:
    """True if copy.copy() of ``iterator`` is known to keep its own position."""
    cls = type(iterator)
    return cls in INDEPENDENT_ITERATOR_TYPES or "__copy__" in dir(cls)


def duplicable(source: Any) -> Producer:
    """
    Adapt a source into a Producer.

    Args:
        source: A Producer, a Sequence, or an iterable whose iterator is a
            built-in sequence/dict iterator or defines ``__copy__``

    Returns:
        A Producer positioned at the start of ``source`` (or at the
        current position, when ``source`` is already an iterator)

    Raises:
        NotDuplicableError: If the source cannot be duplicated
    """
    if isinstance(source, Producer):
        return source

    if isinstance(source, Sequence):
        return SequenceProducer(source)

    try:
        iterator = iter(source)
    except TypeError as e:
        raise NotDuplicableError(
            f"'{type(source).__name__}' object is not iterable"
        ) from e

    if not _copies_independently(iterator):
        raise NotDuplicableError(
            f"'{type(iterator).__name__}' object cannot be duplicated "
            f"independently; wrap a sequence or a Producer instead"
        )

    try:
        duplicate = copy.copy(iterator)
    except (TypeError, copy.Error) as e:
        raise NotDuplicableError(
            f"'{type(iterator).__name__}' object cannot be duplicated; "
            f"wrap a sequence or a Producer instead"
        ) from e

    if duplicate is iterator:
        raise NotDuplicableError(
            f"copying '{type(iterator).__name__}' returns the same object"
        )

    logger.debug(f"Wrapping {type(iterator).__name__} in a copy-based producer")
    return CopyProducer(iterator)
