"""Iterator contracts.

``Iterator`` is the read-only cursor every container hands out; containers
whose cursors can also delete the current element return a
``MutableIterator``, so bulk removal can tell the two apart. Both are regular
Python iterators as well.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic

from .exceptions import (
    ConcurrentModificationError,
    IllegalStateError,
    NoSuchElementError,
)
from .types import E


class Iterator(ABC, Generic[E]):
    """Single-pass cursor over the elements of a container."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if next() has an element to return."""
        raise NotImplementedError

    @abstractmethod
    def next(self) -> E:
        """Return the next element, raising NoSuchElementError when exhausted."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[E]:
        return self

    def __next__(self) -> E:
        if not self.has_next():
            raise StopIteration
        return self.next()


class MutableIterator(Iterator[E]):
    """Iterator that can remove the element last returned by next()."""

    @abstractmethod
    def remove(self) -> None:
        raise NotImplementedError


class SnapshotIterator(Iterator[E]):
    """Read-only iterator over a copy of the elements taken at creation."""

    def __init__(self, elements: Sequence[E]) -> None:
        self._elements = tuple(elements)
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._elements)

    def next(self) -> E:
        if not self.has_next():
            raise NoSuchElementError("No more elements")
        element = self._elements[self._cursor]
        self._cursor += 1
        return element


class FailFastIterator(MutableIterator[E]):
    """Base for iterators bound to a container's modification counter.

    The owner increments ``_mod_count`` on every structural change. An
    iterator captures the counter on creation and after each of its own
    removals; any other change makes the next call fail.
    """

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        self._expected_mod_count = owner._mod_count
        self._can_remove = False

    def _check_for_comodification(self) -> None:
        if self._owner._mod_count != self._expected_mod_count:
            raise ConcurrentModificationError(
                f"{type(self._owner).__name__} was modified during iteration"
            )

    @abstractmethod
    def _advance(self) -> E:
        """Move past the next element and return it."""
        raise NotImplementedError

    @abstractmethod
    def _remove_current(self) -> None:
        """Remove the element last returned from the owner."""
        raise NotImplementedError

    def next(self) -> E:
        self._check_for_comodification()
        if not self.has_next():
            raise NoSuchElementError("No more elements")
        element = self._advance()
        self._can_remove = True
        return element

    def remove(self) -> None:
        if not self._can_remove:
            raise IllegalStateError("remove() requires a preceding call to next()")
        self._check_for_comodification()
        self._remove_current()
        self._can_remove = False
        self._expected_mod_count = self._owner._mod_count
