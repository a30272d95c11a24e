from __future__ import annotations

from abc import abstractmethod

from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.types import E


class AbstractStack(AbstractCollection[E]):
    """Base class for last-in first-out collections; add() pushes."""

    @abstractmethod
    def push(self, element: E) -> bool:
        raise NotImplementedError

    @abstractmethod
    def pop(self) -> E | None:
        """Remove and return the top element, or None when empty."""
        raise NotImplementedError

    @abstractmethod
    def peek(self) -> E | None:
        """Return the top element without removing it, or None when empty."""
        raise NotImplementedError

    def add(self, element: E) -> bool:
        return self.push(element)
