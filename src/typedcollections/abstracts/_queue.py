from __future__ import annotations

from abc import abstractmethod
from typing import Any

from typedcollections._iterators import MutableIterator
from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.types import E


class AbstractQueue(AbstractCollection[E]):
    """Base class for collections holding elements prior to processing.

    add() delegates to offer(). The retrieval methods come in two flavours:
    poll(), dequeue() and peek() return None on an empty queue, element()
    raises EmptyContainerError.
    """

    @abstractmethod
    def offer(self, element: E) -> bool:
        raise NotImplementedError

    @abstractmethod
    def dequeue(self) -> E | None:
        raise NotImplementedError

    @abstractmethod
    def poll(self) -> E | None:
        raise NotImplementedError

    @abstractmethod
    def element(self) -> E:
        raise NotImplementedError

    @abstractmethod
    def peek(self) -> E | None:
        raise NotImplementedError

    def add(self, element: E) -> bool:
        return self.offer(element)

    def remove(self, element: Any) -> bool:
        """Remove the first occurrence of the element through the iterator."""
        iterator = self.iterator()
        if not isinstance(iterator, MutableIterator):
            return False
        while iterator.has_next():
            if iterator.next() == element:
                iterator.remove()
                return True
        return False
