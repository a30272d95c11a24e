from __future__ import annotations

from typing import Any, Generic

from typedcollections._iterators import FailFastIterator
from typedcollections.abstracts import AbstractQueue
from typedcollections.exceptions import EmptyContainerError
from typedcollections.types import E


class _QueueNode(Generic[E]):
    __slots__ = ("value", "next")

    def __init__(self, value: E) -> None:
        self.value = value
        self.next: _QueueNode[E] | None = None


class _LinkedQueueIterator(FailFastIterator[E]):
    """Head to tail; remembers the node before the current one for removal."""

    def __init__(self, owner: LinkedQueue[E]) -> None:
        super().__init__(owner)
        self._queue = owner
        self._previous: _QueueNode[E] | None = None
        self._current: _QueueNode[E] | None = None
        self._pending = owner._head

    def has_next(self) -> bool:
        return self._pending is not None

    def _advance(self) -> E:
        if self._current is not None:
            self._previous = self._current
        self._current = self._pending
        self._pending = self._current.next
        return self._current.value

    def _remove_current(self) -> None:
        self._queue._unlink(self._previous, self._current)
        self._current = None


class LinkedQueue(AbstractQueue[E]):
    """A first-in first-out queue on a singly linked chain.

    offer() appends at the tail, dequeue() and poll() take from the head;
    both are O(1).
    """

    def __init__(self, options: Any = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self._head: _QueueNode[E] | None = None
        self._tail: _QueueNode[E] | None = None
        self._size = 0

    def offer(self, element: E) -> bool:
        self._validate_element(element)
        node = _QueueNode(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._mod_count += 1
        return True

    def dequeue(self) -> E | None:
        if self._head is None:
            return None
        return self._unlink(None, self._head)

    def poll(self) -> E | None:
        return self.dequeue()

    def element(self) -> E:
        if self._head is None:
            raise EmptyContainerError("Queue is empty")
        return self._head.value

    def peek(self) -> E | None:
        return None if self._head is None else self._head.value

    def size(self) -> int:
        return self._size

    def contains(self, element: Any) -> bool:
        node = self._head
        while node is not None:
            if node.value == element:
                return True
            node = node.next
        return False

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0
        self._mod_count += 1
        self._reset_type_inference()

    def iterator(self) -> _LinkedQueueIterator[E]:
        return _LinkedQueueIterator(self)

    def to_array(self) -> list[E]:
        result = []
        node = self._head
        while node is not None:
            result.append(node.value)
            node = node.next
        return result

    def _unlink(self, previous: _QueueNode[E] | None, node: _QueueNode[E]) -> E:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        node.next = None
        self._size -= 1
        self._mod_count += 1
        return node.value
