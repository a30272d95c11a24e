from __future__ import annotations

from typing import Any, Final

from typedcollections._iterators import MutableIterator
from typedcollections._logging import null_logger
from typedcollections.abstracts import AbstractStack
from typedcollections.lists import LinkedList
from typedcollections.types import E

logger: Final = null_logger(__name__)


class _LinkedStackIterator(MutableIterator[E]):
    """Top to bottom over the backing list; removals may empty the stack."""

    def __init__(self, stack: LinkedStack[E]) -> None:
        self._stack = stack
        self._inner = stack._list.iterator()

    def has_next(self) -> bool:
        return self._inner.has_next()

    def next(self) -> E:
        return self._inner.next()

    def remove(self) -> None:
        self._inner.remove()
        self._stack._reset_if_empty()


class LinkedStack(AbstractStack[E]):
    """A last-in first-out stack on top of a LinkedList.

    The top of the stack is the head of the backing list, so iteration and
    to_array() run from the most recently pushed element down. The backing
    list does no validation of its own; the stack validates on push() and
    resets type inference whenever it runs empty.
    """

    def __init__(self, options: Any = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self._list: LinkedList[E] = LinkedList(strict=False)

    def push(self, element: E) -> bool:
        self._validate_element(element)
        self._list.add_first(element)
        return True

    def pop(self) -> E | None:
        if self._list.is_empty():
            return None
        element = self._list.remove_first()
        self._reset_if_empty()
        return element

    def peek(self) -> E | None:
        if self._list.is_empty():
            return None
        return self._list.get_first()

    def size(self) -> int:
        return self._list.size()

    def contains(self, element: Any) -> bool:
        return self._list.contains(element)

    def remove(self, element: Any) -> bool:
        removed = self._list.remove(element)
        self._reset_if_empty()
        return removed

    def clear(self) -> None:
        self._list.clear()
        self._reset_type_inference()

    def iterator(self) -> _LinkedStackIterator[E]:
        return _LinkedStackIterator(self)

    def to_array(self) -> list[E]:
        return self._list.to_array()

    def _reset_if_empty(self) -> None:
        if self._list.is_empty():
            logger.debug("LinkedStack ran empty, resetting type inference")
            self._reset_type_inference()
