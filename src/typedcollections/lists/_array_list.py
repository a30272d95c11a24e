from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Final

from typedcollections._comparators import natural_compare
from typedcollections._logging import null_logger
from typedcollections.abstracts import AbstractList
from typedcollections.types import E

if TYPE_CHECKING:
    from typedcollections.types import Comparator

logger: Final = null_logger(__name__)


class ArrayList(AbstractList[E]):
    """A resizable list backed by a Python list.

    get() and set() are O(1), add() is amortized O(1), add_at() and
    remove_at() shift the tail and are O(n). Searches compare with ``==``.
    sub_list() returns an independent copy, never a view.

    Example::

        items = ArrayList()
        items.add(10)
        items.add_at(0, 5)
        items.get(1)  # 10
    """

    def __init__(self, options: Any = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self._elements: list[E] = []

    def size(self) -> int:
        return len(self._elements)

    def contains(self, element: Any) -> bool:
        return element in self._elements

    def get(self, index: int) -> E:
        self._check_index(index)
        return self._elements[index]

    def set(self, index: int, element: E) -> E:
        self._check_index(index)
        self._validate_element(element)
        old = self._elements[index]
        self._elements[index] = element
        return old

    def add(self, element: E) -> bool:
        self._validate_element(element)
        self._elements.append(element)
        self._mod_count += 1
        return True

    def add_at(self, index: int, element: E) -> None:
        self._check_position(index)
        self._validate_element(element)
        self._elements.insert(index, element)
        self._mod_count += 1

    def remove_at(self, index: int) -> E:
        self._check_index(index)
        self._mod_count += 1
        return self._elements.pop(index)

    def index_of(self, element: Any) -> int:
        try:
            return self._elements.index(element)
        except ValueError:
            return -1

    def last_index_of(self, element: Any) -> int:
        for index in range(len(self._elements) - 1, -1, -1):
            if self._elements[index] == element:
                return index
        return -1

    def sub_list(self, from_index: int, to_index: int) -> ArrayList[E]:
        self._check_range(from_index, to_index)
        result: ArrayList[E] = ArrayList(self._options)
        for element in self._elements[from_index:to_index]:
            result.add(element)
        return result

    def clear(self) -> None:
        self._elements = []
        self._mod_count += 1
        self._reset_type_inference()

    def to_array(self) -> list[E]:
        return list(self._elements)

    def sort(self, comparator: Comparator | None = None) -> None:
        self._elements.sort(key=cmp_to_key(comparator or natural_compare))
        self._mod_count += 1
        logger.debug("Sorted ArrayList of size %d", len(self._elements))
