from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Final

from typedcollections._comparators import natural_compare
from typedcollections._definitions import DEFAULT_VECTOR_CAPACITY
from typedcollections._logging import null_logger
from typedcollections.abstracts import AbstractList
from typedcollections.exceptions import EmptyContainerError
from typedcollections.types import E

if TYPE_CHECKING:
    from typedcollections.types import Comparator

logger: Final = null_logger(__name__)


class Vector(AbstractList[E]):
    """A growable array with explicit capacity management.

    Storage is a fixed-length backing list that grows when full: by
    ``capacity_increment`` slots when it is positive, otherwise by doubling.
    Besides the List operations, the classic Vector aliases are available
    (element_at, add_element, insert_element_at, remove_element, ...).

    Args:
        initial_capacity: Number of slots allocated up front.
        capacity_increment: Slots added on growth; 0 means double.
        options: Type validation options, see AbstractCollection.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_VECTOR_CAPACITY,
        capacity_increment: int = 0,
        options: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(options, **kwargs)
        if initial_capacity < 0:
            raise ValueError(f"Illegal capacity: {initial_capacity}")
        if capacity_increment < 0:
            raise ValueError(f"Illegal capacity increment: {capacity_increment}")
        self._elements: list[E | None] = [None] * initial_capacity
        self._element_count = 0
        self._capacity_increment = capacity_increment

    # ==================================================================================
    # Capacity
    # ==================================================================================

    def capacity(self) -> int:
        return len(self._elements)

    def ensure_capacity(self, min_capacity: int) -> None:
        if min_capacity > len(self._elements):
            self._grow(min_capacity)

    def trim_to_size(self) -> None:
        """Shrink the backing storage to exactly size() slots."""
        self._elements = self._elements[: self._element_count]

    def set_size(self, new_size: int) -> None:
        """Truncate to ``new_size`` elements, or pad with None up to it."""
        if new_size < 0:
            raise ValueError(f"Illegal size: {new_size}")
        self.ensure_capacity(new_size)
        for index in range(new_size, self._element_count):
            self._elements[index] = None
        self._element_count = new_size
        self._mod_count += 1

    def _grow(self, min_capacity: int) -> None:
        old_capacity = len(self._elements)
        if self._capacity_increment > 0:
            new_capacity = old_capacity + self._capacity_increment
        else:
            new_capacity = old_capacity * 2
        new_capacity = max(new_capacity, min_capacity)
        self._elements.extend([None] * (new_capacity - old_capacity))
        logger.debug("Vector grown from %d to %d slots", old_capacity, new_capacity)

    # ==================================================================================
    # List operations
    # ==================================================================================

    def size(self) -> int:
        return self._element_count

    def contains(self, element: Any) -> bool:
        return self.index_of(element) >= 0

    def index_of(self, element: Any) -> int:
        for index in range(self._element_count):
            if self._elements[index] == element:
                return index
        return -1

    def last_index_of(self, element: Any) -> int:
        for index in range(self._element_count - 1, -1, -1):
            if self._elements[index] == element:
                return index
        return -1

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
        self.ensure_capacity(self._element_count + 1)
        self._elements[self._element_count] = element
        self._element_count += 1
        self._mod_count += 1
        return True

    def add_at(self, index: int, element: E) -> None:
        self._check_position(index)
        self._validate_element(element)
        self.ensure_capacity(self._element_count + 1)
        for position in range(self._element_count, index, -1):
            self._elements[position] = self._elements[position - 1]
        self._elements[index] = element
        self._element_count += 1
        self._mod_count += 1

    def remove_at(self, index: int) -> E:
        self._check_index(index)
        old = self._elements[index]
        for position in range(index, self._element_count - 1):
            self._elements[position] = self._elements[position + 1]
        self._element_count -= 1
        self._elements[self._element_count] = None
        self._mod_count += 1
        return old

    def sub_list(self, from_index: int, to_index: int) -> Vector[E]:
        self._check_range(from_index, to_index)
        result: Vector[E] = Vector(options=self._options)
        for index in range(from_index, to_index):
            result.add(self._elements[index])
        return result

    def clear(self) -> None:
        for index in range(self._element_count):
            self._elements[index] = None
        self._element_count = 0
        self._mod_count += 1
        self._reset_type_inference()

    def to_array(self) -> list[E]:
        return self._elements[: self._element_count]

    def sort(self, comparator: Comparator | None = None) -> None:
        live = self._elements[: self._element_count]
        live.sort(key=cmp_to_key(comparator or natural_compare))
        self._elements[: self._element_count] = live
        self._mod_count += 1
        logger.debug("Sorted Vector of size %d", self._element_count)

    # ==================================================================================
    # Vector aliases
    # ==================================================================================

    def element_at(self, index: int) -> E:
        return self.get(index)

    def first_element(self) -> E:
        if self._element_count == 0:
            raise EmptyContainerError("Vector is empty")
        return self._elements[0]

    def last_element(self) -> E:
        if self._element_count == 0:
            raise EmptyContainerError("Vector is empty")
        return self._elements[self._element_count - 1]

    def set_element_at(self, element: E, index: int) -> None:
        self.set(index, element)

    def add_element(self, element: E) -> None:
        self.add(element)

    def insert_element_at(self, element: E, index: int) -> None:
        self.add_at(index, element)

    def remove_element_at(self, index: int) -> None:
        self.remove_at(index)

    def remove_element(self, element: Any) -> bool:
        return self.remove(element)

    def remove_all_elements(self) -> None:
        self.clear()
