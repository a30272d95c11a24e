from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Generic

from typedcollections._comparators import natural_compare
from typedcollections._iterators import FailFastIterator
from typedcollections._logging import null_logger
from typedcollections.abstracts import AbstractList
from typedcollections.exceptions import EmptyContainerError
from typedcollections.types import E

if TYPE_CHECKING:
    from typedcollections.types import Comparator

logger: Final = null_logger(__name__)


class _Node(Generic[E]):
    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: E,
        prev: _Node[E] | None = None,
        next: _Node[E] | None = None,  # noqa: A002
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class _LinkedListIterator(FailFastIterator[E]):
    def __init__(self, owner: LinkedList[E], reverse: bool = False) -> None:
        super().__init__(owner)
        self._list = owner
        self._reverse = reverse
        self._pending = owner._tail if reverse else owner._head
        self._last: _Node[E] | None = None

    def has_next(self) -> bool:
        return self._pending is not None

    def _advance(self) -> E:
        self._last = self._pending
        self._pending = self._last.prev if self._reverse else self._last.next
        return self._last.value

    def _remove_current(self) -> None:
        self._list._unlink(self._last)
        self._last = None


class LinkedList(AbstractList[E]):
    """A doubly linked list.

    Insertion and removal at both ends are O(1). Indexed access walks from
    whichever end is closer to the index. sort() is a stable merge sort that
    relinks the existing nodes instead of copying elements.

    Type inference is reset whenever the list becomes empty, not only on
    clear().

    Example::

        numbers = LinkedList()
        numbers.add(1)
        numbers.add_first(0)
        numbers.add_last(2)
        numbers.to_array()  # [0, 1, 2]
    """

    def __init__(self, options: Any = None, **kwargs: Any) -> None:
        super().__init__(options, **kwargs)
        self._head: _Node[E] | None = None
        self._tail: _Node[E] | None = None
        self._size = 0

    # ==================================================================================
    # Deque style access
    # ==================================================================================

    def add(self, element: E) -> bool:
        self.add_last(element)
        return True

    def add_first(self, element: E) -> None:
        self._validate_element(element)
        self._link_first(element)

    def add_last(self, element: E) -> None:
        self._validate_element(element)
        self._link_last(element)

    def get_first(self) -> E:
        if self._head is None:
            raise EmptyContainerError("List is empty")
        return self._head.value

    def get_last(self) -> E:
        if self._tail is None:
            raise EmptyContainerError("List is empty")
        return self._tail.value

    def remove_first(self) -> E:
        if self._head is None:
            raise EmptyContainerError("List is empty")
        return self._unlink(self._head)

    def remove_last(self) -> E:
        if self._tail is None:
            raise EmptyContainerError("List is empty")
        return self._unlink(self._tail)

    # ==================================================================================
    # List operations
    # ==================================================================================

    def size(self) -> int:
        return self._size

    def get(self, index: int) -> E:
        self._check_index(index)
        return self._node_at(index).value

    def set(self, index: int, element: E) -> E:
        self._check_index(index)
        self._validate_element(element)
        node = self._node_at(index)
        old = node.value
        node.value = element
        return old

    def add_at(self, index: int, element: E) -> None:
        self._check_position(index)
        self._validate_element(element)
        if index == self._size:
            self._link_last(element)
        elif index == 0:
            self._link_first(element)
        else:
            self._link_before(element, self._node_at(index))

    def remove_at(self, index: int) -> E:
        self._check_index(index)
        return self._unlink(self._node_at(index))

    def index_of(self, element: Any) -> int:
        index = 0
        node = self._head
        while node is not None:
            if node.value == element:
                return index
            node = node.next
            index += 1
        return -1

    def last_index_of(self, element: Any) -> int:
        index = self._size - 1
        node = self._tail
        while node is not None:
            if node.value == element:
                return index
            node = node.prev
            index -= 1
        return -1

    def contains(self, element: Any) -> bool:
        return self.index_of(element) != -1

    def sub_list(self, from_index: int, to_index: int) -> LinkedList[E]:
        self._check_range(from_index, to_index)
        result: LinkedList[E] = LinkedList(self._options)
        if from_index == to_index:
            return result
        node = self._node_at(from_index)
        for _ in range(to_index - from_index):
            result.add_last(node.value)
            node = node.next
        return result

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0
        self._mod_count += 1
        self._reset_type_inference()

    def iterator(self) -> _LinkedListIterator[E]:
        return _LinkedListIterator(self)

    def reverse_iterator(self) -> _LinkedListIterator[E]:
        """Return an iterator from tail to head."""
        return _LinkedListIterator(self, reverse=True)

    def to_array(self) -> list[E]:
        result = []
        node = self._head
        while node is not None:
            result.append(node.value)
            node = node.next
        return result

    # ==================================================================================
    # Sorting
    # ==================================================================================

    def sort(self, comparator: Comparator | None = None) -> None:
        """Sort the list in place with a stable merge sort on the nodes.

        The chain is split at its midpoint, both halves are sorted
        recursively and merged back, taking from the left half on ties. No
        node is allocated or copied; only the prev/next links change.
        """
        if self._size < 2:
            return
        compare = comparator or natural_compare
        self._head, self._tail = _merge_sort(self._head, self._size, compare)
        self._mod_count += 1
        logger.debug("Sorted LinkedList of size %d", self._size)

    # ==================================================================================
    # Node management
    # ==================================================================================

    def _node_at(self, index: int) -> _Node[E]:
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _link_first(self, element: E) -> None:
        node = _Node(element, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1
        self._mod_count += 1

    def _link_last(self, element: E) -> None:
        node = _Node(element, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._mod_count += 1

    def _link_before(self, element: E, successor: _Node[E]) -> None:
        predecessor = successor.prev
        node = _Node(element, predecessor, successor)
        successor.prev = node
        if predecessor is None:
            self._head = node
        else:
            predecessor.next = node
        self._size += 1
        self._mod_count += 1

    def _unlink(self, node: _Node[E]) -> E:
        predecessor, successor = node.prev, node.next
        if predecessor is None:
            self._head = successor
        else:
            predecessor.next = successor
        if successor is None:
            self._tail = predecessor
        else:
            successor.prev = predecessor
        node.prev = node.next = None
        self._size -= 1
        self._mod_count += 1
        if self._size == 0:
            self._reset_type_inference()
        return node.value


def _merge_sort(
    head: _Node[E], length: int, compare: Comparator
) -> tuple[_Node[E], _Node[E]]:
    """Sort a detached chain of ``length`` nodes; return its new head and tail."""
    if length == 1:
        head.prev = None
        head.next = None
        return head, head

    middle = length // 2
    right = head
    for _ in range(middle):
        right = right.next
    right.prev.next = None
    right.prev = None

    left_head, left_tail = _merge_sort(head, middle, compare)
    right_head, right_tail = _merge_sort(right, length - middle, compare)
    return _merge(left_head, left_tail, right_head, right_tail, compare)


def _merge(
    left: _Node[E],
    left_tail: _Node[E],
    right: _Node[E],
    right_tail: _Node[E],
    compare: Comparator,
) -> tuple[_Node[E], _Node[E]]:
    """Merge two sorted chains; ``<=`` takes the left node on ties."""
    if compare(left.value, right.value) <= 0:
        head, left = left, left.next
    else:
        head, right = right, right.next
    head.prev = None
    tail = head

    while left is not None and right is not None:
        if compare(left.value, right.value) <= 0:
            node, left = left, left.next
        else:
            node, right = right, right.next
        tail.next = node
        node.prev = tail
        tail = node

    # exactly one side is exhausted here, the other is appended wholesale
    rest, rest_tail = (left, left_tail) if left is not None else (right, right_tail)
    tail.next = rest
    rest.prev = tail
    return head, rest_tail
