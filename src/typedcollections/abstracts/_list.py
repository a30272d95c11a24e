from __future__ import annotations

from abc import abstractmethod
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Final

from typedcollections._comparators import natural_compare
from typedcollections._iterators import FailFastIterator
from typedcollections._logging import null_logger
from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.exceptions import IndexOutOfBoundsError
from typedcollections.types import E

if TYPE_CHECKING:
    from typedcollections.types import Comparator

logger: Final = null_logger(__name__)


class _IndexedListIterator(FailFastIterator[E]):
    """Walks a list by index through get() and removes through remove_at()."""

    def __init__(self, owner: AbstractList[E]) -> None:
        super().__init__(owner)
        self._list = owner
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < self._list.size()

    def _advance(self) -> E:
        element = self._list.get(self._cursor)
        self._cursor += 1
        return element

    def _remove_current(self) -> None:
        self._cursor -= 1
        self._list.remove_at(self._cursor)


class AbstractList(AbstractCollection[E]):
    """Base class for ordered, index-addressable collections.

    Subclasses implement get(), set(), add_at(), remove_at(), index_of(),
    last_index_of(), sub_list(), size(), contains(), to_array() and clear().
    add() appends through add_at(), remove() goes through index_of(), and the
    default iterator walks the list by index.
    """

    @abstractmethod
    def get(self, index: int) -> E:
        raise NotImplementedError

    @abstractmethod
    def set(self, index: int, element: E) -> E:
        """Replace the element at ``index`` and return the old one."""
        raise NotImplementedError

    @abstractmethod
    def add_at(self, index: int, element: E) -> None:
        """Insert the element at ``index``, 0 <= index <= size()."""
        raise NotImplementedError

    @abstractmethod
    def remove_at(self, index: int) -> E:
        raise NotImplementedError

    @abstractmethod
    def index_of(self, element: Any) -> int:
        """Return the first index holding an element equal to ``element``, or -1."""
        raise NotImplementedError

    @abstractmethod
    def last_index_of(self, element: Any) -> int:
        raise NotImplementedError

    @abstractmethod
    def sub_list(self, from_index: int, to_index: int) -> AbstractList[E]:
        """Return an independent copy of the range [from_index, to_index)."""
        raise NotImplementedError

    def add(self, element: E) -> bool:
        self.add_at(self.size(), element)
        return True

    def remove(self, element: Any) -> bool:
        index = self.index_of(element)
        if index == -1:
            return False
        self.remove_at(index)
        return True

    def iterator(self) -> _IndexedListIterator[E]:
        return _IndexedListIterator(self)

    def sort(self, comparator: Comparator | None = None) -> None:
        """Sort the list in place, keeping the order of equal elements.

        Without a comparator, natural_compare() is used.
        """
        ordered = sorted(
            self.to_array(), key=cmp_to_key(comparator or natural_compare)
        )
        for index, element in enumerate(ordered):
            self.set(index, element)
        logger.debug("Sorted %s of size %d", type(self).__name__, len(ordered))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size():
            raise IndexOutOfBoundsError(f"Index out of bounds: {index}")

    def _check_position(self, index: int) -> None:
        if not 0 <= index <= self.size():
            raise IndexOutOfBoundsError(f"Index out of bounds: {index}")

    def _check_range(self, from_index: int, to_index: int) -> None:
        if from_index < 0 or to_index > self.size() or from_index > to_index:
            raise IndexOutOfBoundsError(
                f"Invalid index range: from={from_index}, to={to_index}"
            )

    def __getitem__(self, index: int) -> E:
        return self.get(index)

    def __setitem__(self, index: int, element: E) -> None:
        self.set(index, element)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AbstractList):
            return NotImplemented
        return self.to_array() == other.to_array()

    __hash__ = None  # type: ignore[assignment]
