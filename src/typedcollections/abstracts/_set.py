from __future__ import annotations

from typing import Any

from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.types import E

_INT32_MASK = 0xFFFFFFFF


def _string_hash(text: str) -> int:
    """32 bit ``h = 31 * h + c`` hash, stable across interpreter runs."""
    h = 0
    for char in text:
        h = (h * 31 + ord(char)) & _INT32_MASK
    return h - (1 << 32) if h & 0x80000000 else h


class AbstractSet(AbstractCollection[E]):
    """Base class for collections without duplicate elements.

    Subclasses must make add() refuse elements already present. Two sets are
    equal when they have the same size and one contains all elements of the
    other.
    """

    def hash_code(self) -> int:
        """Sum of the element hashes, independent of iteration order."""
        return sum(self._hash_element(element) for element in self)

    def _hash_element(self, element: Any) -> int:
        return _string_hash(str(element))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.size() == other.size() and self.contains_all(other)

    __hash__ = None  # type: ignore[assignment]
