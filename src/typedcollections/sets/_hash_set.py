from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, Any, Final

from typedcollections._hashing import structural_key
from typedcollections._iterators import FailFastIterator
from typedcollections._logging import null_logger
from typedcollections.abstracts import AbstractSet
from typedcollections.types import E

if TYPE_CHECKING:
    from typedcollections.types import KeyFunction

logger: Final = null_logger(__name__)


class _HashSetIterator(FailFastIterator[E]):
    def __init__(self, owner: HashSet[E]) -> None:
        super().__init__(owner)
        self._set = owner
        self._keys = list(owner._store)
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._keys)

    def _advance(self) -> E:
        element = self._set._store[self._keys[self._cursor]]
        self._cursor += 1
        return element

    def _remove_current(self) -> None:
        del self._set._store[self._keys[self._cursor - 1]]
        self._set._mod_count += 1


class HashSet(AbstractSet[E]):
    """A set keyed by the structural identity of its elements.

    Two elements are the same when their derived keys are equal. By default
    the key is the structural serialization from structural_key(), so
    ``{"a": 1}`` and another dict ``{"a": 1}`` are one element. Pass ``key``
    to supply a different identity, e.g. ``HashSet(key=id)``.

    Iteration follows insertion order.

    Args:
        options: Type validation options, see AbstractCollection.
        key: Function deriving the identity of an element.
    """

    def __init__(
        self, options: Any = None, key: KeyFunction | None = None, **kwargs: Any
    ) -> None:
        super().__init__(options, **kwargs)
        self._key: KeyFunction = key or structural_key
        self._store: dict[Hashable, E] = {}

    def size(self) -> int:
        return len(self._store)

    def contains(self, element: Any) -> bool:
        return self._key(element) in self._store

    def add(self, element: E) -> bool:
        derived = self._key(element)
        if derived in self._store:
            return False
        self._validate_element(element)
        self._store[derived] = element
        self._mod_count += 1
        return True

    def remove(self, element: Any) -> bool:
        derived = self._key(element)
        if derived not in self._store:
            return False
        del self._store[derived]
        self._mod_count += 1
        return True

    def clear(self) -> None:
        self._store.clear()
        self._mod_count += 1
        self._reset_type_inference()

    def iterator(self) -> _HashSetIterator[E]:
        return _HashSetIterator(self)

    def to_array(self) -> list[E]:
        return list(self._store.values())

    def remove_all(self, elements: Iterable[Any]) -> bool:
        modified = False
        for element in elements:
            derived = self._key(element)
            if derived in self._store:
                del self._store[derived]
                modified = True
        if modified:
            self._mod_count += 1
        return modified

    def retain_all(self, elements: Iterable[Any]) -> bool:
        keep = {self._key(element) for element in elements}
        doomed = [derived for derived in self._store if derived not in keep]
        for derived in doomed:
            del self._store[derived]
        if doomed:
            self._mod_count += 1
            logger.debug("retain_all dropped %d elements", len(doomed))
        return bool(doomed)
