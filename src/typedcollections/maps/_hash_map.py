from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Generic

from typedcollections._hashing import structural_key
from typedcollections._iterators import FailFastIterator
from typedcollections.abstracts import AbstractMap
from typedcollections.types import K, V

if TYPE_CHECKING:
    from typedcollections.types import KeyFunction


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


class _HashMapIterator(FailFastIterator[Any]):
    """Walks a snapshot of the derived keys, yielding keys or values."""

    def __init__(self, owner: HashMap[Any, Any], values: bool) -> None:
        super().__init__(owner)
        self._map = owner
        self._values = values
        self._derived = list(owner._store)
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self._derived)

    def _advance(self) -> Any:
        entry = self._map._store[self._derived[self._cursor]]
        self._cursor += 1
        return entry.value if self._values else entry.key

    def _remove_current(self) -> None:
        del self._map._store[self._derived[self._cursor - 1]]
        self._map._mod_count += 1


class HashMap(AbstractMap[K, V]):
    """A map keyed by the structural identity of its keys.

    Every entry is stored once, as a (key, value) record under the derived
    key of its key, so structurally equal keys address the same entry and
    keys() returns the keys as they were first put. Iteration follows
    insertion order.

    Example::

        scores = HashMap(key_schema=str)
        scores.put("alice", 3)
        scores.put("alice", 5)  # returns 3
        scores.get("bob")  # None

    Args:
        options: Map validation options, see AbstractMap.
        key: Function deriving the identity of a key.
    """

    def __init__(
        self, options: Any = None, key: KeyFunction | None = None, **kwargs: Any
    ) -> None:
        super().__init__(options, **kwargs)
        self._key: KeyFunction = key or structural_key
        self._store: dict[Hashable, _Entry[K, V]] = {}

    def size(self) -> int:
        return len(self._store)

    def contains_key(self, key: Any) -> bool:
        return self._key(key) in self._store

    def contains_value(self, value: Any) -> bool:
        return any(entry.value == value for entry in self._store.values())

    def get(self, key: Any) -> V | None:
        entry = self._store.get(self._key(key))
        return None if entry is None else entry.value

    def put(self, key: K, value: V) -> V | None:
        self._validate_entry(key, value)
        derived = self._key(key)
        entry = self._store.get(derived)
        if entry is not None:
            old = entry.value
            entry.value = value
            return old
        self._store[derived] = _Entry(key, value)
        self._mod_count += 1
        return None

    def remove(self, key: Any) -> V | None:
        entry = self._store.pop(self._key(key), None)
        if entry is None:
            return None
        self._mod_count += 1
        return entry.value

    def clear(self) -> None:
        self._store.clear()
        self._mod_count += 1
        self._reset_type_inference()

    def key_iterator(self) -> _HashMapIterator:
        return _HashMapIterator(self, values=False)

    def value_iterator(self) -> _HashMapIterator:
        return _HashMapIterator(self, values=True)

    def keys(self) -> list[K]:
        return [entry.key for entry in self._store.values()]

    def entries(self) -> list[tuple[K, V]]:
        return [(entry.key, entry.value) for entry in self._store.values()]
