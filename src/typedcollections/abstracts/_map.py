from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, NoReturn

from typedcollections._definitions import ValidationMode
from typedcollections._iterators import Iterator, SnapshotIterator
from typedcollections._validation import (
    ElementValidator,
    MapTypeValidationOptions,
    key_value_validators,
)
from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.exceptions import UnsupportedOperationError
from typedcollections.types import K, V


class AbstractMap(ABC, Generic[K, V]):
    """Base class for key to value mappings.

    Keys and values are validated independently, each with its own schema,
    validator function and inferred type tag::

        prices = HashMap(key_schema=str, value_schema=Annotated[float, Field(gt=0)])

    Subclasses implement size(), contains_key(), contains_value(), get(),
    put(), remove(), clear(), key_iterator(), value_iterator(), keys() and
    entries(). put_all() and the read-only values() view are provided here.

    Args:
        options: A MapTypeValidationOptions instance or a mapping of its fields.
        **kwargs: Option fields (strict, key_schema, value_schema,
            key_validator, value_validator), taking precedence over ``options``.
    """

    def __init__(
        self,
        options: MapTypeValidationOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._options = MapTypeValidationOptions.resolve(options, **kwargs)
        validators = key_value_validators(self._options)
        self._key_validator: ElementValidator = validators[0]
        self._value_validator: ElementValidator = validators[1]
        self._mod_count = 0

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def contains_key(self, key: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def contains_value(self, value: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: Any) -> V | None:
        """Return the value mapped to ``key``, or None if there is none."""
        raise NotImplementedError

    @abstractmethod
    def put(self, key: K, value: V) -> V | None:
        """Map ``key`` to ``value``, returning the previous value or None."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: Any) -> V | None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def key_iterator(self) -> Iterator[K]:
        raise NotImplementedError

    @abstractmethod
    def value_iterator(self) -> Iterator[V]:
        raise NotImplementedError

    @abstractmethod
    def keys(self) -> list[K]:
        raise NotImplementedError

    @abstractmethod
    def entries(self) -> list[tuple[K, V]]:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    def values(self) -> ValuesView[V]:
        """Return a live, read-only collection view of the values."""
        return ValuesView(self)

    def put_all(
        self, other: AbstractMap[K, V] | Mapping[K, V] | Iterable[tuple[K, V]]
    ) -> None:
        """Copy all mappings of ``other`` into this map."""
        if isinstance(other, AbstractMap):
            pairs = other.entries()
        elif isinstance(other, Mapping):
            pairs = list(other.items())
        else:
            pairs = list(other)
        for key, value in pairs:
            self.put(key, value)

    # ==================================================================================
    # Type validation
    # ==================================================================================

    @property
    def options(self) -> MapTypeValidationOptions:
        return self._options

    @property
    def key_validation_mode(self) -> ValidationMode:
        return self._key_validator.mode

    @property
    def value_validation_mode(self) -> ValidationMode:
        return self._value_validator.mode

    def has_key_validation(self) -> bool:
        return self._key_validator.mode in (
            ValidationMode.SCHEMA,
            ValidationMode.PREDICATE,
        )

    def has_value_validation(self) -> bool:
        return self._value_validator.mode in (
            ValidationMode.SCHEMA,
            ValidationMode.PREDICATE,
        )

    def _validate_entry(self, key: Any, value: Any) -> None:
        """Validate both sides before committing either inferred type."""
        key_state = self._key_validator.check(key)
        value_state = self._value_validator.check(value)
        self._key_validator.commit(key_state)
        self._value_validator.commit(value_state)

    def _reset_type_inference(self) -> None:
        self._key_validator.reset()
        self._value_validator.reset()

    # ==================================================================================
    # Python protocols
    # ==================================================================================

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return self.key_iterator()

    def __getitem__(self, key: Any) -> V:
        if not self.contains_key(key):
            raise KeyError(key)
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.entries())
        return f"{type(self).__name__}({{{body}}})"


class ValuesView(AbstractCollection[V]):
    """Read-only collection of a map's values, reflecting later map changes."""

    def __init__(self, backing: AbstractMap[Any, V]) -> None:
        super().__init__(strict=False)
        self._map = backing

    def size(self) -> int:
        return self._map.size()

    def contains(self, element: Any) -> bool:
        return self._map.contains_value(element)

    def iterator(self) -> Iterator[V]:
        return SnapshotIterator(self.to_array())

    def to_array(self) -> list[V]:
        return [value for _, value in self._map.entries()]

    def add(self, element: V) -> NoReturn:
        self._unsupported("add")

    def remove(self, element: Any) -> NoReturn:
        self._unsupported("remove")

    def clear(self) -> NoReturn:
        self._unsupported("clear")

    def add_all(self, elements: Iterable[V]) -> NoReturn:
        self._unsupported("add_all")

    def remove_all(self, elements: Iterable[Any]) -> NoReturn:
        self._unsupported("remove_all")

    def retain_all(self, elements: Iterable[Any]) -> NoReturn:
        self._unsupported("retain_all")

    @staticmethod
    def _unsupported(operation: str) -> NoReturn:
        raise UnsupportedOperationError(
            f"Unsupported operation: {operation}() on a read-only values view"
        )
