from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from collections.abc import Container, Iterable, Mapping
from typing import Any, Generic

from typedcollections._definitions import ValidationMode
from typedcollections._iterators import Iterator, MutableIterator
from typedcollections._validation import (
    ElementValidator,
    TypeValidationOptions,
    element_validator,
)
from typedcollections.types import E


class AbstractCollection(ABC, Generic[E]):
    """Base class for all collections.

    Concrete collections implement the minimal surface: size(), contains(),
    iterator(), to_array(), add(), remove() and clear(). The aggregate
    operations contains_all(), add_all(), remove_all() and retain_all() are
    built only on top of that surface.

    Every mutator that stores a new element passes it to _validate_element()
    first. By default the first element fixes the type tag of the collection;
    a pydantic schema or a validator function can be given instead, and
    ``strict=False`` turns validation off::

        numbers = ArrayList()
        numbers.add(1)
        numbers.add("text")  # TypeMismatchError

        positive = ArrayList(schema=Annotated[int, Field(gt=0)])
        positive.add(-1)  # SchemaValidationError

    Args:
        options: A TypeValidationOptions instance or a mapping of its fields.
        **kwargs: Option fields (strict, schema, validator), taking precedence
            over ``options``.
    """

    def __init__(
        self,
        options: TypeValidationOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._options = TypeValidationOptions.resolve(options, **kwargs)
        self._validator: ElementValidator = element_validator(self._options)
        self._mod_count = 0

    # ==================================================================================
    # Minimal surface
    # ==================================================================================

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def contains(self, element: Any) -> bool:
        raise NotImplementedError

    @abstractmethod
    def iterator(self) -> Iterator[E]:
        raise NotImplementedError

    @abstractmethod
    def to_array(self) -> list[E]:
        """Return a new list with the elements in iteration order."""
        raise NotImplementedError

    @abstractmethod
    def add(self, element: E) -> bool:
        """Add the element, returning True if the collection changed."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, element: Any) -> bool:
        """Remove one instance of the element, returning True if found."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove all elements and reset type inference."""
        raise NotImplementedError

    # ==================================================================================
    # Aggregate operations
    # ==================================================================================

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_all(self, elements: Iterable[Any]) -> bool:
        """Return True if every element of ``elements`` is in this collection."""
        return all(self.contains(element) for element in elements)

    def add_all(self, elements: Iterable[E]) -> bool:
        """Add every element of ``elements``; True if any add changed this."""
        modified = False
        for element in elements:
            if self.add(element):
                modified = True
        return modified

    def remove_all(self, elements: Iterable[Any]) -> bool:
        """Remove the elements that are also contained in ``elements``."""
        return self._remove_where(elements, keep_matches=False)

    def retain_all(self, elements: Iterable[Any]) -> bool:
        """Remove the elements that are not contained in ``elements``."""
        return self._remove_where(elements, keep_matches=True)

    def _remove_where(self, elements: Iterable[Any], keep_matches: bool) -> bool:
        iterator = self.iterator()
        if not isinstance(iterator, MutableIterator):
            warnings.warn(
                f"{type(self).__name__} iterator does not support removal, "
                "the collection is left unchanged",
                UserWarning,
            )
            return False

        if not isinstance(elements, Container):
            elements = list(elements)

        modified = False
        while iterator.has_next():
            if (iterator.next() in elements) != keep_matches:
                iterator.remove()
                modified = True
        return modified

    # ==================================================================================
    # Type validation
    # ==================================================================================

    @property
    def options(self) -> TypeValidationOptions:
        return self._options

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validator.mode

    def has_schema_validation(self) -> bool:
        """Return True if a schema is configured, even when ``strict`` is off."""
        return self._options.element_schema is not None

    def _validate_element(self, element: Any) -> None:
        self._validator.validate(element)

    def _reset_type_inference(self) -> None:
        self._validator.reset()

    # ==================================================================================
    # Python protocols
    # ==================================================================================

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
