"""Various definitions and hard settings used in typedcollections."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class _Undefined:
    """Marker for an absent value, distinct from None."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self


UNDEFINED: Final = _Undefined()

NULL_KEY: Final = "\x00null"
UNDEFINED_KEY: Final = "\x00undefined"

DEFAULT_VECTOR_CAPACITY: Final = 10


class TypeTag(StrEnum):
    """Coarse type of a candidate, the granularity of type inference."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"
    UNDEFINED = "undefined"

    @classmethod
    def of(cls, value: object) -> TypeTag:
        if value is None:
            return cls.NULL
        if value is UNDEFINED:
            return cls.UNDEFINED
        # bool before number, bool is a subclass of int
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int | float):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list | tuple):
            return cls.ARRAY
        return cls.OBJECT


class ValidationMode(StrEnum):
    """The tier of the validation cascade that is active for a container."""

    SCHEMA = "schema"
    PREDICATE = "predicate"
    INFERENCE = "inference"
    NONE = "none"
