"""Top-level package for typedcollections"""

from importlib.metadata import PackageNotFoundError, version

from typedcollections._comparators import natural_compare
from typedcollections._definitions import UNDEFINED, TypeTag, ValidationMode
from typedcollections._hashing import structural_key
from typedcollections._iterators import Iterator, MutableIterator
from typedcollections._validation import (
    MapTypeValidationOptions,
    TypeState,
    TypeValidationOptions,
)
from typedcollections.abstracts import (
    AbstractCollection,
    AbstractList,
    AbstractMap,
    AbstractQueue,
    AbstractSet,
    AbstractStack,
    ValuesView,
)
from typedcollections.exceptions import (
    ConcurrentModificationError,
    EmptyContainerError,
    IllegalStateError,
    IndexOutOfBoundsError,
    NoSuchElementError,
    PredicateValidationError,
    SchemaValidationError,
    TypeMismatchError,
    UnsupportedOperationError,
    ValidationError,
)
from typedcollections.lists import ArrayList, LinkedList, Vector
from typedcollections.maps import HashMap
from typedcollections.queues import LinkedQueue
from typedcollections.schema import (
    ValidationIssue,
    ValidationResult,
    create_transforming_validator,
    create_union_validator,
    create_validator,
    format_validation_error,
    get_schema_description,
    validate_safe,
)
from typedcollections.sets import HashSet
from typedcollections.stacks import LinkedStack

try:
    __version__ = version("typedcollections")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AbstractCollection",
    "AbstractList",
    "AbstractMap",
    "AbstractQueue",
    "AbstractSet",
    "AbstractStack",
    "ArrayList",
    "ConcurrentModificationError",
    "EmptyContainerError",
    "HashMap",
    "HashSet",
    "IllegalStateError",
    "IndexOutOfBoundsError",
    "Iterator",
    "LinkedList",
    "LinkedQueue",
    "LinkedStack",
    "MapTypeValidationOptions",
    "MutableIterator",
    "NoSuchElementError",
    "PredicateValidationError",
    "SchemaValidationError",
    "TypeMismatchError",
    "TypeState",
    "TypeTag",
    "TypeValidationOptions",
    "UNDEFINED",
    "UnsupportedOperationError",
    "ValidationError",
    "ValidationIssue",
    "ValidationMode",
    "ValidationResult",
    "ValuesView",
    "Vector",
    "create_transforming_validator",
    "create_union_validator",
    "create_validator",
    "format_validation_error",
    "get_schema_description",
    "natural_compare",
    "structural_key",
    "validate_safe",
]
