from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._definitions import TypeTag
    from .schema import ValidationIssue


class IndexOutOfBoundsError(IndexError):
    """Raised when an index is outside the valid range of a container."""


class EmptyContainerError(LookupError):
    """Raised when reading the front or back of an empty container."""


class NoSuchElementError(LookupError):
    """Raised when calling next() on an exhausted iterator."""


class UnsupportedOperationError(TypeError):
    """Raised when mutating a read-only view."""


class IllegalStateError(RuntimeError):
    """Raised when an iterator is asked to remove without a current element."""


class ConcurrentModificationError(RuntimeError):
    """Raised when a container changed underneath a live iterator."""


class ValidationError(TypeError, ValueError):
    """Raise error while validating a candidate element, key or value."""


class SchemaValidationError(ValidationError):
    """The candidate did not satisfy the configured schema."""

    def __init__(self, message: str, issues: list[ValidationIssue]) -> None:
        super().__init__(message)
        self.issues = issues


class PredicateValidationError(ValidationError):
    """The configured validator function rejected the candidate."""


class TypeMismatchError(ValidationError):
    """The candidate's type tag differs from the inferred one."""

    def __init__(self, message: str, expected: TypeTag, actual: TypeTag) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
