"""Helpers for validating candidates against pydantic schemas.

A schema can be given as a ``pydantic.TypeAdapter``, a ``BaseModel`` subclass
or any type annotation pydantic understands (``int``, ``list[str]``,
``Annotated[int, Field(gt=0)]``, ...). Everything that is not already a
TypeAdapter is wrapped in one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

import pydantic
from pydantic import TypeAdapter

from .exceptions import SchemaValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationIssue:
    """One problem reported by a schema, with a dotted path to its location."""

    path: str
    message: str
    code: str


@dataclass(frozen=True)
class ValidationFailure:
    """Structured description of a failed schema validation."""

    message: str
    issues: list[ValidationIssue] = field(default_factory=list)
    raw_error: Exception | None = None


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validate_safe; ``data`` is set on success, ``error`` otherwise."""

    success: bool
    data: T | None = None
    error: ValidationFailure | None = None


def as_type_adapter(schema: Any) -> TypeAdapter:
    """Return the schema as a TypeAdapter, wrapping it when needed."""
    if isinstance(schema, TypeAdapter):
        return schema
    return TypeAdapter(schema)


def issues_from_error(err: pydantic.ValidationError) -> list[ValidationIssue]:
    """Flatten the pydantic error list into ValidationIssue records."""
    return [
        ValidationIssue(
            path=".".join(str(part) for part in issue["loc"]),
            message=issue["msg"],
            code=issue["type"],
        )
        for issue in err.errors()
    ]


def format_issues(issues: Sequence[ValidationIssue]) -> str:
    """Join issues as ``path: message``; top level issues use ``root``."""
    return "; ".join(f"{issue.path or 'root'}: {issue.message}" for issue in issues)


def validate_safe(schema: Any, data: Any, strict: bool = True) -> ValidationResult:
    """Validate ``data`` without raising, returning a ValidationResult."""
    adapter = as_type_adapter(schema)
    try:
        validated = adapter.validate_python(data, strict=strict)
    except pydantic.ValidationError as err:
        return ValidationResult(
            success=False,
            error=ValidationFailure(
                message=str(err),
                issues=issues_from_error(err),
                raw_error=err,
            ),
        )
    return ValidationResult(success=True, data=validated)


def format_validation_error(error: ValidationFailure) -> str:
    """Format a ValidationFailure as a single readable line."""
    if not error.issues:
        return error.message
    return f"Validation failed: {format_issues(error.issues)}"


def create_validator(schema: Any, strict: bool = True) -> Callable[[Any], Any]:
    """Create a function that returns the validated value or raises.

    The raised SchemaValidationError carries the individual issues.
    """
    adapter = as_type_adapter(schema)

    def _validate(value: Any) -> Any:
        try:
            return adapter.validate_python(value, strict=strict)
        except pydantic.ValidationError as err:
            issues = issues_from_error(err)
            raise SchemaValidationError(
                f"Validation failed: {format_issues(issues)}", issues
            ) from err

    return _validate


def create_union_validator(
    schemas: Sequence[Any], strict: bool = True
) -> Callable[[Any], Any]:
    """Create a validator accepting a value that matches any of the schemas."""
    if not schemas:
        raise ValueError("At least one schema is required for a union validator")
    union = Union[tuple(schemas)]  # noqa: UP007
    return create_validator(union, strict=strict)


def create_transforming_validator(
    schema: Any,
    transform: Callable[[Any], Any] | None = None,
    strict: bool = True,
) -> Callable[[Any], Any]:
    """Create a validator that also applies ``transform`` to the validated value."""
    validate = create_validator(schema, strict=strict)

    def _validate_and_transform(value: Any) -> Any:
        validated = validate(value)
        return transform(validated) if transform is not None else validated

    return _validate_and_transform


def get_schema_description(schema: Any) -> str:
    """Return a short description of a schema, for debugging."""
    if isinstance(schema, type) and issubclass(schema, pydantic.BaseModel):
        fields = ", ".join(
            f"{name}: {_annotation_name(info.annotation)}"
            for name, info in schema.model_fields.items()
        )
        return f"object {{ {fields} }}" if fields else "object { }"

    adapter = as_type_adapter(schema)
    core_schema = adapter.core_schema
    return str(core_schema.get("type", "unknown"))


def _annotation_name(annotation: Any) -> str:
    if annotation is None:
        return "unknown"
    return getattr(annotation, "__name__", None) or str(annotation)
