"""Runtime type validation shared by every container mutator.

Candidates go through a fixed cascade: schema, then predicate, then strict
type inference, unless ``strict`` is turned off. Type inference keeps the
coarse tag of the first accepted candidate in a TypeState and requires every
later candidate to carry the same tag.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Final

import pydantic
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from ._definitions import TypeTag, ValidationMode
from ._logging import null_logger
from .exceptions import (
    PredicateValidationError,
    SchemaValidationError,
    TypeMismatchError,
)
from .schema import as_type_adapter, format_issues, issues_from_error
from .types import Predicate

logger: Final = null_logger(__name__)


def _to_adapter(value: Any) -> TypeAdapter | None:
    return None if value is None else as_type_adapter(value)


def _fields_of(options: BaseModel) -> dict[str, Any]:
    return {
        info.alias or name: getattr(options, name)
        for name, info in type(options).model_fields.items()
    }


class TypeValidationOptions(BaseModel):
    """Validation settings for a collection.

    ``strict`` defaults to True: without a schema or validator the first
    element fixes the type tag accepted by the collection.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    strict: bool = True
    element_schema: TypeAdapter | None = Field(default=None, alias="schema")
    validator: Callable[[Any], bool] | None = None

    @field_validator("element_schema", mode="before")
    @classmethod
    def _wrap_schema(cls, value: Any) -> TypeAdapter | None:
        return _to_adapter(value)

    @classmethod
    def resolve(
        cls, options: TypeValidationOptions | Mapping[str, Any] | None, **kwargs: Any
    ) -> TypeValidationOptions:
        """Build options from an instance, a mapping and/or keyword arguments."""
        if isinstance(options, cls) and not kwargs:
            return options
        if isinstance(options, cls):
            merged = {**_fields_of(options), **kwargs}
        else:
            merged = {**(options or {}), **kwargs}
        return cls.model_validate(merged)


class MapTypeValidationOptions(BaseModel):
    """Validation settings for a map, independent for keys and values."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
    )

    strict: bool = True
    key_schema: TypeAdapter | None = None
    value_schema: TypeAdapter | None = None
    key_validator: Callable[[Any], bool] | None = None
    value_validator: Callable[[Any], bool] | None = None

    @field_validator("key_schema", "value_schema", mode="before")
    @classmethod
    def _wrap_schema(cls, value: Any) -> TypeAdapter | None:
        return _to_adapter(value)

    @classmethod
    def resolve(
        cls,
        options: MapTypeValidationOptions | Mapping[str, Any] | None,
        **kwargs: Any,
    ) -> MapTypeValidationOptions:
        """Build options from an instance, a mapping and/or keyword arguments."""
        if isinstance(options, cls) and not kwargs:
            return options
        if isinstance(options, cls):
            merged = {**_fields_of(options), **kwargs}
        else:
            merged = {**(options or {}), **kwargs}
        return cls.model_validate(merged)


@dataclass(frozen=True)
class TypeState:
    """Either unset, or the tag inferred from the first accepted candidate."""

    tag: TypeTag | None = None

    UNSET: ClassVar[TypeState]

    @property
    def is_inferred(self) -> bool:
        return self.tag is not None

    @classmethod
    def inferred(cls, tag: TypeTag) -> TypeState:
        return cls(tag)


TypeState.UNSET = TypeState()


class ElementValidator:
    """Applies the validation cascade to one side (element, key or value).

    ``check`` is pure: it returns the TypeState that accepting the candidate
    would lead to, so callers validating several sides can commit only once
    all of them passed. ``validate`` checks and commits in one go.
    """

    def __init__(
        self,
        label: str,
        strict: bool = True,
        schema: TypeAdapter | None = None,
        predicate: Predicate | None = None,
    ) -> None:
        self.label = label
        self.strict = strict
        self.schema = schema
        self.predicate = predicate
        self._state = TypeState.UNSET

    @property
    def state(self) -> TypeState:
        return self._state

    @property
    def mode(self) -> ValidationMode:
        if not self.strict:
            return ValidationMode.NONE
        if self.schema is not None:
            return ValidationMode.SCHEMA
        if self.predicate is not None:
            return ValidationMode.PREDICATE
        return ValidationMode.INFERENCE

    def check(self, candidate: Any) -> TypeState:
        mode = self.mode
        if mode is ValidationMode.SCHEMA:
            self._check_schema(candidate)
        elif mode is ValidationMode.PREDICATE:
            if not self.predicate(candidate):
                raise PredicateValidationError(
                    f"{self.label} validation failed: {self.label.lower()} "
                    "does not match the expected type"
                )
        elif mode is ValidationMode.INFERENCE:
            return self._check_inferred(candidate)
        return self._state

    def commit(self, state: TypeState) -> None:
        if state != self._state:
            logger.debug("%s type inferred as %s", self.label, state.tag)
        self._state = state

    def validate(self, candidate: Any) -> None:
        self.commit(self.check(candidate))

    def reset(self) -> None:
        if self._state.is_inferred:
            logger.debug("%s type inference reset", self.label)
        self._state = TypeState.UNSET

    def _check_schema(self, candidate: Any) -> None:
        try:
            self.schema.validate_python(candidate, strict=True)
        except pydantic.ValidationError as err:
            issues = issues_from_error(err)
            raise SchemaValidationError(
                f"{self.label} validation failed: {format_issues(issues)}", issues
            ) from err

    def _check_inferred(self, candidate: Any) -> TypeState:
        actual = TypeTag.of(candidate)
        if not self._state.is_inferred:
            return TypeState.inferred(actual)
        if actual != self._state.tag:
            raise TypeMismatchError(
                f"{self.label} type mismatch: expected {self._state.tag}, "
                f"but got {actual}",
                expected=self._state.tag,
                actual=actual,
            )
        return self._state


def element_validator(options: TypeValidationOptions) -> ElementValidator:
    return ElementValidator(
        "Element",
        strict=options.strict,
        schema=options.element_schema,
        predicate=options.validator,
    )


def key_value_validators(
    options: MapTypeValidationOptions,
) -> tuple[ElementValidator, ElementValidator]:
    return (
        ElementValidator(
            "Key",
            strict=options.strict,
            schema=options.key_schema,
            predicate=options.key_validator,
        ),
        ElementValidator(
            "Value",
            strict=options.strict,
            schema=options.value_schema,
            predicate=options.value_validator,
        ),
    )
