"""Test the validation cascade: schema, predicate, inference, none."""

from typing import Annotated

import pydantic
import pytest
from pydantic import Field, TypeAdapter

from typedcollections import (
    UNDEFINED,
    ArrayList,
    PredicateValidationError,
    SchemaValidationError,
    TypeMismatchError,
    TypeState,
    TypeTag,
    TypeValidationOptions,
    ValidationError,
    ValidationMode,
)

from ..conftest import Person

# --------------------------------------------------------------------------------------
# Strict type inference
# --------------------------------------------------------------------------------------


def test_first_element_fixes_the_type(collection_type):
    items = collection_type()
    assert items.validation_mode is ValidationMode.INFERENCE
    items.add(1)
    items.add(2.5)
    with pytest.raises(
        TypeMismatchError, match="Element type mismatch: expected number, but got string"
    ) as excinfo:
        items.add("text")
    assert excinfo.value.expected is TypeTag.NUMBER
    assert excinfo.value.actual is TypeTag.STRING
    assert items.size() == 2


def test_clear_resets_inference(collection_type):
    items = collection_type()
    items.add("text")
    items.clear()
    items.add(1)
    assert items.to_array() == [1]


@pytest.mark.parametrize(
    "value, tag",
    [
        (1, TypeTag.NUMBER),
        (1.5, TypeTag.NUMBER),
        (True, TypeTag.BOOLEAN),
        ("a", TypeTag.STRING),
        ([1], TypeTag.ARRAY),
        ((1,), TypeTag.ARRAY),
        ({"a": 1}, TypeTag.OBJECT),
        (Person(name="Ada", age=36), TypeTag.OBJECT),
        (None, TypeTag.NULL),
        (UNDEFINED, TypeTag.UNDEFINED),
    ],
)
def test_type_tags(value, tag):
    assert TypeTag.of(value) is tag


def test_booleans_are_not_numbers():
    items = ArrayList()
    items.add(1)
    with pytest.raises(TypeMismatchError, match="expected number, but got boolean"):
        items.add(False)


def test_null_is_its_own_type():
    items = ArrayList()
    items.add(None)
    items.add(None)
    with pytest.raises(TypeMismatchError, match="expected null, but got number"):
        items.add(0)


def test_type_state():
    assert not TypeState.UNSET.is_inferred
    state = TypeState.inferred(TypeTag.STRING)
    assert state.is_inferred
    assert state.tag is TypeTag.STRING
    assert state != TypeState.UNSET


def test_inference_debug_records(capture_debug):
    items = ArrayList()
    items.add(1)
    items.clear()
    assert "Element type inferred as number" in capture_debug.text
    assert "Element type inference reset" in capture_debug.text


# --------------------------------------------------------------------------------------
# Schema validation
# --------------------------------------------------------------------------------------


def test_schema_accepts_mixed_types_it_allows():
    items = ArrayList(schema=int | str)
    assert items.validation_mode is ValidationMode.SCHEMA
    assert items.has_schema_validation()
    items.add(1)
    items.add("a")
    assert items.to_array() == [1, "a"]


def test_schema_is_strict():
    items = ArrayList(schema=int)
    with pytest.raises(SchemaValidationError):
        items.add("1")
    with pytest.raises(SchemaValidationError):
        items.add(1.0)


def test_schema_issue_paths():
    items = ArrayList(schema=list[int])
    with pytest.raises(SchemaValidationError) as excinfo:
        items.add([1, "x"])
    issues = excinfo.value.issues
    assert [issue.path for issue in issues] == ["1"]
    assert issues[0].code == "int_type"
    assert str(excinfo.value).startswith("Element validation failed: 1: ")


def test_schema_constraints():
    positive = ArrayList(schema=Annotated[int, Field(gt=0)])
    positive.add(1)
    with pytest.raises(SchemaValidationError) as excinfo:
        positive.add(-1)
    assert excinfo.value.issues[0].path == ""
    assert excinfo.value.issues[0].code == "greater_than"
    assert str(excinfo.value).startswith("Element validation failed: root: ")
    assert isinstance(excinfo.value.__cause__, pydantic.ValidationError)


def test_model_schema(people):
    persons = ArrayList(schema=Person)
    persons.add_all(people)
    with pytest.raises(SchemaValidationError):
        persons.add("Ada")
    assert persons.size() == 3


def test_type_adapter_schema():
    adapter = TypeAdapter(str)
    items = ArrayList(schema=adapter)
    assert items.options.element_schema is adapter
    items.add("a")


def test_schema_beats_predicate():
    items = ArrayList(schema=int, validator=lambda _: False)
    assert items.validation_mode is ValidationMode.SCHEMA
    items.add(1)
    assert items.size() == 1


# --------------------------------------------------------------------------------------
# Predicate validation
# --------------------------------------------------------------------------------------


def test_predicate_validation(collection_type):
    items = collection_type(validator=lambda value: isinstance(value, str) and value)
    assert items.validation_mode is ValidationMode.PREDICATE
    items.add("a")
    with pytest.raises(
        PredicateValidationError,
        match="Element validation failed: element does not match the expected type",
    ):
        items.add("")
    assert items.size() == 1


def test_predicate_does_not_infer():
    items = ArrayList(validator=lambda value: value is not None)
    items.add(1)
    items.add("a")
    assert items.size() == 2


# --------------------------------------------------------------------------------------
# Non strict collections and options
# --------------------------------------------------------------------------------------


def test_non_strict_skips_every_check():
    items = ArrayList(strict=False, schema=int, validator=lambda _: False)
    assert items.validation_mode is ValidationMode.NONE
    items.add_all(["a", 1, None, [2]])
    assert items.size() == 4


def test_validation_errors_are_type_and_value_errors():
    items = ArrayList()
    items.add(1)
    with pytest.raises(ValidationError):
        items.add("a")
    with pytest.raises(TypeError):
        items.add("a")
    with pytest.raises(ValueError):
        items.add("a")


def test_options_instance_is_reused():
    options = TypeValidationOptions(strict=False)
    items = ArrayList(options)
    assert items.options is options


def test_options_from_mapping_and_keywords():
    items = ArrayList({"strict": False}, strict=True)
    assert items.validation_mode is ValidationMode.INFERENCE
    items = ArrayList(TypeValidationOptions(schema=int), strict=False)
    assert items.validation_mode is ValidationMode.NONE
    assert items.options.element_schema is not None


def test_unknown_option_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        ArrayList(bogus=True)


def test_options_are_frozen():
    options = TypeValidationOptions()
    with pytest.raises(pydantic.ValidationError):
        options.strict = False


def test_schema_is_reported_even_when_not_strict():
    items = ArrayList(strict=False, schema=int)
    assert items.has_schema_validation()
    assert items.validation_mode is ValidationMode.NONE
    assert not ArrayList(strict=False).has_schema_validation()
