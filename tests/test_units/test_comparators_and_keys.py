import datetime
import enum

import pytest

from typedcollections import UNDEFINED, natural_compare, structural_key
from typedcollections._definitions import NULL_KEY, UNDEFINED_KEY

from ..conftest import Person, Point

# --------------------------------------------------------------------------------------
# natural_compare
# --------------------------------------------------------------------------------------


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, -1),
        (2, 1, 1),
        (2, 2.0, 0),
        ("b", "a", 1),
        ("a", "ab", -1),
        (UNDEFINED, None, -1),
        (None, UNDEFINED, 1),
        (None, 0, -1),
        (UNDEFINED, "", -1),
        (None, None, 0),
        (UNDEFINED, UNDEFINED, 0),
    ],
)
def test_natural_compare(a, b, expected):
    assert natural_compare(a, b) == expected


def test_incomparable_values_compare_equal():
    assert natural_compare(1, "a") == 0
    assert natural_compare({"a": 1}, {"b": 2}) == 0


def test_undefined_sentinel():
    assert repr(UNDEFINED) == "UNDEFINED"
    assert not UNDEFINED
    assert type(UNDEFINED)() is UNDEFINED


# --------------------------------------------------------------------------------------
# structural_key
# --------------------------------------------------------------------------------------


class Color(enum.Enum):
    RED = "red"


class Box:
    def __init__(self, content):
        self.content = content


def test_sentinel_keys():
    assert structural_key(None) == NULL_KEY
    assert structural_key(UNDEFINED) == UNDEFINED_KEY
    assert structural_key("null") != structural_key(None)


def test_dict_key_order_is_irrelevant():
    assert structural_key({"a": 1, "b": [1, 2]}) == structural_key({"b": [1, 2], "a": 1})


def test_primitive_keys():
    assert structural_key(1) == "1"
    assert structural_key(1.0) == "1.0"
    assert structural_key("a") == '"a"'
    assert structural_key(True) == "true"


def test_tuples_and_lists_collide():
    assert structural_key((1, 2)) == structural_key([1, 2])


def test_converted_values():
    assert structural_key(Point(1, 2)) == '{"x":1,"y":2}'
    assert structural_key(Person(name="Ada", age=36)) == '{"age":36,"name":"Ada"}'
    assert structural_key(Color.RED) == '"red"'
    assert structural_key(datetime.date(2024, 1, 31)) == '"2024-01-31"'
    assert structural_key({3, 1, 2}) == structural_key(frozenset({2, 3, 1}))
    assert structural_key(Box(1)) == structural_key(Box(1))
    assert structural_key(Box(1)) != structural_key(Box(2))


def test_fallback_for_cyclic_values(capture_debug):
    cyclic = []
    cyclic.append(cyclic)
    key = structural_key(cyclic)
    assert key.startswith("list:")
    assert "Structural key unavailable for list" in capture_debug.text


def test_fallback_for_unserializable_values():
    assert structural_key(object).startswith("type:")
    assert structural_key({1: "a", "b": 2}).startswith("dict:")
