import pytest

from typedcollections import UNDEFINED, ConcurrentModificationError, HashSet

from ..conftest import Person, Point


def test_add_refuses_duplicates():
    items = HashSet()
    assert items.add("a")
    assert items.add("b")
    assert not items.add("a")
    assert items.size() == 2
    assert items.to_array() == ["a", "b"]


def test_structurally_equal_elements_are_one_element():
    records = HashSet()
    assert records.add({"id": 1, "tags": ["x"]})
    assert not records.add({"tags": ["x"], "id": 1})
    assert records.contains({"id": 1, "tags": ["x"]})
    assert not records.contains({"id": 2, "tags": ["x"]})


def test_models_and_dataclasses_are_keyed_by_content(people):
    persons = HashSet()
    persons.add_all(people)
    assert persons.contains(Person(name="Ada", age=36))
    assert not persons.add(Person(name="Ada", age=36))

    points = HashSet()
    points.add(Point(1, 2))
    assert Point(1, 2) in points
    assert Point(2, 1) not in points


def test_int_and_float_are_distinct():
    numbers = HashSet()
    numbers.add(1)
    assert not numbers.contains(1.0)
    assert numbers.add(1.0)


def test_none_and_undefined_are_distinct_elements():
    values = HashSet(strict=False)
    assert values.add(None)
    assert values.add(UNDEFINED)
    assert values.add("null")
    assert not values.add(None)
    assert values.size() == 3


def test_key_function_overrides_identity():
    first, second = {"a": 1}, {"a": 1}
    by_identity = HashSet(key=id)
    assert by_identity.add(first)
    assert by_identity.add(second)
    assert by_identity.size() == 2

    case_insensitive = HashSet(key=str.lower)
    case_insensitive.add("Hello")
    assert not case_insensitive.add("HELLO")
    assert case_insensitive.contains("hello")


def test_remove_and_clear():
    items = HashSet()
    items.add_all([1, 2, 3])
    assert items.remove(2)
    assert not items.remove(2)
    assert items.to_array() == [1, 3]

    items.clear()
    assert items.is_empty()
    items.add("text")
    assert items.size() == 1


def test_remove_all_and_retain_all():
    items = HashSet()
    items.add_all([1, 2, 3, 4])
    assert items.remove_all([2, 5])
    assert not items.remove_all([5])
    assert items.to_array() == [1, 3, 4]

    assert items.retain_all([3, 4, 6])
    assert not items.retain_all([3, 4])
    assert items.to_array() == [3, 4]


def test_iterator_remove():
    items = HashSet()
    items.add_all([1, 2, 3, 4])
    iterator = items.iterator()
    while iterator.has_next():
        if iterator.next() % 2 == 0:
            iterator.remove()
    assert items.to_array() == [1, 3]


def test_iterator_is_fail_fast():
    items = HashSet()
    items.add_all([1, 2, 3])
    with pytest.raises(ConcurrentModificationError):
        for element in items:
            items.add(element + 10)


def test_equality_ignores_order():
    left, right = HashSet(), HashSet()
    left.add_all([1, 2, 3])
    right.add_all([3, 1, 2])
    assert left == right
    right.remove(3)
    assert left != right


def test_hash_code():
    letters = HashSet()
    letters.add_all(["a", "b"])
    assert letters.hash_code() == 97 + 98

    word = HashSet()
    word.add("ab")
    assert word.hash_code() == 97 * 31 + 98

    reordered = HashSet()
    reordered.add_all(["b", "a"])
    assert reordered.hash_code() == letters.hash_code()


def test_type_inference_applies_to_new_elements_only():
    items = HashSet()
    items.add("a")
    assert not items.add("a")
    with pytest.raises(TypeError):
        items.add(1)
