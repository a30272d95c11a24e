"""The conftest.py, providing magical fixtures to tests."""

import logging
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from typedcollections import (
    ArrayList,
    HashMap,
    HashSet,
    LinkedList,
    LinkedQueue,
    LinkedStack,
    Vector,
)

logger = logging.getLogger(__name__)

LIST_TYPES = [ArrayList, LinkedList, Vector]
COLLECTION_TYPES = [ArrayList, LinkedList, Vector, HashSet, LinkedQueue, LinkedStack]


class Person(BaseModel):
    name: str
    age: int


@dataclass
class Point:
    x: int
    y: int


@pytest.fixture(name="list_type", params=LIST_TYPES, ids=lambda cls: cls.__name__)
def fixture_list_type(request):
    """Each of the list implementations, to run a contract suite against."""
    return request.param


@pytest.fixture(
    name="collection_type", params=COLLECTION_TYPES, ids=lambda cls: cls.__name__
)
def fixture_collection_type(request):
    """Each of the collection implementations."""
    return request.param


@pytest.fixture(name="numbers")
def fixture_numbers(list_type):
    """A list of five numbers, of the current list implementation."""
    numbers = list_type()
    numbers.add_all([5, 3, 8, 1, 9])
    return numbers


@pytest.fixture(name="people")
def fixture_people():
    return [
        Person(name="Ada", age=36),
        Person(name="Alan", age=41),
        Person(name="Grace", age=85),
    ]


@pytest.fixture(name="scores")
def fixture_scores():
    scores = HashMap()
    scores.put("alice", 3)
    scores.put("bob", 5)
    scores.put("carol", 8)
    return scores


@pytest.fixture(name="capture_debug")
def fixture_capture_debug(caplog):
    """Collect debug records from the typedcollections loggers."""
    caplog.set_level(logging.DEBUG, logger="typedcollections")
    return caplog
