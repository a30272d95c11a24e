"""Abstract contracts shared by the concrete containers."""

from typedcollections.abstracts._collection import AbstractCollection
from typedcollections.abstracts._list import AbstractList
from typedcollections.abstracts._map import AbstractMap, ValuesView
from typedcollections.abstracts._queue import AbstractQueue
from typedcollections.abstracts._set import AbstractSet
from typedcollections.abstracts._stack import AbstractStack

__all__ = [
    "AbstractCollection",
    "AbstractList",
    "AbstractMap",
    "AbstractQueue",
    "AbstractSet",
    "AbstractStack",
    "ValuesView",
]
