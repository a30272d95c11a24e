from ._array_list import ArrayList
from ._linked_list import LinkedList
from ._vector import Vector

__all__ = [
    "ArrayList",
    "LinkedList",
    "Vector",
]
