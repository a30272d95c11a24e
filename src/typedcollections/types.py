from collections.abc import Callable, Hashable
from typing import Annotated, Any, TypeAlias, TypeVar

E = TypeVar("E")
K = TypeVar("K")
V = TypeVar("V")

Comparator: TypeAlias = Annotated[
    Callable[[Any, Any], int],
    "Negative, zero or positive when the first argument sorts before, with or "
    "after the second.",
]

Predicate: TypeAlias = Annotated[
    Callable[[Any], bool],
    "Custom validator deciding whether a candidate is acceptable.",
]

KeyFunction: TypeAlias = Annotated[
    Callable[[Any], Hashable],
    "Derives the identity of an element or key in the hash containers.",
]
