"""Default ordering used by the list sorts when no comparator is given."""

from __future__ import annotations

from typing import Any

from ._definitions import UNDEFINED


def _presence_rank(value: Any) -> int:
    # UNDEFINED < None < any defined value
    if value is UNDEFINED:
        return 0
    if value is None:
        return 1
    return 2


def _sign(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def natural_compare(a: Any, b: Any) -> int:
    """Compare two values the way the lists sort them by default.

    Numbers compare arithmetically and strings lexicographically, through
    their relational operators like any other value. Values that cannot be
    ordered against each other compare as equal, so a stable sort keeps
    their input order.
    """
    rank_a, rank_b = _presence_rank(a), _presence_rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1
    if rank_a < 2:
        return 0

    try:
        return _sign(a, b)
    except TypeError:
        return 0
