"""Derived keys for the hash containers.

Elements (HashSet) and keys (HashMap) are bucketed by a derived key instead of
their own ``__hash__``/``__eq__``. The default derivation serializes the value
structurally, so two distinct objects with the same serializable shape map to
the same key. Containers accept a ``key`` function to replace it.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import json
from collections.abc import Hashable
from typing import Any, Final

from pydantic import BaseModel

from ._definitions import NULL_KEY, UNDEFINED, UNDEFINED_KEY
from ._logging import null_logger

logger: Final = null_logger(__name__)


def _to_serializable(obj: Any) -> Any:
    """Fallback for json.dumps on values it does not know natively."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, set | frozenset):
        return sorted(structural_key(item) for item in obj)
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, datetime.date | datetime.time):
        return obj.isoformat()
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not serializable")


def structural_key(value: Any) -> Hashable:
    """Return the derived key of a value.

    None and UNDEFINED get fixed sentinel keys. Anything json can serialize
    (with the converter above) is keyed by its compact, key-sorted json text.
    Values that cannot be serialized, such as cyclic structures, fall back to
    their type name and ``str()``.
    """
    if value is None:
        return NULL_KEY
    if value is UNDEFINED:
        return UNDEFINED_KEY
    try:
        return json.dumps(
            value,
            default=_to_serializable,
            sort_keys=True,
            separators=(",", ":"),
        )
    except (TypeError, ValueError, RecursionError) as err:
        logger.debug(
            "Structural key unavailable for %s (%s), using str()",
            type(value).__name__,
            err,
        )
        return f"{type(value).__qualname__}:{value}"
