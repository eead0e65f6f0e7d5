"""JSON-safe payloads for every engine output.

Converts the frozen dataclasses (RecoveryScore, OptimizationReport,
NutritionTargets, AdaptedWorkout, ...) into plain dicts a UI can render or
transmit. Enums become their values (IntEnums their lower-case names),
dates and times become ISO-8601 strings and non-finite floats become None.

All functions are pure (no I/O).
"""

from __future__ import annotations

import dataclasses
import json
import math
from datetime import date, datetime, time
from enum import Enum, IntEnum
from typing import Any


def to_payload(obj: Any) -> Any:
    """Recursively convert an engine value to JSON-compatible primitives."""
    if isinstance(obj, IntEnum):
        return obj.name.lower()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, bool) or obj is None or isinstance(obj, (int, str)):
        return obj
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    # datetime is a date subclass, so it must be tested first
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_payload(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {_key(k): to_payload(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_payload(item) for item in obj]
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def to_json_string(obj: Any, indent: int = 2) -> str:
    """Convert an engine value to a JSON string."""
    return json.dumps(to_payload(obj), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _key(key: Any) -> str:
    converted = to_payload(key)
    return converted if isinstance(converted, str) else str(converted)
