"""Pure functions mapping raw wearable payload dicts to BiometricSample.

No I/O. Payloads look like::

    {
        "timestamp": "2026-03-02T07:15:00",
        "heartRate": {"resting": 58, "current": 72},
        "heartRateVariability": {"current": 45.2},
        "activity": {"steps": 8420},
    }

Any key may be missing or malformed; the matching field is then None.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from recovery_engine.models.records import BiometricSample


def map_device_payload(
    raw: dict[str, Any] | None, received_at: datetime | None = None
) -> BiometricSample | None:
    """Map one device payload to a BiometricSample.

    Args:
        raw: The payload as delivered by the device sync.
        received_at: Fallback timestamp when the payload carries none.

    Returns:
        A sample, or None when the payload is empty, carries no metric at
        all, or has no usable timestamp.
    """
    if not raw or not isinstance(raw, dict):
        return None

    taken_at = _extract_timestamp(raw.get("timestamp")) or received_at
    if taken_at is None:
        return None

    hrv = _extract_number(raw.get("heartRateVariability"), "current")
    resting_hr = _extract_number(raw.get("heartRate"), "resting")
    steps = _extract_number(raw.get("activity"), "steps")

    if hrv is None and resting_hr is None and steps is None:
        return None

    return BiometricSample(
        taken_at=taken_at,
        hrv_ms=hrv,
        resting_hr=int(resting_hr) if resting_hr is not None else None,
        steps=int(steps) if steps is not None else None,
    )


# ---------------------------------------------------------------------------
# Extractors: malformed or missing input yields None
# ---------------------------------------------------------------------------


def _extract_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        # fromisoformat rejects a trailing "Z" before Python 3.11
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _extract_number(section: Any, key: str) -> Optional[float]:
    """Read a non-negative number from a nested section."""
    if not isinstance(section, dict):
        return None
    value = section.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if number != number or number < 0:  # NaN or negative
        return None
    return number
