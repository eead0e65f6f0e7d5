"""Tests for map_device_payload — raw wearable dict to BiometricSample."""

from __future__ import annotations

from datetime import datetime, timezone

from recovery_engine.collaborators.biometrics import map_device_payload

RECEIVED = datetime(2026, 3, 2, 8, 0)


class TestMapDevicePayload:
    def test_full_payload(self) -> None:
        sample = map_device_payload(
            {
                "timestamp": "2026-03-02T07:15:00",
                "heartRate": {"resting": 58, "current": 72},
                "heartRateVariability": {"current": 45.2},
                "activity": {"steps": 8420},
            }
        )
        assert sample is not None
        assert sample.taken_at == datetime(2026, 3, 2, 7, 15)
        assert sample.hrv_ms == 45.2
        assert sample.resting_hr == 58
        assert sample.steps == 8420

    def test_utc_suffix(self) -> None:
        sample = map_device_payload(
            {"timestamp": "2026-03-02T07:15:00Z", "heartRateVariability": {"current": 40}}
        )
        assert sample is not None
        assert sample.taken_at.tzinfo == timezone.utc

    def test_empty_payload(self) -> None:
        assert map_device_payload({}) is None
        assert map_device_payload(None) is None

    def test_missing_timestamp_uses_received_at(self) -> None:
        sample = map_device_payload({"activity": {"steps": 100}}, received_at=RECEIVED)
        assert sample is not None
        assert sample.taken_at == RECEIVED
        assert sample.hrv_ms is None

    def test_missing_timestamp_without_fallback(self) -> None:
        assert map_device_payload({"activity": {"steps": 100}}) is None

    def test_malformed_values_become_none(self) -> None:
        sample = map_device_payload(
            {
                "timestamp": "2026-03-02T07:15:00",
                "heartRate": {"resting": "n/a"},
                "heartRateVariability": {"current": -5},
                "activity": {"steps": 1200},
            }
        )
        assert sample is not None
        assert sample.resting_hr is None
        assert sample.hrv_ms is None
        assert sample.steps == 1200

    def test_no_metrics_at_all(self) -> None:
        assert map_device_payload({"timestamp": "2026-03-02T07:15:00", "heartRate": "x"}) is None

    def test_unparseable_timestamp_falls_back(self) -> None:
        sample = map_device_payload(
            {"timestamp": "yesterday", "heartRateVariability": {"current": 50}},
            received_at=RECEIVED,
        )
        assert sample is not None
        assert sample.taken_at == RECEIVED
