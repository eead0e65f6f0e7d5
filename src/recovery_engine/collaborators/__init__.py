"""Injected collaborators: record storage, wearable sync and snapshot storage."""

from recovery_engine.collaborators.biometrics import map_device_payload
from recovery_engine.collaborators.protocols import (
    BiometricSource,
    DateRange,
    InMemoryRecordStore,
    RecordStore,
)
from recovery_engine.collaborators.snapshots import SnapshotStore

__all__ = [
    "BiometricSource",
    "DateRange",
    "InMemoryRecordStore",
    "RecordStore",
    "SnapshotStore",
    "map_device_payload",
]
