"""Interfaces the engine reads its inputs through, plus an in-memory store."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol, Union

from recovery_engine.models.enums import RecordKind
from recovery_engine.models.records import (
    BiometricSample,
    NutritionRecord,
    ProgressRecord,
    SleepRecord,
    WorkoutRecord,
)

Record = Union[SleepRecord, WorkoutRecord, NutritionRecord, ProgressRecord]

_KIND_BY_TYPE: dict[type, RecordKind] = {
    SleepRecord: RecordKind.SLEEP,
    WorkoutRecord: RecordKind.WORKOUT,
    NutritionRecord: RecordKind.NUTRITION,
    ProgressRecord: RecordKind.PROGRESS,
}


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of days."""

    start: date
    end: date

    @classmethod
    def trailing(cls, end: date, days: int) -> DateRange:
        """The ``days`` days ending at ``end``, inclusive."""
        return cls(start=end - timedelta(days=days - 1), end=end)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end


class RecordStore(Protocol):
    def list_records(
        self, kind: RecordKind, user_id: str, date_range: DateRange
    ) -> list[Record]:
        """Records of one kind for a user within the range, oldest first."""
        ...


class BiometricSource(Protocol):
    def get_latest_biometrics(self, user_id: str) -> BiometricSample | None:
        """Most recent wearable sample, or None when nothing has synced.

        Implementations raise BiometricSourceError when the device cannot be
        reached.
        """
        ...


class InMemoryRecordStore:
    """RecordStore backed by per-user lists. Writes are append-only."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, RecordKind], list[Record]] = defaultdict(list)

    def append(self, user_id: str, record: Record) -> None:
        kind = _KIND_BY_TYPE.get(type(record))
        if kind is None:
            raise TypeError(f"Unsupported record type: {type(record).__name__}")
        self._records[(user_id, kind)].append(record)

    def extend(self, user_id: str, records: list[Record]) -> None:
        for record in records:
            self.append(user_id, record)

    def list_records(
        self, kind: RecordKind, user_id: str, date_range: DateRange
    ) -> list[Record]:
        matching = [r for r in self._records.get((user_id, kind), []) if r.day in date_range]
        return sorted(matching, key=lambda r: r.day)
