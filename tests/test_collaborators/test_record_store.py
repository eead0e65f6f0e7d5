"""Tests for DateRange and InMemoryRecordStore."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from recovery_engine.collaborators.protocols import DateRange, InMemoryRecordStore
from recovery_engine.models.enums import RecordKind
from recovery_engine.models.records import BiometricSample


class TestDateRange:
    def test_trailing_is_inclusive(self) -> None:
        window = DateRange.trailing(date(2026, 3, 1), 7)
        assert window.start == date(2026, 2, 23)
        assert date(2026, 2, 23) in window
        assert date(2026, 3, 1) in window
        assert date(2026, 2, 22) not in window
        assert date(2026, 3, 2) not in window

    def test_non_dates_are_not_contained(self) -> None:
        assert "2026-03-01" not in DateRange(date(2026, 1, 1), date(2026, 12, 31))


class TestInMemoryRecordStore:
    def setup_method(self) -> None:
        self.store = InMemoryRecordStore()

    def test_filters_by_kind_user_and_range(
        self, sleep_factory, workout_factory, as_of
    ) -> None:
        self.store.extend("user-1", [sleep_factory(i) for i in range(10)])
        self.store.append("user-1", workout_factory(0))
        self.store.append("user-2", sleep_factory(0))

        window = DateRange.trailing(as_of, 7)
        sleep = self.store.list_records(RecordKind.SLEEP, "user-1", window)
        assert len(sleep) == 7
        assert all(r.day in window for r in sleep)
        assert len(self.store.list_records(RecordKind.WORKOUT, "user-1", window)) == 1
        assert len(self.store.list_records(RecordKind.SLEEP, "user-2", window)) == 1

    def test_returns_oldest_first(self, nutrition_factory, as_of) -> None:
        self.store.extend("user-1", [nutrition_factory(0), nutrition_factory(3), nutrition_factory(1)])
        records = self.store.list_records(
            RecordKind.NUTRITION, "user-1", DateRange.trailing(as_of, 30)
        )
        assert [r.day for r in records] == [as_of - timedelta(days=d) for d in (3, 1, 0)]

    def test_unknown_user_is_empty(self, as_of) -> None:
        assert self.store.list_records(
            RecordKind.PROGRESS, "nobody", DateRange.trailing(as_of, 30)
        ) == []

    def test_rejects_unsupported_records(self) -> None:
        with pytest.raises(TypeError):
            self.store.append("user-1", BiometricSample(taken_at=None))  # type: ignore[arg-type]
