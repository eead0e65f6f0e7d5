"""Tests for the metric aggregator — windows, percent changes and trends."""

from __future__ import annotations

import math
from datetime import date, timedelta

import pytest

from recovery_engine.math.aggregation import (
    daily_totals,
    linear_trend,
    mean_or_none,
    percent_change,
    rolling_average,
    summarize_last,
    summarize_window,
)
from recovery_engine.models.enums import ChangeStatus

DAY0 = date(2026, 1, 1)


def _points(values: list[float]) -> list[tuple[date, float]]:
    return [(DAY0 + timedelta(days=i), v) for i, v in enumerate(values)]


class TestPercentChange:
    def test_basic_increase(self) -> None:
        value, status = percent_change(110.0, 100.0)
        assert status == ChangeStatus.OK
        assert value == pytest.approx(10.0)

    def test_zero_baseline_is_undefined(self) -> None:
        value, status = percent_change(5.0, 0.0)
        assert value is None
        assert status == ChangeStatus.UNDEFINED

    def test_missing_side_is_not_enough_data(self) -> None:
        assert percent_change(None, 10.0) == (None, ChangeStatus.NOT_ENOUGH_DATA)
        assert percent_change(10.0, None) == (None, ChangeStatus.NOT_ENOUGH_DATA)


class TestSummarizeWindow:
    def test_empty_series(self) -> None:
        summary = summarize_window([], 7)
        assert summary.average is None
        assert summary.latest is None
        assert summary.change_status == ChangeStatus.NOT_ENOUGH_DATA

    def test_single_point(self) -> None:
        summary = summarize_window(_points([5.0]), 7)
        assert summary.average == 5.0
        assert summary.latest == 5.0
        assert not summary.has_change

    def test_fourteen_days_compares_weeks(self) -> None:
        # Week 1 averages 10, week 2 averages 12
        summary = summarize_window(_points([10.0] * 7 + [12.0] * 7), 7)
        assert summary.average == pytest.approx(12.0)
        assert summary.count == 7
        assert summary.percent_change == pytest.approx(20.0)
        assert summary.has_change

    def test_zero_older_average_is_undefined(self) -> None:
        summary = summarize_window(_points([0.0] * 7 + [3.0] * 7), 7)
        assert summary.change_status == ChangeStatus.UNDEFINED
        assert summary.percent_change is None

    def test_as_of_anchors_window(self) -> None:
        points = _points([1.0] * 20)
        summary = summarize_window(points, 7, as_of=DAY0 + timedelta(days=30))
        # Recent window (day 23, day 30] holds nothing
        assert summary.average is None
        assert summary.count == 0

    def test_order_does_not_matter(self) -> None:
        points = _points([3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0])
        assert summarize_window(points, 3) == summarize_window(list(reversed(points)), 3)

    def test_never_returns_nan(self) -> None:
        summary = summarize_window(_points([0.0] * 14), 7)
        assert summary.average == 0.0
        assert summary.percent_change is None


class TestSummarizeLast:
    def test_fewer_than_window(self) -> None:
        summary = summarize_last([50.0, 52.0, 48.0], 7)
        assert summary.average == pytest.approx(50.0)
        assert summary.change_status == ChangeStatus.NOT_ENOUGH_DATA

    def test_compares_previous_block(self) -> None:
        summary = summarize_last([60.0] * 7 + [45.0] * 7, 7)
        assert summary.percent_change == pytest.approx(-25.0)
        assert summary.latest == 45.0

    def test_empty(self) -> None:
        assert summarize_last([], 7).average is None


class TestHelpers:
    def test_daily_totals_sums_same_day(self) -> None:
        points = [(DAY0, 500.0), (DAY0, 700.0), (DAY0 + timedelta(days=1), 2000.0)]
        assert daily_totals(points) == [(DAY0, 1200.0), (DAY0 + timedelta(days=1), 2000.0)]

    def test_daily_totals_empty(self) -> None:
        assert daily_totals([]) == []

    def test_rolling_average(self) -> None:
        rolled = rolling_average(_points([2.0, 4.0, 6.0]), 2)
        assert [v for _, v in rolled] == pytest.approx([2.0, 3.0, 5.0])

    def test_linear_trend_slope_per_day(self) -> None:
        slope = linear_trend(_points([80.0, 80.5, 81.0, 81.5]))
        assert slope == pytest.approx(0.5)

    def test_linear_trend_needs_two_days(self) -> None:
        assert linear_trend([(DAY0, 80.0)]) is None
        assert linear_trend([]) is None

    def test_mean_or_none(self) -> None:
        assert mean_or_none([]) is None
        assert mean_or_none([1.0, 2.0, 3.0]) == pytest.approx(2.0)
        assert not math.isnan(mean_or_none(iter([4.0])))
