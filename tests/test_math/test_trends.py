"""Tests for the week-over-week metric trends."""

from __future__ import annotations

from datetime import timedelta

import pytest

from recovery_engine.math.trends import (
    analyze_trends,
    classify_change,
    nutrition_trends,
    weight_trend,
    workout_trends,
)
from recovery_engine.models.enums import TrendDirection, TrendSignificance


def _by_metric(trends):
    return {t.metric: t for t in trends}


class TestClassifyChange:
    @pytest.mark.parametrize(
        "metric,change,direction,significance",
        [
            ("Workout Frequency", 25.0, TrendDirection.INCREASING, TrendSignificance.HIGH),
            ("Average RPE", -7.0, TrendDirection.DECREASING, TrendSignificance.MEDIUM),
            ("Daily Calorie Intake", 3.0, TrendDirection.STABLE, TrendSignificance.LOW),
            ("Daily Protein Intake", -5.0, TrendDirection.STABLE, TrendSignificance.LOW),
            ("Body Weight", -1.5, TrendDirection.DECREASING, TrendSignificance.MEDIUM),
        ],
    )
    def test_thresholds(self, metric, change, direction, significance) -> None:
        assert classify_change(metric, change) == (direction, significance)


class TestWorkoutTrends:
    def test_week_over_week(self, workout_factory, as_of) -> None:
        older = [workout_factory(d, duration=60, rpe=6.0) for d in (8, 10, 12)]
        recent = [workout_factory(d, duration=45, rpe=6.48) for d in (0, 2, 4, 6)]
        trends = _by_metric(workout_trends(older + recent, as_of))

        frequency = trends["Workout Frequency"]
        assert (frequency.current, frequency.previous) == (4.0, 3.0)
        assert frequency.direction == TrendDirection.INCREASING
        assert frequency.significance == TrendSignificance.HIGH

        duration = trends["Average Workout Duration"]
        assert duration.percent_change == pytest.approx(-25.0)
        assert duration.direction == TrendDirection.DECREASING

        rpe = trends["Average RPE"]
        assert rpe.percent_change == pytest.approx(8.0)
        assert rpe.significance == TrendSignificance.MEDIUM

    def test_too_few_workouts(self, workout_factory, as_of) -> None:
        assert workout_trends([workout_factory(0), workout_factory(9)], as_of) == []

    def test_empty_older_week_reports_nothing(self, workout_factory, as_of) -> None:
        workouts = [workout_factory(d) for d in (0, 1, 2, 3)]
        assert workout_trends(workouts, as_of) == []


class TestNutritionTrends:
    def test_protein_rises_while_calories_hold(self, nutrition_factory, as_of) -> None:
        older = [nutrition_factory(d, protein=100) for d in range(7, 14)]
        recent = [nutrition_factory(d, protein=130) for d in range(7)]
        trends = _by_metric(nutrition_trends(older + recent, as_of))

        assert trends["Daily Protein Intake"].percent_change == pytest.approx(30.0)
        assert trends["Daily Protein Intake"].significance == TrendSignificance.HIGH
        assert trends["Daily Calorie Intake"].direction == TrendDirection.STABLE

    def test_needs_a_week_of_logging(self, nutrition_factory, as_of) -> None:
        assert nutrition_trends([nutrition_factory(d) for d in range(6)], as_of) == []


class TestWeightTrend:
    def test_smoothed_weight_drifts_down(self, progress_factory, as_of) -> None:
        progress = [progress_factory(d, 81.0) for d in range(7, 14)]
        progress += [progress_factory(d, 80.0) for d in range(7)]
        trend = weight_trend(progress, as_of)
        assert trend is not None
        # Seven-day averages blend the older weigh-ins into the recent week
        assert trend.current == pytest.approx(80.0 + 3 / 7)
        assert trend.previous == pytest.approx(81.0)
        assert trend.direction == TrendDirection.DECREASING
        assert trend.significance == TrendSignificance.LOW

    def test_single_weigh_in(self, progress_factory, as_of) -> None:
        assert weight_trend([progress_factory(0, 80.0)], as_of) is None


class TestAnalyzeTrends:
    def test_no_history(self, as_of) -> None:
        assert analyze_trends([], [], [], as_of) == ()

    def test_future_records_are_ignored(self, workout_factory, as_of) -> None:
        past = as_of - timedelta(days=28)
        workouts = [workout_factory(d) for d in range(14)]
        assert analyze_trends(workouts, [], [], past) == ()
