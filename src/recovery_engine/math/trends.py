"""Week-over-week metric trends for workouts, nutrition and body weight.

Each trend compares the trailing ``TREND_WINDOW_DAYS`` window ending at
``as_of`` with the equal window before it, using ``summarize_window``. A
metric is left out when either window is empty or the older average is
zero, so every reported percent change is finite.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from recovery_engine.math.aggregation import (
    Point,
    daily_totals,
    percent_change,
    rolling_average,
    summarize_window,
)
from recovery_engine.models.enums import (
    MIN_TREND_NUTRITION_DAYS,
    MIN_TREND_WORKOUTS,
    TREND_THRESHOLDS_PCT,
    TREND_WINDOW_DAYS,
    WEIGHT_SMOOTHING_DAYS,
    ChangeStatus,
    TrendDirection,
    TrendSignificance,
)
from recovery_engine.models.metrics import MetricTrend
from recovery_engine.models.records import NutritionRecord, ProgressRecord, WorkoutRecord

logger = logging.getLogger(__name__)


def classify_change(metric: str, change: float) -> tuple[TrendDirection, TrendSignificance]:
    """Direction and significance of a percent change for ``metric``."""
    direction_pct, high_pct, medium_pct = TREND_THRESHOLDS_PCT[metric]
    if change > direction_pct:
        direction = TrendDirection.INCREASING
    elif change < -direction_pct:
        direction = TrendDirection.DECREASING
    else:
        direction = TrendDirection.STABLE

    magnitude = abs(change)
    if magnitude > high_pct:
        significance = TrendSignificance.HIGH
    elif magnitude > medium_pct:
        significance = TrendSignificance.MEDIUM
    else:
        significance = TrendSignificance.LOW
    return direction, significance


def _trend(metric: str, current: float | None, previous: float | None) -> MetricTrend | None:
    change, status = percent_change(current, previous)
    if status != ChangeStatus.OK:
        return None
    direction, significance = classify_change(metric, change)
    return MetricTrend(
        metric=metric,
        current=current,
        previous=previous,
        percent_change=change,
        direction=direction,
        significance=significance,
    )


def _window_trend(metric: str, points: Sequence[Point], as_of: date) -> MetricTrend | None:
    recent = summarize_window(points, TREND_WINDOW_DAYS, as_of)
    older = summarize_window(points, TREND_WINDOW_DAYS, as_of - timedelta(days=TREND_WINDOW_DAYS))
    return _trend(metric, recent.average, older.average)


def workout_trends(workouts: Sequence[WorkoutRecord], as_of: date) -> list[MetricTrend]:
    """Frequency, average duration and average RPE trends."""
    workouts = [w for w in workouts if w.day <= as_of]
    if len(workouts) < MIN_TREND_WORKOUTS:
        return []

    durations = [(w.day, float(w.duration_min)) for w in workouts]
    recent = summarize_window(durations, TREND_WINDOW_DAYS, as_of)
    older = summarize_window(durations, TREND_WINDOW_DAYS, as_of - timedelta(days=TREND_WINDOW_DAYS))

    trends = [
        _trend("Workout Frequency", float(recent.count), float(older.count)),
        _trend("Average Workout Duration", recent.average, older.average),
        _window_trend("Average RPE", [(w.day, w.effective_rpe) for w in workouts], as_of),
    ]
    return [t for t in trends if t is not None]


def nutrition_trends(nutrition: Sequence[NutritionRecord], as_of: date) -> list[MetricTrend]:
    """Daily calorie and protein intake trends; meals are summed per day first."""
    calories = [p for p in daily_totals((n.day, n.calories) for n in nutrition) if p[0] <= as_of]
    if len(calories) < MIN_TREND_NUTRITION_DAYS:
        return []
    protein = daily_totals((n.day, n.protein_g) for n in nutrition if n.day <= as_of)

    trends = [
        _window_trend("Daily Calorie Intake", calories, as_of),
        _window_trend("Daily Protein Intake", protein, as_of),
    ]
    return [t for t in trends if t is not None]


def weight_trend(progress: Sequence[ProgressRecord], as_of: date) -> MetricTrend | None:
    """Trend of the smoothed body weight; daily weigh-in noise is averaged out first."""
    weights = [(p.day, p.weight_kg) for p in progress if p.day <= as_of]
    if len(weights) < 2:
        return None
    smoothed = rolling_average(weights, WEIGHT_SMOOTHING_DAYS)
    return _window_trend("Body Weight", smoothed, as_of)


def analyze_trends(
    workouts: Sequence[WorkoutRecord],
    nutrition: Sequence[NutritionRecord],
    progress: Sequence[ProgressRecord],
    as_of: date,
) -> tuple[MetricTrend, ...]:
    """All metric trends that have data in both windows."""
    trends = [*workout_trends(workouts, as_of), *nutrition_trends(nutrition, as_of)]
    weight = weight_trend(progress, as_of)
    if weight is not None:
        trends.append(weight)
    logger.debug("Computed %d metric trend(s) as of %s", len(trends), as_of)
    return tuple(trends)
