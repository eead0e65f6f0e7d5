"""Performance indicators and trend flags from recent workout history."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import numpy as np

from recovery_engine.models.enums import (
    ENDURANCE_DECLINE_DURATION_DROP_MIN,
    PERFORMANCE_SAMPLE_SIZE,
    STRENGTH_DECLINE_RPE_DROP,
    TREND_SAMPLE_SIZE,
)
from recovery_engine.models.metrics import PerformanceMetrics, TrendFlags
from recovery_engine.models.records import WorkoutRecord


def _sorted(workouts: Sequence[WorkoutRecord]) -> list[WorkoutRecord]:
    return sorted(workouts, key=lambda w: w.day)


def consistency_score(
    workouts: Sequence[WorkoutRecord], as_of: date | None = None
) -> float | None:
    """Workouts per week x 10, capped at 100, over the last ten sessions.

    Returns None with fewer than two workouts or a zero-day span.
    """
    recent = _sorted(workouts)[-PERFORMANCE_SAMPLE_SIZE:]
    if len(recent) < 2:
        return None
    end = as_of or recent[-1].day
    span_days = (end - recent[0].day).days
    if span_days <= 0:
        return None
    per_week = len(recent) / span_days * 7
    return min(100.0, per_week * 10)


def rpe_progression(workouts: Sequence[WorkoutRecord]) -> float:
    """Mean session-to-session RPE change; positive means sessions feel harder."""
    if len(workouts) < 3:
        return 0.0
    rpes = np.array([w.effective_rpe for w in workouts], dtype=np.float64)
    return float(np.diff(rpes).mean())


def performance_metrics(
    workouts: Sequence[WorkoutRecord], as_of: date | None = None
) -> PerformanceMetrics:
    """Derive 0-100 strength, endurance, power, consistency and recovery indicators.

    Without history every indicator is a neutral 50 and consistency is None.
    """
    if not workouts:
        return PerformanceMetrics(
            strength=50.0, endurance=50.0, power=50.0, consistency=None, recovery=50.0
        )

    recent = _sorted(workouts)[-PERFORMANCE_SAMPLE_SIZE:]
    rpes = np.array([w.effective_rpe for w in recent], dtype=np.float64)
    durations = np.array([w.duration_min for w in recent], dtype=np.float64)

    strength = min(100.0, float(rpes.mean()) * 10)
    endurance = min(100.0, float(durations.mean()) / 60 * 20)
    power = min(100.0, float((rpes > 8).sum()) / len(recent) * 100)
    recovery = max(0.0, 100 - rpe_progression(recent) * 20)

    return PerformanceMetrics(
        strength=round(strength, 1),
        endurance=round(endurance, 1),
        power=round(power, 1),
        consistency=consistency_score(workouts, as_of),
        recovery=round(min(100.0, recovery), 1),
    )


def analyze_trend_flags(
    workouts: Sequence[WorkoutRecord], as_of: date | None = None
) -> TrendFlags:
    """Compare the last three sessions with the three before them.

    Strength is flagged as declining when average RPE dropped by more than
    0.5; endurance when average duration dropped by more than 10 minutes.
    """
    history = _sorted(workouts)
    consistency = consistency_score(history, as_of)
    if len(history) < 2 * TREND_SAMPLE_SIZE:
        return TrendFlags(consistency=consistency)

    recent = history[-TREND_SAMPLE_SIZE:]
    previous = history[-2 * TREND_SAMPLE_SIZE:-TREND_SAMPLE_SIZE]

    recent_rpe = np.mean([w.effective_rpe for w in recent])
    previous_rpe = np.mean([w.effective_rpe for w in previous])
    recent_duration = np.mean([w.duration_min for w in recent])
    previous_duration = np.mean([w.duration_min for w in previous])

    return TrendFlags(
        strength_declining=bool(recent_rpe < previous_rpe - STRENGTH_DECLINE_RPE_DROP),
        endurance_declining=bool(
            recent_duration < previous_duration - ENDURANCE_DECLINE_DURATION_DROP_MIN
        ),
        volume_declining=sum(w.total_sets for w in recent) < sum(w.total_sets for w in previous),
        consistency=consistency,
    )
