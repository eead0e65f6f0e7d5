"""Frozen analysis context — immutable snapshot of all inputs for one engine pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from recovery_engine.models.metrics import MetricTrend, TrendFlags
from recovery_engine.models.records import (
    BiometricSample,
    NutritionRecord,
    ProgressRecord,
    SleepRecord,
    UserProfile,
    WorkoutRecord,
)
from recovery_engine.models.recovery import RecoveryScore


@dataclass(frozen=True)
class AnalysisContext:
    """Everything the insight rules may read.

    Record tuples are sorted oldest first. ``as_of`` anchors every trailing
    window so repeated calls with the same history give the same output.
    Build instances with ``OptimizationEngine.build_context``.
    """

    profile: UserProfile
    as_of: date
    recovery: RecoveryScore
    sleep: tuple[SleepRecord, ...] = field(default_factory=tuple)
    workouts: tuple[WorkoutRecord, ...] = field(default_factory=tuple)
    nutrition: tuple[NutritionRecord, ...] = field(default_factory=tuple)
    progress: tuple[ProgressRecord, ...] = field(default_factory=tuple)
    biometrics: tuple[BiometricSample, ...] = field(default_factory=tuple)
    trend_flags: TrendFlags = field(default_factory=TrendFlags)
    trends: tuple[MetricTrend, ...] = field(default_factory=tuple)

    # Convenience fields so rules can declare them in ``required_data``
    @property
    def goal_weight_kg(self) -> float | None:
        return self.profile.goal_weight_kg

    @property
    def hrv_samples(self) -> tuple[BiometricSample, ...]:
        return tuple(s for s in self.biometrics if s.hrv_ms is not None)

    @property
    def timed_meals(self) -> tuple[NutritionRecord, ...]:
        return tuple(n for n in self.nutrition if n.meal_time is not None)

    @property
    def timed_workouts(self) -> tuple[WorkoutRecord, ...]:
        return tuple(w for w in self.workouts if w.start_time is not None)
