"""Immutable input records: the user profile and the time-stamped logs.

The engine only reads these. Records are keyed by ``day``; collaborators
that hold several entries per day (e.g. one nutrition record per meal) are
summed into daily totals by the aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time

from recovery_engine.models.enums import (
    CM_PER_INCH,
    DEFAULT_WORKOUT_RPE,
    LB_PER_KG,
    ActivityLevel,
    BiologicalSex,
    GoalType,
)


def lbs_to_kg(lbs: float) -> float:
    return lbs / LB_PER_KG


def inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


@dataclass(frozen=True)
class UserProfile:
    """Onboarding profile. Units are metric; use ``from_imperial`` for lb/in input."""

    age: int | None
    height_cm: float | None
    weight_kg: float | None
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    sex: BiologicalSex | None = None
    body_fat_pct: float | None = None
    goal: GoalType = GoalType.MAINTENANCE
    goal_weight_kg: float | None = None
    target_physique: str = ""
    user_id: str = ""

    @classmethod
    def from_imperial(
        cls,
        *,
        age: int | None,
        height_in: float | None,
        weight_lbs: float | None,
        goal_weight_lbs: float | None = None,
        **kwargs,
    ) -> UserProfile:
        """Build a profile from pounds and inches."""
        return cls(
            age=age,
            height_cm=inches_to_cm(height_in) if height_in is not None else None,
            weight_kg=lbs_to_kg(weight_lbs) if weight_lbs is not None else None,
            goal_weight_kg=(
                lbs_to_kg(goal_weight_lbs) if goal_weight_lbs is not None else None
            ),
            **kwargs,
        )


@dataclass(frozen=True)
class SleepRecord:
    day: date
    hours_slept: float
    quality: float  # 1-10
    stress_level: float  # 1-10
    caffeine_hours_before_bed: float  # hours between last caffeine and bed
    record_id: str = ""


@dataclass(frozen=True)
class SetLog:
    reps: int
    weight: float
    rpe: float | None = None


@dataclass(frozen=True)
class ExerciseLog:
    name: str
    sets: tuple[SetLog, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkoutRecord:
    day: date
    duration_min: float
    rpe: float | None = None  # session RPE, 1-10
    exercises: tuple[ExerciseLog, ...] = field(default_factory=tuple)
    start_time: time | None = None
    record_id: str = ""

    @property
    def effective_rpe(self) -> float:
        """Session RPE, falling back to a moderate 5 when it was not logged."""
        return self.rpe if self.rpe is not None else DEFAULT_WORKOUT_RPE

    @property
    def load(self) -> float:
        """Session load as duration x RPE."""
        return self.duration_min * self.effective_rpe

    @property
    def total_sets(self) -> int:
        return sum(len(exercise.sets) for exercise in self.exercises)


@dataclass(frozen=True)
class NutritionRecord:
    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meal_time: time | None = None  # when the meal was eaten, if logged
    record_id: str = ""


@dataclass(frozen=True)
class ProgressRecord:
    day: date
    weight_kg: float
    body_fat_pct: float | None = None
    record_id: str = ""


@dataclass(frozen=True)
class BiometricSample:
    """A wearable reading supplied by the device-sync collaborator."""

    taken_at: datetime
    hrv_ms: float | None = None
    resting_hr: float | None = None
    steps: int | None = None
