"""Shared test fixtures: profiles, record factories and analysis contexts."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Callable

import pytest

from recovery_engine.engine import OptimizationEngine
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import ActivityLevel, BiologicalSex, GoalType
from recovery_engine.models.records import (
    BiometricSample,
    ExerciseLog,
    NutritionRecord,
    ProgressRecord,
    SetLog,
    SleepRecord,
    UserProfile,
    WorkoutRecord,
)
from recovery_engine.registry import RuleRegistry

AS_OF = date(2026, 3, 1)


# ---------------------------------------------------------------------------
# Record builders (all days are counted back from AS_OF)
# ---------------------------------------------------------------------------


def _make_sleep(
    days_ago: int = 0,
    hours: float = 8.0,
    quality: float = 8.0,
    stress: float = 3.0,
    caffeine_gap: float = 8.0,
) -> SleepRecord:
    day = AS_OF - timedelta(days=days_ago)
    return SleepRecord(
        day=day,
        hours_slept=hours,
        quality=quality,
        stress_level=stress,
        caffeine_hours_before_bed=caffeine_gap,
        record_id=f"sleep-{day.isoformat()}",
    )


def _sleep_week(
    hours: float = 8.0, quality: float = 8.0, stress: float = 3.0, nights: int = 7
) -> list[SleepRecord]:
    return [_make_sleep(i, hours, quality, stress) for i in range(nights)]


def _make_workout(
    days_ago: int = 0,
    duration: float = 60.0,
    rpe: float | None = 7.0,
    exercises: int = 0,
    sets_per_exercise: int = 3,
    start: time | None = None,
) -> WorkoutRecord:
    day = AS_OF - timedelta(days=days_ago)
    logs = tuple(
        ExerciseLog(
            name=f"Exercise {i + 1}",
            sets=tuple(SetLog(reps=8, weight=60.0) for _ in range(sets_per_exercise)),
        )
        for i in range(exercises)
    )
    return WorkoutRecord(
        day=day,
        duration_min=duration,
        rpe=rpe,
        exercises=logs,
        start_time=start,
        record_id=f"workout-{day.isoformat()}",
    )


def _make_nutrition(
    days_ago: int = 0,
    calories: float = 2500.0,
    protein: float = 150.0,
    meal_time: time | None = None,
) -> NutritionRecord:
    day = AS_OF - timedelta(days=days_ago)
    return NutritionRecord(
        day=day,
        calories=calories,
        protein_g=protein,
        carbs_g=250.0,
        fat_g=80.0,
        meal_time=meal_time,
        record_id=f"meal-{day.isoformat()}",
    )


def _make_progress(days_ago: int, weight_kg: float) -> ProgressRecord:
    return ProgressRecord(day=AS_OF - timedelta(days=days_ago), weight_kg=weight_kg)


def _make_hrv(days_ago: int, hrv: float) -> BiometricSample:
    day = AS_OF - timedelta(days=days_ago)
    return BiometricSample(taken_at=datetime.combine(day, time(7, 0)), hrv_ms=hrv)


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


@pytest.fixture
def male_profile() -> UserProfile:
    """30-year-old moderately active male, 80 kg, 180 cm, 18% body fat."""
    return UserProfile(
        age=30,
        height_cm=180.0,
        weight_kg=80.0,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        sex=BiologicalSex.MALE,
        body_fat_pct=18.0,
        goal=GoalType.MAINTENANCE,
        user_id="user-1",
    )


@pytest.fixture
def female_profile() -> UserProfile:
    """28-year-old very active female, 62 kg, 168 cm, 24% body fat, fat-loss goal."""
    return UserProfile(
        age=28,
        height_cm=168.0,
        weight_kg=62.0,
        activity_level=ActivityLevel.VERY_ACTIVE,
        sex=BiologicalSex.FEMALE,
        body_fat_pct=24.0,
        goal=GoalType.FAT_LOSS,
        goal_weight_kg=58.0,
        user_id="user-2",
    )


@pytest.fixture
def muscular_profile() -> UserProfile:
    """Onboarding example: 180 lb, 70 in, 30 y, male, 18% body fat, "Muscular"."""
    return UserProfile.from_imperial(
        age=30,
        height_in=70,
        weight_lbs=180,
        sex=BiologicalSex.MALE,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        body_fat_pct=18.0,
        goal=GoalType.MUSCLE_GAIN,
        target_physique="Muscular",
        user_id="user-3",
    )


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def sleep_factory() -> Callable[..., SleepRecord]:
    return _make_sleep


@pytest.fixture
def sleep_week_factory() -> Callable[..., list[SleepRecord]]:
    return _sleep_week


@pytest.fixture
def workout_factory() -> Callable[..., WorkoutRecord]:
    return _make_workout


@pytest.fixture
def nutrition_factory() -> Callable[..., NutritionRecord]:
    return _make_nutrition


@pytest.fixture
def progress_factory() -> Callable[..., ProgressRecord]:
    return _make_progress


@pytest.fixture
def hrv_factory() -> Callable[..., BiometricSample]:
    return _make_hrv


@pytest.fixture
def context_factory(male_profile: UserProfile) -> Callable[..., AnalysisContext]:
    """Factory fixture for AnalysisContext, anchored at AS_OF by default.

    Uses an engine with an empty registry so no rule discovery happens.
    """
    engine = OptimizationEngine(registry=RuleRegistry())

    def factory(
        profile: UserProfile | None = None, as_of: date = AS_OF, **records
    ) -> AnalysisContext:
        return engine.build_context(profile or male_profile, as_of=as_of, **records)

    return factory
