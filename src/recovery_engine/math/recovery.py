"""Recovery scoring from sleep, stress and recent training load.

The composite follows a simple explainable model:

    sleep     = 0.6 x duration_score + 0.4 x quality x 10
    stress    = 100 - avg_stress x 10
    readiness = (sleep + stress) / 2, scaled by training load
    overall   = round(mean(sleep, stress, readiness))

Every function here is total: missing data degrades to neutral values
instead of raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from recovery_engine import config
from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.models.enums import (
    DEFAULT_SLEEP_TARGET_HOURS,
    HIGH_LOAD_READINESS_FACTOR,
    HIGH_STRESS_LEVEL,
    HIGH_TRAINING_LOAD,
    LOW_LOAD_READINESS_FACTOR,
    LOW_SLEEP_QUALITY,
    LOW_TRAINING_LOAD,
    MIN_CAFFEINE_GAP_HOURS,
    NEUTRAL_SCORE,
    OPTIMAL_SLEEP_MAX_HOURS,
    OPTIMAL_SLEEP_MIN_HOURS,
    RECOVERY_HIGH_THRESHOLD,
    RECOVERY_LOW_THRESHOLD,
    RECOVERY_MODERATE_THRESHOLD,
    SLEEP_DURATION_WEIGHT,
    SLEEP_QUALITY_WEIGHT,
    DurationBand,
    IntensityBand,
)
from recovery_engine.models.records import SleepRecord, UserProfile, WorkoutRecord
from recovery_engine.models.recovery import RecoveryScore, WorkoutAdjustment

START_TRACKING_MESSAGE = "Start tracking your sleep to get personalized recovery insights"


def _clamp_score(value: float) -> int:
    return int(min(100, max(0, round(value))))


def sleep_duration_score(hours: float) -> int:
    """Piecewise duration score: 7-9h is optimal, under 5h is poor."""
    if OPTIMAL_SLEEP_MIN_HOURS <= hours <= OPTIMAL_SLEEP_MAX_HOURS:
        return 100
    if OPTIMAL_SLEEP_MAX_HOURS < hours <= 10:
        return 90
    if 6 <= hours < OPTIMAL_SLEEP_MIN_HOURS:
        return 80
    if hours > 10:
        return 70
    if 5 <= hours < 6:
        return 60
    return 30


def sleep_score(hours: float, quality: float) -> int:
    """Weighted duration (60%) and quality (40%) score, clamped to [0, 100]."""
    quality_score = quality * 10
    return _clamp_score(
        sleep_duration_score(hours) * SLEEP_DURATION_WEIGHT
        + quality_score * SLEEP_QUALITY_WEIGHT
    )


def stress_score(avg_stress: float) -> int:
    return _clamp_score(max(0.0, 100 - avg_stress * 10))


def training_load(
    workouts: Sequence[WorkoutRecord],
    as_of: date | None = None,
    window_days: int = config.LOAD_WINDOW_DAYS,
) -> float:
    """Average daily load (duration x RPE) over the trailing window.

    Args:
        workouts: Workout history, any order.
        as_of: Last day of the window. Defaults to the latest workout.
        window_days: Window length; the summed load is divided by this.

    Returns:
        Average daily load, 0.0 without workouts in the window.
    """
    if not workouts:
        return 0.0
    end = as_of or max(w.day for w in workouts)
    start = end - timedelta(days=window_days)
    total = sum(w.load for w in workouts if start < w.day <= end)
    return total / window_days


def readiness_score(sleep: float, stress: float, load: float) -> int:
    readiness = (sleep + stress) / 2
    if load > HIGH_TRAINING_LOAD:
        readiness *= HIGH_LOAD_READINESS_FACTOR
    elif load < LOW_TRAINING_LOAD:
        readiness *= LOW_LOAD_READINESS_FACTOR
    return _clamp_score(readiness)


def workout_adjustment(overall: int) -> WorkoutAdjustment:
    """Map the overall score onto an intensity/duration/focus band."""
    if overall >= RECOVERY_HIGH_THRESHOLD:
        return WorkoutAdjustment(IntensityBand.HIGH, DurationBand.LONG, "Strength and power training")
    if overall >= RECOVERY_MODERATE_THRESHOLD:
        return WorkoutAdjustment(IntensityBand.MEDIUM, DurationBand.MEDIUM, "Hybrid training")
    if overall >= RECOVERY_LOW_THRESHOLD:
        return WorkoutAdjustment(IntensityBand.LOW, DurationBand.SHORT, "Mobility and light cardio")
    return WorkoutAdjustment(IntensityBand.LOW, DurationBand.SHORT, "Recovery and stretching")


def recovery_recommendations(
    avg_hours: float,
    avg_quality: float,
    avg_stress: float,
    latest_caffeine_gap: float,
    load: float,
) -> list[str]:
    """Threshold-driven recovery tips."""
    recommendations: list[str] = []

    if avg_hours < OPTIMAL_SLEEP_MIN_HOURS:
        recommendations.append("Aim for 7-9 hours of sleep for optimal recovery")
    elif avg_hours > OPTIMAL_SLEEP_MAX_HOURS:
        recommendations.append("Consider if oversleeping is affecting your energy levels")

    if avg_quality < LOW_SLEEP_QUALITY:
        recommendations.append("Improve sleep quality with a consistent bedtime routine")
        recommendations.append("Avoid screens 1 hour before bed")

    if avg_stress > HIGH_STRESS_LEVEL:
        recommendations.append("High stress detected - try meditation or deep breathing")
        recommendations.append("Consider reducing workout intensity on high-stress days")

    if latest_caffeine_gap < MIN_CAFFEINE_GAP_HOURS:
        recommendations.append("Avoid caffeine within 6 hours of bedtime")

    if load > HIGH_TRAINING_LOAD:
        recommendations.append("High training load - consider a deload week")
    elif load < LOW_TRAINING_LOAD:
        recommendations.append("Low training load - you can increase intensity")

    return recommendations


def neutral_recovery_score() -> RecoveryScore:
    return RecoveryScore(
        overall=NEUTRAL_SCORE,
        sleep=NEUTRAL_SCORE,
        stress=NEUTRAL_SCORE,
        readiness=NEUTRAL_SCORE,
        workout_adjustment=WorkoutAdjustment(
            IntensityBand.MEDIUM, DurationBand.MEDIUM, "General fitness"
        ),
        recommendations=(START_TRACKING_MESSAGE,),
    )


def calculate_recovery_score(
    sleep_records: Sequence[SleepRecord],
    profile: UserProfile | None = None,
    workouts: Sequence[WorkoutRecord] = (),
    as_of: date | None = None,
    window: int = config.SLEEP_WINDOW_RECORDS,
) -> RecoveryScore:
    """Compute the composite recovery score.

    Args:
        sleep_records: Sleep history, any order. The most recent ``window``
            records are used.
        profile: The user's profile. Accepted for parity with the other
            components; the current model does not personalise on it.
        workouts: Recent workouts for the training-load adjustment.
        as_of: Anchor day for the training-load window.
        window: Number of sleep records to average.

    Returns:
        A fully populated RecoveryScore. With no sleep records, a neutral
        50/50/50/50 score and a single "start tracking" recommendation.
    """
    if not sleep_records:
        return neutral_recovery_score()

    recent = sorted(sleep_records, key=lambda r: r.day)[-max(1, window):]
    latest = recent[-1]

    avg_hours = mean_or_none(r.hours_slept for r in recent)
    avg_quality = mean_or_none(r.quality for r in recent)
    avg_stress = mean_or_none(r.stress_level for r in recent)

    sleep = sleep_score(avg_hours, avg_quality)
    stress = stress_score(avg_stress)
    load = training_load(workouts, as_of=as_of or latest.day)
    readiness = readiness_score(sleep, stress, load)
    overall = _clamp_score((sleep + stress + readiness) / 3)

    recommendations = recovery_recommendations(
        avg_hours=avg_hours,
        avg_quality=avg_quality,
        avg_stress=avg_stress,
        latest_caffeine_gap=latest.caffeine_hours_before_bed,
        load=load,
    )

    return RecoveryScore(
        overall=overall,
        sleep=sleep,
        stress=stress,
        readiness=readiness,
        workout_adjustment=workout_adjustment(overall),
        recommendations=tuple(recommendations),
        training_load=round(load, 1),
    )


def sleep_debt(records: Sequence[SleepRecord], target_hours: float = DEFAULT_SLEEP_TARGET_HOURS) -> float:
    """Hours short of the target across the records (negative means surplus)."""
    if not records:
        return 0.0
    return len(records) * target_hours - sum(r.hours_slept for r in records)


def optimal_bedtime(wake_time: str, target_hours: float = DEFAULT_SLEEP_TARGET_HOURS) -> str:
    """Bedtime ``HH:MM`` that yields ``target_hours`` before ``wake_time`` (``HH:MM``)."""
    hours, minutes = (int(part) for part in wake_time.split(":"))
    bedtime = (hours * 60 + minutes - round(target_hours * 60)) % (24 * 60)
    return f"{bedtime // 60:02d}:{bedtime % 60:02d}"
