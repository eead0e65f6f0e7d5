"""PlanAdaptor — applies the adaptation rules to a candidate workout.

Rules are evaluated in a fixed order and each one that applies appends a
WorkoutChange. The recovery-band scaling rules are mutually exclusive; the
trend, consistency and goal rules are independent of them and of each other.

The candidate is never modified: every step builds new frozen values with
``dataclasses.replace`` and the original is returned untouched alongside
the adapted copy.
"""

from __future__ import annotations

import dataclasses
import logging
import math

from recovery_engine.catalog.templates import (
    CARDIO_FINISHERS,
    COMPOUND_LIFTS,
    CONDITIONING_EXERCISES,
)
from recovery_engine.models.enums import (
    ADDED_CARDIO_FINISHERS,
    ADDED_COMPOUND_LIFTS,
    ADDED_CONDITIONING_EXERCISES,
    BASE_ADAPTATION_CONFIDENCE,
    EXCELLENT_RECOVERY_CONFIDENCE,
    EXCELLENT_RECOVERY_SCALE,
    FAT_LOSS_MIN_DURATION_MIN,
    LOW_CONSISTENCY_THRESHOLD,
    MODERATE_RECOVERY_CONFIDENCE,
    MODERATE_RECOVERY_SCALE,
    MUSCLE_GAIN_MIN_REPS,
    MUSCLE_GAIN_MIN_SETS,
    POOR_RECOVERY_CONFIDENCE,
    POOR_RECOVERY_SCALE,
    RECOVERY_HIGH_THRESHOLD,
    RECOVERY_LOW_THRESHOLD,
    RECOVERY_MODERATE_THRESHOLD,
    SIMPLIFIED_MAX_DURATION_MIN,
    SIMPLIFIED_MAX_EXERCISES,
    ChangeType,
    GoalType,
)
from recovery_engine.models.metrics import TrendFlags
from recovery_engine.models.recovery import RecoveryScore
from recovery_engine.models.workout import (
    AdaptedWorkout,
    CandidateWorkout,
    PlannedExercise,
    WorkoutChange,
)

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Standard workout adaptation"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _scale_count(value: int | None, factor: float) -> int | None:
    if value is None:
        return None
    return max(1, _round_half_up(value * factor))


def scale_workout(workout: CandidateWorkout, factor: float) -> CandidateWorkout:
    """Scale every exercise's sets, reps and hold time plus the session duration.

    Counts never drop below 1.
    """
    exercises = tuple(
        dataclasses.replace(
            ex,
            sets=max(1, _round_half_up(ex.sets * factor)),
            reps=_scale_count(ex.reps, factor),
            reps_max=_scale_count(ex.reps_max, factor),
            hold_seconds=_scale_count(ex.hold_seconds, factor),
        )
        for ex in workout.exercises
    )
    return dataclasses.replace(
        workout,
        exercises=exercises,
        duration_min=max(1, _round_half_up(workout.duration_min * factor)),
    )


def append_from_pool(
    workout: CandidateWorkout, pool: tuple[PlannedExercise, ...], count: int
) -> CandidateWorkout:
    """Append the first ``count`` pool exercises not already in the workout."""
    present = {ex.name for ex in workout.exercises}
    added = [ex for ex in pool if ex.name not in present][:count]
    return dataclasses.replace(workout, exercises=workout.exercises + tuple(added))


def _raise_floors(exercise: PlannedExercise) -> PlannedExercise:
    return dataclasses.replace(
        exercise,
        sets=max(exercise.sets, MUSCLE_GAIN_MIN_SETS),
        reps=max(exercise.reps, MUSCLE_GAIN_MIN_REPS) if exercise.reps is not None else None,
        reps_max=(
            max(exercise.reps_max, MUSCLE_GAIN_MIN_REPS)
            if exercise.reps_max is not None
            else None
        ),
    )


class PlanAdaptor:
    """Adapts candidate workouts to the current recovery score and trend flags.

    Usage:
        adaptor = PlanAdaptor()
        result = adaptor.adapt(candidate, recovery_score, trend_flags, GoalType.FAT_LOSS)
    """

    def adapt(
        self,
        candidate: CandidateWorkout,
        recovery: RecoveryScore,
        flags: TrendFlags,
        goal: GoalType,
    ) -> AdaptedWorkout:
        """Apply every matching adaptation rule, in order.

        Args:
            candidate: The workout to adapt. Not modified.
            recovery: Today's recovery score.
            flags: Trend flags from recent workout history.
            goal: The user's training goal.

        Returns:
            AdaptedWorkout with the original, the adapted copy, the changelog,
            a ``" | "``-joined reason and the confidence.
        """
        workout = candidate
        changes: list[WorkoutChange] = []
        reasons: list[str] = []
        confidence = BASE_ADAPTATION_CONFIDENCE

        # Recovery band scaling (at most one applies)
        overall = recovery.overall
        if overall < RECOVERY_LOW_THRESHOLD:
            workout = scale_workout(workout, POOR_RECOVERY_SCALE)
            changes.append(WorkoutChange(
                ChangeType.INTENSITY, "Reduced intensity by 40% due to poor recovery"
            ))
            reasons.append("Poor recovery detected - prioritizing rest and recovery")
            confidence = POOR_RECOVERY_CONFIDENCE
        elif overall < RECOVERY_MODERATE_THRESHOLD:
            workout = scale_workout(workout, MODERATE_RECOVERY_SCALE)
            changes.append(WorkoutChange(
                ChangeType.INTENSITY, "Reduced intensity by 20% due to moderate recovery"
            ))
            reasons.append("Moderate recovery - slightly reduced intensity for safety")
            confidence = MODERATE_RECOVERY_CONFIDENCE
        elif overall > RECOVERY_HIGH_THRESHOLD:
            workout = scale_workout(workout, EXCELLENT_RECOVERY_SCALE)
            changes.append(WorkoutChange(
                ChangeType.INTENSITY, "Increased intensity by 10% due to excellent recovery"
            ))
            reasons.append("Excellent recovery - increased intensity for optimal gains")
            confidence = EXCELLENT_RECOVERY_CONFIDENCE

        if flags.strength_declining:
            workout = append_from_pool(workout, COMPOUND_LIFTS, ADDED_COMPOUND_LIFTS)
            changes.append(WorkoutChange(
                ChangeType.EXERCISES, "Added more compound strength exercises"
            ))
            reasons.append("Strength plateau detected - focusing on compound movements")

        if flags.endurance_declining:
            workout = append_from_pool(
                workout, CONDITIONING_EXERCISES, ADDED_CONDITIONING_EXERCISES
            )
            changes.append(WorkoutChange(
                ChangeType.EXERCISES, "Added more endurance-focused exercises"
            ))
            reasons.append("Endurance plateau detected - increasing cardio focus")

        # Unknown consistency (too little history) never simplifies
        if flags.consistency is not None and flags.consistency < LOW_CONSISTENCY_THRESHOLD:
            workout = dataclasses.replace(
                workout,
                exercises=workout.exercises[:SIMPLIFIED_MAX_EXERCISES],
                duration_min=min(workout.duration_min, SIMPLIFIED_MAX_DURATION_MIN),
            )
            changes.append(WorkoutChange(
                ChangeType.EXERCISES, "Simplified workout for better consistency"
            ))
            reasons.append("Low consistency - simplified for better adherence")

        if goal == GoalType.MUSCLE_GAIN:
            workout = dataclasses.replace(
                workout, exercises=tuple(_raise_floors(ex) for ex in workout.exercises)
            )
            changes.append(WorkoutChange(
                ChangeType.VOLUME, "Optimized for muscle growth - increased volume"
            ))
        elif goal == GoalType.FAT_LOSS:
            workout = append_from_pool(workout, CARDIO_FINISHERS, ADDED_CARDIO_FINISHERS)
            changes.append(WorkoutChange(
                ChangeType.EXERCISES, "Optimized for fat loss - added more cardio"
            ))
            if workout.duration_min < FAT_LOSS_MIN_DURATION_MIN:
                changes.append(WorkoutChange(
                    ChangeType.DURATION,
                    f"Extended session from {workout.duration_min} to "
                    f"{FAT_LOSS_MIN_DURATION_MIN} minutes for fat loss",
                ))
                workout = dataclasses.replace(workout, duration_min=FAT_LOSS_MIN_DURATION_MIN)

        logger.debug(
            "Adapted %r with %d change(s), confidence %.1f",
            candidate.name,
            len(changes),
            confidence,
        )

        return AdaptedWorkout(
            original=candidate,
            adapted=workout,
            changes=tuple(changes),
            reason=" | ".join(reasons) or DEFAULT_REASON,
            confidence=confidence,
        )
