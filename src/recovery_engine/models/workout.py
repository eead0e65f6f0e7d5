"""Candidate workouts and the Plan Adaptor output."""

from __future__ import annotations

from dataclasses import dataclass, field

from recovery_engine.models.enums import ChangeImpact, ChangeType, ExerciseCategory


@dataclass(frozen=True)
class PlannedExercise:
    """One exercise in a candidate workout.

    Rep-based exercises use ``reps`` (optionally ``reps_max`` for a range);
    timed exercises set ``hold_seconds`` and leave ``reps`` as None.
    """

    name: str
    sets: int
    reps: int | None = None
    reps_max: int | None = None
    hold_seconds: int | None = None
    rest_seconds: int = 90
    category: ExerciseCategory = ExerciseCategory.COMPOUND
    notes: str = ""

    @property
    def rep_label(self) -> str:
        if self.hold_seconds is not None:
            return f"{self.hold_seconds} seconds"
        if self.reps is None:
            return ""
        if self.reps_max is not None and self.reps_max != self.reps:
            return f"{self.reps}-{self.reps_max}"
        return str(self.reps)


@dataclass(frozen=True)
class CandidateWorkout:
    name: str
    duration_min: int
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    focus: str = ""


@dataclass(frozen=True)
class WorkoutChange:
    change_type: ChangeType
    description: str
    impact: ChangeImpact = ChangeImpact.POSITIVE


@dataclass(frozen=True)
class AdaptedWorkout:
    """The untouched original, the adapted copy, and the changelog between them."""

    original: CandidateWorkout
    adapted: CandidateWorkout
    changes: tuple[WorkoutChange, ...] = field(default_factory=tuple)
    reason: str = ""
    confidence: float = 0.8
