"""Recovery Scorer output."""

from __future__ import annotations

from dataclasses import dataclass, field

from recovery_engine.models.enums import DurationBand, IntensityBand


@dataclass(frozen=True)
class WorkoutAdjustment:
    intensity: IntensityBand
    duration: DurationBand
    focus: str


@dataclass(frozen=True)
class RecoveryScore:
    """Composite recovery score with its sub-scores.

    ``overall`` is always ``round(mean(sleep, stress, readiness))`` and every
    score lies in [0, 100].
    """

    overall: int
    sleep: int
    stress: int
    readiness: int
    workout_adjustment: WorkoutAdjustment
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    training_load: float = 0.0
