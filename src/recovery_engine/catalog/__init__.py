"""Goal template catalog: candidate workouts, macro multipliers and label translation."""

from recovery_engine.catalog.goal_labels import goal_from_label
from recovery_engine.catalog.templates import (
    CARDIO_FINISHERS,
    COMPOUND_LIFTS,
    CONDITIONING_EXERCISES,
    GOAL_TEMPLATES,
    GoalTemplate,
    MacroMultipliers,
    candidate_workout,
    template_macros,
)

__all__ = [
    "CARDIO_FINISHERS",
    "COMPOUND_LIFTS",
    "CONDITIONING_EXERCISES",
    "GOAL_TEMPLATES",
    "GoalTemplate",
    "MacroMultipliers",
    "candidate_workout",
    "goal_from_label",
    "template_macros",
]
