"""Goal templates — the default workout and macro table for each GoalType.

The Plan Adaptor never invents exercises: candidate workouts come from
``GOAL_TEMPLATES`` and anything it appends is drawn from the fixed pools
below, in order.
"""

from __future__ import annotations

from dataclasses import dataclass

from recovery_engine.models.enums import ExerciseCategory, GoalType
from recovery_engine.models.workout import CandidateWorkout, PlannedExercise


@dataclass(frozen=True)
class MacroMultipliers:
    """Template macros in grams per kg of body weight."""

    protein_g_per_kg: float
    carbs_g_per_kg: float
    fat_g_per_kg: float


@dataclass(frozen=True)
class GoalTemplate:
    """Complete template for one goal.

    Attributes:
        workout_name: Display name of the default session.
        duration_min: Planned session length in minutes.
        focus: Short description of the session's emphasis.
        exercises: Default exercise list, in execution order.
        macros: Per-kg macro multipliers for the goal's meal plan.
    """

    workout_name: str
    duration_min: int
    focus: str
    exercises: tuple[PlannedExercise, ...]
    macros: MacroMultipliers


def _lift(name: str, sets: int, reps: int, reps_max: int, rest: int, notes: str = "") -> PlannedExercise:
    return PlannedExercise(
        name=name,
        sets=sets,
        reps=reps,
        reps_max=reps_max,
        rest_seconds=rest,
        category=ExerciseCategory.COMPOUND,
        notes=notes,
    )


def _accessory(name: str, sets: int, reps: int, reps_max: int, rest: int = 90) -> PlannedExercise:
    return PlannedExercise(
        name=name,
        sets=sets,
        reps=reps,
        reps_max=reps_max,
        rest_seconds=rest,
        category=ExerciseCategory.ISOLATION,
    )


def _timed(
    name: str,
    sets: int,
    seconds: int,
    rest: int,
    category: ExerciseCategory = ExerciseCategory.CARDIO,
    notes: str = "",
) -> PlannedExercise:
    return PlannedExercise(
        name=name,
        sets=sets,
        hold_seconds=seconds,
        rest_seconds=rest,
        category=category,
        notes=notes,
    )


# ---------------------------------------------------------------------------
# Pools the Plan Adaptor appends from
# ---------------------------------------------------------------------------

COMPOUND_LIFTS: tuple[PlannedExercise, ...] = tuple(
    _lift(name, 4, 6, 8, 180, notes="Added for strength focus")
    for name in (
        "Barbell Squat",
        "Deadlift",
        "Bench Press",
        "Overhead Press",
        "Barbell Row",
        "Pull-ups",
        "Dips",
        "Lunges",
        "Bulgarian Split Squats",
    )
)

CONDITIONING_EXERCISES: tuple[PlannedExercise, ...] = tuple(
    _timed(name, 3, 30, 60, notes="Added for endurance focus")
    for name in (
        "Burpees",
        "Mountain Climbers",
        "Jumping Jacks",
        "High Knees",
        "Plank",
        "Russian Twists",
        "Jump Squats",
        "Push-ups",
    )
)

CARDIO_FINISHERS: tuple[PlannedExercise, ...] = tuple(
    _timed(name, 3, 45, 30, notes="Added for fat loss focus")
    for name in (
        "Burpees",
        "Mountain Climbers",
        "Jumping Jacks",
        "High Knees",
        "Jump Squats",
        "Push-ups",
        "Plank",
        "Russian Twists",
    )
)


# ---------------------------------------------------------------------------
# Template definitions for all goal types
# ---------------------------------------------------------------------------

_HYPERTROPHY = GoalTemplate(
    workout_name="Hypertrophy Training",
    duration_min=60,
    focus="Muscle growth through moderate loads and high volume",
    exercises=(
        _lift("Barbell Squat", 4, 8, 12, 120),
        _lift("Bench Press", 4, 8, 12, 120),
        _lift("Barbell Row", 4, 8, 12, 120),
        _lift("Overhead Press", 3, 8, 12, 90),
        _accessory("Romanian Deadlift", 3, 10, 12),
        _accessory("Bicep Curls", 3, 10, 15, 60),
    ),
    macros=MacroMultipliers(protein_g_per_kg=2.6, carbs_g_per_kg=8.8, fat_g_per_kg=1.5),
)

_FULLBACK_STRENGTH = GoalTemplate(
    workout_name="Fullback Strength Training",
    duration_min=75,
    focus="Explosive power and maximal strength",
    exercises=(
        _lift("Deadlift", 5, 3, 5, 300, notes="Explosive hip drive, neutral spine"),
        _lift("Squat", 4, 5, 8, 240, notes="Full depth, controlled descent"),
        _lift("Bench Press", 4, 5, 8, 240, notes="Powerful press, full range of motion"),
        _lift("Power Clean", 5, 3, 5, 300, notes="Triple extension, quick turnover"),
        _timed("Farmer's Walk", 3, 30, 180, ExerciseCategory.FUNCTIONAL),
        _timed("Sled Push", 4, 20, 180, ExerciseCategory.FUNCTIONAL),
    ),
    macros=MacroMultipliers(protein_g_per_kg=2.6, carbs_g_per_kg=8.8, fat_g_per_kg=1.5),
)

_POWER = GoalTemplate(
    workout_name="Power Training",
    duration_min=60,
    focus="Rate of force development",
    exercises=(
        _lift("Power Clean", 5, 3, 3, 240),
        _lift("Box Jumps", 4, 5, 5, 120),
        _lift("Push Press", 4, 3, 5, 180),
        _lift("Trap Bar Jump", 4, 5, 5, 120),
        _timed("Medicine Ball Slam", 3, 20, 90, ExerciseCategory.FUNCTIONAL),
    ),
    macros=MacroMultipliers(protein_g_per_kg=2.4, carbs_g_per_kg=6.6, fat_g_per_kg=1.3),
)

_FAT_LOSS = GoalTemplate(
    workout_name="Fat Loss Training",
    duration_min=45,
    focus="Calorie burn while maintaining muscle mass",
    exercises=(
        _timed("Circuit Training", 4, 45, 15, ExerciseCategory.FUNCTIONAL),
        _lift("Goblet Squat", 3, 12, 15, 60),
        _lift("Push-ups", 3, 10, 15, 60),
        _lift("Dumbbell Row", 3, 12, 15, 60),
        _timed("Jump Rope", 3, 60, 30),
    ),
    macros=MacroMultipliers(protein_g_per_kg=2.2, carbs_g_per_kg=4.4, fat_g_per_kg=1.1),
)

_WEIGHT_GAIN = GoalTemplate(
    workout_name="Muscle Building",
    duration_min=60,
    focus="Progressive overload with a calorie surplus",
    exercises=(
        _lift("Barbell Squat", 4, 6, 10, 150),
        _lift("Bench Press", 4, 6, 10, 150),
        _lift("Deadlift", 3, 5, 8, 180),
        _lift("Pull-ups", 3, 6, 10, 120),
        _accessory("Dumbbell Shoulder Press", 3, 8, 12),
    ),
    macros=MacroMultipliers(protein_g_per_kg=2.6, carbs_g_per_kg=11.0, fat_g_per_kg=1.8),
)

_ENDURANCE = GoalTemplate(
    workout_name="Endurance Training",
    duration_min=60,
    focus="Aerobic base and muscular endurance",
    exercises=(
        _timed("Steady-State Run", 1, 1800, 0),
        _accessory("Walking Lunges", 3, 15, 20, 60),
        _accessory("Step-ups", 3, 12, 15, 60),
        _timed("Plank", 3, 45, 45, ExerciseCategory.FUNCTIONAL),
    ),
    macros=MacroMultipliers(protein_g_per_kg=1.8, carbs_g_per_kg=7.7, fat_g_per_kg=1.1),
)

_MAINTENANCE = GoalTemplate(
    workout_name="General Fitness",
    duration_min=45,
    focus="Balanced training",
    exercises=(
        _lift("Goblet Squat", 3, 8, 12, 90),
        _lift("Push-ups", 3, 8, 15, 90),
        _lift("Dumbbell Row", 3, 8, 12, 90),
        _timed("Plank", 3, 30, 45, ExerciseCategory.FUNCTIONAL),
    ),
    macros=MacroMultipliers(protein_g_per_kg=1.8, carbs_g_per_kg=4.4, fat_g_per_kg=1.1),
)

GOAL_TEMPLATES: dict[GoalType, GoalTemplate] = {
    GoalType.MUSCLE_GAIN: _HYPERTROPHY,
    GoalType.POWER: _POWER,
    GoalType.STRENGTH: _FULLBACK_STRENGTH,
    GoalType.ATHLETIC: _FULLBACK_STRENGTH,
    GoalType.FAT_LOSS: _FAT_LOSS,
    GoalType.WEIGHT_GAIN: _WEIGHT_GAIN,
    GoalType.ENDURANCE: _ENDURANCE,
    GoalType.MAINTENANCE: _MAINTENANCE,
}


def candidate_workout(goal: GoalType) -> CandidateWorkout:
    """Default session for a goal, as the Plan Adaptor's starting point."""
    template = GOAL_TEMPLATES[goal]
    return CandidateWorkout(
        name=template.workout_name,
        duration_min=template.duration_min,
        exercises=template.exercises,
        focus=template.focus,
    )


def template_macros(goal: GoalType, weight_kg: float) -> tuple[int, int, int]:
    """Template ``(protein_g, carbs_g, fat_g)`` for a body weight."""
    macros = GOAL_TEMPLATES[goal].macros
    return (
        round(weight_kg * macros.protein_g_per_kg),
        round(weight_kg * macros.carbs_g_per_kg),
        round(weight_kg * macros.fat_g_per_kg),
    )
