"""Enumerations and threshold constants for the recovery engine.

Thresholds are grouped by the component that consumes them so a reader can
trace every number in an output back to the constant that produced it.
"""

from enum import Enum, IntEnum, auto


class ActivityLevel(str, Enum):
    """Self-reported activity level used for TDEE and macro selection."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"


class BiologicalSex(str, Enum):
    """Biological sex for body-composition formulas."""

    MALE = "male"
    FEMALE = "female"


class GoalType(str, Enum):
    """Closed set of training goals.

    Free-text physique labels are translated onto these variants at the
    input boundary by ``catalog.goal_labels.goal_from_label``.
    """

    MUSCLE_GAIN = "muscle_gain"
    POWER = "power"
    STRENGTH = "strength"
    FAT_LOSS = "fat_loss"
    WEIGHT_GAIN = "weight_gain"
    ENDURANCE = "endurance"
    ATHLETIC = "athletic"
    MAINTENANCE = "maintenance"


class InsightCategory(str, Enum):
    WORKOUT = "workout"
    NUTRITION = "nutrition"
    RECOVERY = "recovery"
    PROGRESSION = "progression"
    TIMING = "timing"


class InsightPriority(IntEnum):
    """Insight priority — lower value sorts first."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2


class IntensityBand(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DurationBand(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class ChangeType(str, Enum):
    """Kinds of change a Plan Adaptor changelog entry can describe."""

    INTENSITY = "intensity"
    DURATION = "duration"
    EXERCISES = "exercises"
    VOLUME = "volume"
    REST = "rest"


class ChangeImpact(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ChangeStatus(IntEnum):
    """Outcome of a percent-change computation."""

    OK = auto()
    NOT_ENOUGH_DATA = auto()
    UNDEFINED = auto()  # comparison average was zero


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class TrendSignificance(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExerciseCategory(str, Enum):
    COMPOUND = "compound"
    ISOLATION = "isolation"
    CARDIO = "cardio"
    FUNCTIONAL = "functional"


class RecordKind(str, Enum):
    """Record families served by the record store collaborator."""

    SLEEP = "sleep"
    WORKOUT = "workout"
    NUTRITION = "nutrition"
    PROGRESS = "progress"


# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------

LB_PER_KG = 2.20462
CM_PER_INCH = 2.54

# ---------------------------------------------------------------------------
# Recovery Scorer
# ---------------------------------------------------------------------------

NEUTRAL_SCORE = 50

SLEEP_DURATION_WEIGHT = 0.6
SLEEP_QUALITY_WEIGHT = 0.4

OPTIMAL_SLEEP_MIN_HOURS = 7.0
OPTIMAL_SLEEP_MAX_HOURS = 9.0
LOW_SLEEP_QUALITY = 6.0
HIGH_STRESS_LEVEL = 7.0
MIN_CAFFEINE_GAP_HOURS = 6.0

HIGH_TRAINING_LOAD = 50.0  # avg daily duration x RPE
LOW_TRAINING_LOAD = 20.0
HIGH_LOAD_READINESS_FACTOR = 0.8
LOW_LOAD_READINESS_FACTOR = 1.1
DEFAULT_WORKOUT_RPE = 5.0

RECOVERY_HIGH_THRESHOLD = 80
RECOVERY_MODERATE_THRESHOLD = 60
RECOVERY_LOW_THRESHOLD = 40

DEFAULT_SLEEP_TARGET_HOURS = 8.0

# ---------------------------------------------------------------------------
# Trend & Risk Analyzer
# ---------------------------------------------------------------------------

PLATEAU_BLOCK_WEEKS = 3
PLATEAU_MIN_HISTORY_WEEKS = 3
PLATEAU_FREQUENCY_DROP_PCT = 25.0

OVERTRAINING_MIN_WORKOUTS = 7
OVERTRAINING_MAX_WEEKLY_FREQUENCY = 5
OVERTRAINING_MAX_AVG_RPE = 8.0

GOAL_MIN_WORKOUTS = 4
GOAL_MIN_WEIGHT_GAP_KG = 1.0
GOAL_MIN_WEEKS = 1.0
GOAL_MAX_WEEKS = 52.0
KCAL_PER_KG_BODY_MASS = 7700.0

PROTEIN_TARGET_G_PER_KG = 2.0
PROTEIN_GAP_THRESHOLD_G = 20.0
MIN_NUTRITION_RECORDS = 7

MAX_MEAL_GAP_HOURS = 6.0
MEAL_TIMING_WINDOW_DAYS = 7

TREND_WINDOW_DAYS = 7
MIN_TREND_WORKOUTS = 3
MIN_TREND_NUTRITION_DAYS = 7
WEIGHT_SMOOTHING_DAYS = 7
# metric -> (direction, high, medium) thresholds on the absolute percent change
TREND_THRESHOLDS_PCT = {
    "Workout Frequency": (5.0, 20.0, 10.0),
    "Average Workout Duration": (5.0, 15.0, 8.0),
    "Average RPE": (5.0, 10.0, 5.0),
    "Daily Calorie Intake": (5.0, 15.0, 8.0),
    "Daily Protein Intake": (5.0, 20.0, 10.0),
    "Body Weight": (0.5, 2.0, 1.0),
}

# ---------------------------------------------------------------------------
# Insight Generator metric analyses
# ---------------------------------------------------------------------------

MIN_WORKOUTS_FOR_ANALYSIS = 3
INTENSITY_SAMPLE_SIZE = 10
TARGET_MIN_AVG_RPE = 7.0

TARGET_SETS_PER_EXERCISE = 3
TARGET_SESSIONS_PER_WEEK = 4
VOLUME_SHORTFALL_FRACTION = 0.8

MIN_SLEEP_RECORDS_FOR_ANALYSIS = 7
SLEEP_QUALITY_TARGET = 7.0

HRV_WINDOW_SAMPLES = 7
HRV_DECLINE_PCT = -10.0

RAPID_WEIGHT_CHANGE_KG_PER_WEEK = 0.7
MIN_PROGRESS_RECORDS = 4
MIN_WORKOUTS_FOR_PROGRESSION = 10

OPTIMAL_WORKOUT_START_HOUR = 14
OPTIMAL_WORKOUT_END_HOUR = 18

HIGH_PRIORITY_SCORE_PENALTY = 15
OPPORTUNITY_IMPACT_THRESHOLD = 70

# ---------------------------------------------------------------------------
# Nutrition Target Calculator
# ---------------------------------------------------------------------------

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}

BASE_CARB_FRACTION = {
    ActivityLevel.SEDENTARY: 0.35,
    ActivityLevel.LIGHTLY_ACTIVE: 0.40,
    ActivityLevel.MODERATELY_ACTIVE: 0.45,
    ActivityLevel.VERY_ACTIVE: 0.50,
}

WATER_BONUS_LITERS = {
    ActivityLevel.MODERATELY_ACTIVE: 0.5,
    ActivityLevel.VERY_ACTIVE: 1.0,
}

HIGH_BODY_FAT_PCT = 25.0
MODERATE_BODY_FAT_PCT = 15.0
PROTEIN_G_PER_KG_HIGH_BF = 1.6
PROTEIN_G_PER_KG_MODERATE_BF = 1.8
PROTEIN_G_PER_KG_LOW_BF = 2.0
PROTEIN_VERY_ACTIVE_BONUS = 0.2
PROTEIN_MUSCLE_GOAL_BONUS = 0.3
PROTEIN_FAT_LOSS_GOAL_BONUS = 0.2
PROTEIN_MAX_G_PER_KG = 2.6

CARB_GOAL_ADJUSTMENT = 0.05
CARB_MIN_FRACTION = 0.20
CARB_MAX_FRACTION = 0.65

MIN_FAT_G_PER_KG = 0.8
FIBER_G_PER_1000_KCAL = 14.0
WATER_ML_PER_KG = 35.0

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

# STRENGTH carries the "NFL Fullback" label
MUSCLE_GOALS = frozenset({GoalType.MUSCLE_GAIN, GoalType.POWER, GoalType.STRENGTH})

# ---------------------------------------------------------------------------
# Plan Adaptor
# ---------------------------------------------------------------------------

POOR_RECOVERY_SCALE = 0.6
MODERATE_RECOVERY_SCALE = 0.8
EXCELLENT_RECOVERY_SCALE = 1.1

BASE_ADAPTATION_CONFIDENCE = 0.8
POOR_RECOVERY_CONFIDENCE = 0.9
MODERATE_RECOVERY_CONFIDENCE = 0.8
EXCELLENT_RECOVERY_CONFIDENCE = 0.7

ADDED_COMPOUND_LIFTS = 2
ADDED_CONDITIONING_EXERCISES = 3
ADDED_CARDIO_FINISHERS = 2

LOW_CONSISTENCY_THRESHOLD = 60.0
SIMPLIFIED_MAX_EXERCISES = 4
SIMPLIFIED_MAX_DURATION_MIN = 30

MUSCLE_GAIN_MIN_SETS = 4
MUSCLE_GAIN_MIN_REPS = 8
FAT_LOSS_MIN_DURATION_MIN = 45

TREND_SAMPLE_SIZE = 3
STRENGTH_DECLINE_RPE_DROP = 0.5
ENDURANCE_DECLINE_DURATION_DROP_MIN = 10.0
PERFORMANCE_SAMPLE_SIZE = 10
