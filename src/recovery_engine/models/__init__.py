"""Data models for the recovery engine."""

from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    ActivityLevel,
    BiologicalSex,
    ChangeImpact,
    ChangeStatus,
    ChangeType,
    DurationBand,
    ExerciseCategory,
    GoalType,
    InsightCategory,
    InsightPriority,
    IntensityBand,
    RecordKind,
)
from recovery_engine.models.insight import (
    Insight,
    OptimizationReport,
    RuleResult,
    RuleStatus,
)
from recovery_engine.models.metrics import PerformanceMetrics, TrendFlags, WindowSummary
from recovery_engine.models.nutrition import MacroBreakdown, NutritionTargets
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
from recovery_engine.models.recovery import RecoveryScore, WorkoutAdjustment
from recovery_engine.models.workout import (
    AdaptedWorkout,
    CandidateWorkout,
    PlannedExercise,
    WorkoutChange,
)

__all__ = [
    "ActivityLevel",
    "AdaptedWorkout",
    "AnalysisContext",
    "BiologicalSex",
    "BiometricSample",
    "CandidateWorkout",
    "ChangeImpact",
    "ChangeStatus",
    "ChangeType",
    "DurationBand",
    "ExerciseCategory",
    "ExerciseLog",
    "GoalType",
    "Insight",
    "InsightCategory",
    "InsightPriority",
    "IntensityBand",
    "MacroBreakdown",
    "NutritionRecord",
    "NutritionTargets",
    "OptimizationReport",
    "PerformanceMetrics",
    "PlannedExercise",
    "ProgressRecord",
    "RecordKind",
    "RecoveryScore",
    "RuleResult",
    "RuleStatus",
    "SetLog",
    "SleepRecord",
    "TrendFlags",
    "UserProfile",
    "WindowSummary",
    "WorkoutAdjustment",
    "WorkoutChange",
    "WorkoutRecord",
]
