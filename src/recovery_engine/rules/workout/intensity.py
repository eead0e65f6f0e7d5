"""WORKOUT rule: session intensity below the productive RPE range.

Reference:
    Helms et al. (2016). Application of the repetitions in reserve-based
    rating of perceived exertion scale for resistance training. Strength
    Cond J 38(4):42-49.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    INTENSITY_SAMPLE_SIZE,
    MIN_WORKOUTS_FOR_ANALYSIS,
    TARGET_MIN_AVG_RPE,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class WorkoutIntensityRule(InsightRule):
    """Recommends progressive overload when the average RPE is below 7."""

    rule_id = "workout_intensity"
    version = "1.0.0"
    category = InsightCategory.WORKOUT
    required_data = ["workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.workouts) < MIN_WORKOUTS_FOR_ANALYSIS:
            return None

        recent = context.workouts[-INTENSITY_SAMPLE_SIZE:]
        avg_rpe = mean_or_none(w.effective_rpe for w in recent)
        avg_duration = mean_or_none(w.duration_min for w in recent)
        if avg_rpe is None or avg_rpe >= TARGET_MIN_AVG_RPE:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Increase Training Intensity",
            description=f"Average RPE is {avg_rpe:.1f}, below optimal range of 7-9",
            recommendation="Progressive overload: increase weight by 2.5-5% or add 1-2 reps per set",
            expected_impact=85,
            confidence=90,
            data_points=[f"RPE: {avg_rpe:.1f}", f"Duration: {avg_duration:.0f}min"],
            action_required=True,
        )
