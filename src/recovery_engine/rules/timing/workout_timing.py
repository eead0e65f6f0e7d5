"""TIMING rule: workouts scheduled outside the afternoon performance peak.

Reference:
    Drust et al. (2005). Circadian rhythms in sports performance. Chronobiol
    Int 22(1):21-44.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_WORKOUTS_FOR_ANALYSIS,
    OPTIMAL_WORKOUT_END_HOUR,
    OPTIMAL_WORKOUT_START_HOUR,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class WorkoutTimingRule(InsightRule):
    rule_id = "workout_timing"
    version = "1.0.0"
    category = InsightCategory.TIMING
    required_data = ["timed_workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        timed = context.timed_workouts
        if len(timed) < MIN_WORKOUTS_FOR_ANALYSIS:
            return None

        avg_hour = mean_or_none(
            w.start_time.hour + w.start_time.minute / 60 for w in timed
        )
        if OPTIMAL_WORKOUT_START_HOUR <= avg_hour <= OPTIMAL_WORKOUT_END_HOUR:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.LOW,
            title="Optimize Workout Timing",
            description=f"Average workout time: {round(avg_hour)}:00, optimal is 2-6 PM",
            recommendation="Consider working out between 2-6 PM when strength and performance peak",
            expected_impact=40,
            confidence=70,
            data_points=[f"Avg time: {round(avg_hour)}:00", "Optimal: 2-6 PM"],
            action_required=False,
        )
