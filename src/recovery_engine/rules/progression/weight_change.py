"""PROGRESSION rule: body weight changing faster than 0.7 kg per week.

Reference:
    Helms et al. (2014). Evidence-based recommendations for natural
    bodybuilding contest preparation. J Int Soc Sports Nutr 11:20.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import linear_trend
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_PROGRESS_RECORDS,
    MIN_WORKOUTS_FOR_PROGRESSION,
    RAPID_WEIGHT_CHANGE_KG_PER_WEEK,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class RapidWeightChangeRule(InsightRule):
    """Fits a linear trend to the last four weigh-ins."""

    rule_id = "rapid_weight_change"
    version = "1.0.0"
    category = InsightCategory.PROGRESSION
    required_data = ["progress", "workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if (
            len(context.progress) < MIN_PROGRESS_RECORDS
            or len(context.workouts) < MIN_WORKOUTS_FOR_PROGRESSION
        ):
            return None

        recent = context.progress[-MIN_PROGRESS_RECORDS:]
        slope = linear_trend((p.day, p.weight_kg) for p in recent)
        if slope is None:
            return None

        weekly_change = slope * 7
        if abs(weekly_change) <= RAPID_WEIGHT_CHANGE_KG_PER_WEEK:
            return None

        gaining = weekly_change > 0
        period_weeks = (recent[-1].day - recent[0].day).days / 7
        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Rapid Weight Gain" if gaining else "Rapid Weight Loss",
            description=f"Weight changing {abs(weekly_change):.2f} kg/week",
            recommendation=(
                "Slow down weight gain to 0.25-0.5 kg/week to minimize fat gain"
                if gaining
                else "Slow down weight loss to 0.25-0.5 kg/week to preserve muscle mass"
            ),
            expected_impact=90,
            confidence=95,
            data_points=[
                f"Change: {weekly_change:+.2f} kg/week",
                f"Period: {period_weeks:.1f} weeks",
            ],
            action_required=True,
            timeframe=f"Last {period_weeks:.1f} weeks",
        )
