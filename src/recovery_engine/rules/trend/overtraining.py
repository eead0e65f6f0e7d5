"""RECOVERY rule: overtraining risk from high frequency combined with high RPE.

Reference:
    Meeusen et al. (2013). Prevention, diagnosis, and treatment of the
    overtraining syndrome. Med Sci Sports Exerc 45(1):186-205.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import summarize_window
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    OVERTRAINING_MAX_AVG_RPE,
    OVERTRAINING_MAX_WEEKLY_FREQUENCY,
    OVERTRAINING_MIN_WORKOUTS,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class OvertrainingRiskRule(InsightRule):
    """Flags more than 5 sessions in the last week at an average RPE above 8."""

    rule_id = "overtraining_risk"
    version = "1.0.0"
    category = InsightCategory.RECOVERY
    required_data = ["workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.workouts) < OVERTRAINING_MIN_WORKOUTS:
            return None

        last_week = summarize_window(
            [(w.day, w.effective_rpe) for w in context.workouts], 7, context.as_of
        )
        frequency = last_week.count
        avg_rpe = last_week.average

        if avg_rpe is None:
            return None
        if frequency <= OVERTRAINING_MAX_WEEKLY_FREQUENCY or avg_rpe <= OVERTRAINING_MAX_AVG_RPE:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Overtraining Risk Detected",
            description=(
                f"You're working out {frequency} times per week with an average RPE "
                f"of {avg_rpe:.1f}. Consider adding rest days."
            ),
            recommendation="Add 1-2 rest days this week and keep sessions at RPE 6-7",
            expected_impact=90,
            confidence=75,
            data_points=[
                f"Sessions last 7 days: {frequency}",
                f"Average RPE: {avg_rpe:.1f}",
            ],
            action_required=True,
            action_items=[
                "Add 1-2 rest days this week",
                "Reduce workout intensity (RPE 6-7)",
                "Focus on recovery and sleep",
            ],
            timeframe="Current week",
        )
