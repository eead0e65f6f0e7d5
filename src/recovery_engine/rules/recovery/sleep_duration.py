"""RECOVERY rule: average sleep below seven hours.

Reference:
    Watson et al. (2015). Recommended amount of sleep for a healthy adult.
    Sleep 38(6):843-844.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_SLEEP_RECORDS_FOR_ANALYSIS,
    OPTIMAL_SLEEP_MIN_HOURS,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class SleepDurationRule(InsightRule):
    rule_id = "sleep_duration"
    version = "1.0.0"
    category = InsightCategory.RECOVERY
    required_data = ["sleep"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.sleep) < MIN_SLEEP_RECORDS_FOR_ANALYSIS:
            return None

        recent = context.sleep[-MIN_SLEEP_RECORDS_FOR_ANALYSIS:]
        avg_hours = mean_or_none(r.hours_slept for r in recent)
        avg_quality = mean_or_none(r.quality for r in recent)
        if avg_hours >= OPTIMAL_SLEEP_MIN_HOURS:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Increase Sleep Duration",
            description=f"Average sleep: {avg_hours:.1f}h, below optimal 7-9h",
            recommendation="Aim for 7-9 hours nightly. Consider earlier bedtime or better sleep hygiene",
            expected_impact=85,
            confidence=90,
            data_points=[f"Duration: {avg_hours:.1f}h", f"Quality: {avg_quality:.1f}/10"],
            action_required=True,
            timeframe="Last 7 nights",
        )
