"""RECOVERY rule: average subjective sleep quality below 7/10."""

from __future__ import annotations

from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_SLEEP_RECORDS_FOR_ANALYSIS,
    SLEEP_QUALITY_TARGET,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class SleepQualityRule(InsightRule):
    rule_id = "sleep_quality"
    version = "1.0.0"
    category = InsightCategory.RECOVERY
    required_data = ["sleep"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.sleep) < MIN_SLEEP_RECORDS_FOR_ANALYSIS:
            return None

        recent = context.sleep[-MIN_SLEEP_RECORDS_FOR_ANALYSIS:]
        avg_quality = mean_or_none(r.quality for r in recent)
        avg_hours = mean_or_none(r.hours_slept for r in recent)
        if avg_quality >= SLEEP_QUALITY_TARGET:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.MEDIUM,
            title="Improve Sleep Quality",
            description=f"Sleep quality: {avg_quality:.1f}/10, below optimal 8+",
            recommendation=(
                "Optimize sleep environment: cooler room, no screens 1h before bed, "
                "consistent schedule"
            ),
            expected_impact=70,
            confidence=85,
            data_points=[f"Quality: {avg_quality:.1f}/10", f"Duration: {avg_hours:.1f}h"],
            action_required=False,
            timeframe="Last 7 nights",
        )
