"""RECOVERY rule: declining heart-rate variability.

Compares the mean of the last seven HRV samples with the seven before.

Reference:
    Plews et al. (2013). Training adaptation and heart rate variability in
    elite endurance athletes. Sports Med 43(9):773-781.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import summarize_last
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    HRV_DECLINE_PCT,
    HRV_WINDOW_SAMPLES,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class HRVTrendRule(InsightRule):
    """Flags a drop of more than 10% in weekly mean HRV."""

    rule_id = "hrv_trend"
    version = "1.0.0"
    category = InsightCategory.RECOVERY
    required_data = ["hrv_samples"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        samples = sorted(context.hrv_samples, key=lambda s: s.taken_at)
        if len(samples) < HRV_WINDOW_SAMPLES:
            return None

        summary = summarize_last([s.hrv_ms for s in samples], HRV_WINDOW_SAMPLES)
        if not summary.has_change or summary.percent_change >= HRV_DECLINE_PCT:
            return None

        trend = summary.percent_change
        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Poor Recovery Detected",
            description=(
                f"HRV trend shows {trend:.1f}% decline, indicating insufficient recovery"
            ),
            recommendation="Reduce training intensity by 20% or add extra rest day",
            expected_impact=90,
            confidence=95,
            data_points=[
                f"HRV Trend: {trend:.1f}%",
                f"Recent HRV: {summary.average:.1f} ms",
            ],
            action_required=True,
            timeframe="Last 7 readings",
        )
