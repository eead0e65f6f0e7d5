"""RECOVERY rule: surfaces a low composite recovery score as an insight."""

from __future__ import annotations

from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    RECOVERY_LOW_THRESHOLD,
    RECOVERY_MODERATE_THRESHOLD,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class RecoveryReadinessRule(InsightRule):
    """Reports recovery below 60 (medium) or below 40 (high)."""

    rule_id = "recovery_readiness"
    version = "1.0.0"
    category = InsightCategory.RECOVERY
    required_data = ["sleep"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        score = context.recovery
        if score.overall >= RECOVERY_MODERATE_THRESHOLD:
            return None

        poor = score.overall < RECOVERY_LOW_THRESHOLD
        return self.make_insight(
            context,
            priority=InsightPriority.HIGH if poor else InsightPriority.MEDIUM,
            title="Poor Recovery Status" if poor else "Reduced Recovery Status",
            description=(
                f"Recovery score is {score.overall}/100 "
                f"(sleep {score.sleep}, stress {score.stress}, readiness {score.readiness})"
            ),
            recommendation=f"Today's focus: {score.workout_adjustment.focus.lower()}",
            expected_impact=85 if poor else 65,
            confidence=80,
            data_points=[
                f"Recovery: {score.overall}/100",
                f"Sleep score: {score.sleep}",
                f"Stress score: {score.stress}",
                f"Readiness: {score.readiness}",
                f"Training load: {score.training_load:.1f}",
            ],
            action_required=True,
            action_items=score.recommendations,
            timeframe="Today",
        )
