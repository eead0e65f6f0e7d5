"""WORKOUT rule: weekly set volume below target.

The weekly target is ``exercises x 3 sets x 4 sessions`` for the exercise
count of the most recent workout (Schoenfeld et al., 2017, J Sports Sci
35(11):1073-1082).
"""

from __future__ import annotations

from datetime import timedelta

from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_WORKOUTS_FOR_ANALYSIS,
    TARGET_SESSIONS_PER_WEEK,
    TARGET_SETS_PER_EXERCISE,
    VOLUME_SHORTFALL_FRACTION,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


def weekly_volume_target(exercise_count: int) -> int:
    return exercise_count * TARGET_SETS_PER_EXERCISE * TARGET_SESSIONS_PER_WEEK


class TrainingVolumeRule(InsightRule):
    """Flags weekly sets below 80% of the computed target."""

    rule_id = "training_volume"
    version = "1.0.0"
    category = InsightCategory.WORKOUT
    required_data = ["workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.workouts) < MIN_WORKOUTS_FOR_ANALYSIS:
            return None

        target = weekly_volume_target(len(context.workouts[-1].exercises))
        if target == 0:
            return None  # no structured exercises logged

        week_start = context.as_of - timedelta(days=7)
        weekly_sets = sum(
            w.total_sets for w in context.workouts if week_start < w.day <= context.as_of
        )
        if weekly_sets >= target * VOLUME_SHORTFALL_FRACTION:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.MEDIUM,
            title="Increase Training Volume",
            description=(
                f"Current weekly volume is {weekly_sets} sets, below target of {target}"
            ),
            recommendation="Add 1-2 sets per exercise or include additional exercises",
            expected_impact=70,
            confidence=85,
            data_points=[f"Volume: {weekly_sets} sets", f"Target: {target} sets"],
            action_required=True,
        )
