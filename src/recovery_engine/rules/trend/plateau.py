"""PROGRESSION rule: plateau warning from a drop in weekly workout frequency.

Training weeks are counted from the first workout, so the week holding
``as_of`` is the latest one even when only a day of it has passed. With at
least six training weeks the last three are compared with the three before
them; with three to five weeks the latest week is compared against the
earlier weeks.
"""

from __future__ import annotations

from collections import Counter

from recovery_engine.math.aggregation import percent_change
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    PLATEAU_BLOCK_WEEKS,
    PLATEAU_FREQUENCY_DROP_PCT,
    PLATEAU_MIN_HISTORY_WEEKS,
    ChangeStatus,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class PlateauWarningRule(InsightRule):
    """Flags a plateau risk when weekly workout frequency drops by more than 25%."""

    rule_id = "plateau_warning"
    version = "1.1.0"
    category = InsightCategory.PROGRESSION
    required_data = ["workouts"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        days = [w.day for w in context.workouts if w.day <= context.as_of]
        if not days:
            return None

        first_day = min(days)
        # Week 0 starts on the first workout; the week holding as_of is the last
        history_weeks = (context.as_of - first_day).days // 7 + 1
        if history_weeks < PLATEAU_MIN_HISTORY_WEEKS:
            return None

        if history_weeks >= 2 * PLATEAU_BLOCK_WEEKS:
            recent_weeks = older_weeks = PLATEAU_BLOCK_WEEKS
        else:
            recent_weeks, older_weeks = 1, history_weeks - 1

        sessions_per_week = Counter((day - first_day).days // 7 for day in days)
        recent_start = history_weeks - recent_weeks
        older_start = recent_start - older_weeks

        recent_frequency = (
            sum(sessions_per_week[w] for w in range(recent_start, history_weeks)) / recent_weeks
        )
        older_frequency = (
            sum(sessions_per_week[w] for w in range(older_start, recent_start)) / older_weeks
        )

        change, status = percent_change(recent_frequency, older_frequency)
        if status != ChangeStatus.OK:
            return None  # no baseline frequency to compare against

        frequency_drop = -change  # type: ignore[operator]
        if frequency_drop <= PLATEAU_FREQUENCY_DROP_PCT:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.HIGH,
            title="Workout Frequency Drop Detected",
            description=(
                f"Your workout frequency has decreased by {round(frequency_drop)}% "
                f"in the last {recent_weeks} week(s). This may lead to a plateau."
            ),
            recommendation="Increase workout frequency to 3-4 times per week",
            expected_impact=80,
            confidence=80,
            data_points=[
                f"Recent frequency: {recent_frequency:.1f}/week",
                f"Previous frequency: {older_frequency:.1f}/week",
                f"Frequency drop: {frequency_drop:.1f}%",
            ],
            action_required=True,
            action_items=[
                "Increase workout frequency to 3-4 times per week",
                "Try new exercises to break monotony",
                "Focus on progressive overload",
            ],
            timeframe=f"Last {recent_weeks + older_weeks} weeks",
        )
