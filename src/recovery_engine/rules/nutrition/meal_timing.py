"""NUTRITION rule: long gaps between meals over the trailing week.

Gaps are measured between consecutive timed meals on the same day, so the
overnight fast never counts as a gap.

Reference:
    Areta et al. (2013). Timing and distribution of protein ingestion during
    prolonged recovery from resistance exercise alters myofibrillar protein
    synthesis. J Physiol 591(9):2319-2331.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

import pandas as pd

from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MAX_MEAL_GAP_HOURS,
    MEAL_TIMING_WINDOW_DAYS,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.models.records import NutritionRecord
from recovery_engine.rules.base import InsightRule


def same_day_meal_gaps(meals: Iterable[NutritionRecord]) -> list[float]:
    """Hours between consecutive timed meals, computed within each day."""
    stamps = pd.Series(
        sorted(
            datetime.combine(m.day, m.meal_time) for m in meals if m.meal_time is not None
        ),
        dtype="datetime64[ns]",
    )
    if stamps.empty:
        return []
    gaps = stamps.groupby(stamps.dt.date).diff().dropna()
    return [float(h) for h in gaps.dt.total_seconds() / 3600]


class MealTimingRule(InsightRule):
    """Suggests eating every 3-4 hours when meals are more than 6 hours apart."""

    rule_id = "meal_timing"
    version = "1.0.0"
    category = InsightCategory.NUTRITION
    required_data = ["timed_meals"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        week_start = context.as_of - timedelta(days=MEAL_TIMING_WINDOW_DAYS)
        meals = [m for m in context.timed_meals if week_start < m.day <= context.as_of]
        gaps = same_day_meal_gaps(meals)
        if not gaps:
            return None  # never more than one timed meal on a day

        avg_gap = sum(gaps) / len(gaps)
        if avg_gap <= MAX_MEAL_GAP_HOURS:
            return None

        meals_per_day = len(meals) / len({m.day for m in meals})
        return self.make_insight(
            context,
            priority=InsightPriority.MEDIUM,
            title="Optimize Meal Timing",
            description=f"Average gap between meals: {avg_gap:.1f} hours",
            recommendation=(
                "Eat every 3-4 hours to maintain stable blood sugar and protein synthesis"
            ),
            expected_impact=60,
            confidence=80,
            data_points=[f"Meal gaps: {avg_gap:.1f}h", f"Meals/day: {meals_per_day:.1f}"],
            action_required=False,
            timeframe="Last 7 days",
        )
