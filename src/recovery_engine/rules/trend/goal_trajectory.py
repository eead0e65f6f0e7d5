"""PROGRESSION rule: estimated weeks until the goal weight is reached.

The weekly weight change is estimated from the energy balance of the
trailing week, using 7700 kcal per kg of body mass (Wishnofsky, 1958).
Predictions outside 1-52 weeks, including a balance that moves away from
the goal, are not reported.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from recovery_engine.exceptions import InvalidProfileError
from recovery_engine.math.aggregation import daily_totals, mean_or_none
from recovery_engine.math.energy import total_daily_energy_expenditure
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    GOAL_MAX_WEEKS,
    GOAL_MIN_WEEKS,
    GOAL_MIN_WEIGHT_GAP_KG,
    GOAL_MIN_WORKOUTS,
    KCAL_PER_KG_BODY_MASS,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule

logger = logging.getLogger(__name__)


class GoalTrajectoryRule(InsightRule):
    """Predicts weeks-to-goal from the trailing week's calorie balance."""

    rule_id = "goal_trajectory"
    version = "1.0.0"
    category = InsightCategory.PROGRESSION
    required_data = ["goal_weight_kg", "workouts", "nutrition"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        if len(context.workouts) < GOAL_MIN_WORKOUTS:
            return None

        current_weight = (
            context.progress[-1].weight_kg if context.progress else context.profile.weight_kg
        )
        if current_weight is None:
            return None

        weight_gap = context.goal_weight_kg - current_weight  # type: ignore[operator]
        if abs(weight_gap) < GOAL_MIN_WEIGHT_GAP_KG:
            return None  # already at goal

        try:
            tdee = total_daily_energy_expenditure(context.profile)
        except InvalidProfileError as exc:
            logger.debug("Goal trajectory skipped: %s", exc)
            return None

        week_start = context.as_of - timedelta(days=7)
        calories = [
            kcal
            for day, kcal in daily_totals((n.day, n.calories) for n in context.nutrition)
            if week_start < day <= context.as_of
        ]
        avg_calories = mean_or_none(calories)
        if avg_calories is None:
            return None

        weekly_change = (avg_calories - tdee) * 7 / KCAL_PER_KG_BODY_MASS
        if weekly_change == 0:
            return None

        weeks_to_goal = weight_gap / weekly_change
        if not GOAL_MIN_WEEKS <= weeks_to_goal <= GOAL_MAX_WEEKS:
            return None

        confidence = min(0.9, max(0.6, 1 - (abs(weekly_change) - 0.5) / 2))
        weeks = round(weeks_to_goal)

        return self.make_insight(
            context,
            priority=InsightPriority.MEDIUM,
            title="Goal Achievement Prediction",
            description=(
                f"Based on your current intake, you're on track to reach your goal "
                f"weight in {weeks} weeks."
            ),
            recommendation="Keep your current training frequency and calorie intake",
            expected_impact=60,
            confidence=round(confidence * 100),
            data_points=[
                f"Current weight: {current_weight:.1f} kg",
                f"Goal weight: {context.goal_weight_kg:.1f} kg",
                f"Average intake: {avg_calories:.0f} kcal vs TDEE {tdee} kcal",
                f"Estimated change: {weekly_change:+.2f} kg/week",
            ],
            action_required=False,
            action_items=[
                "Maintain current workout frequency",
                "Keep tracking nutrition consistently",
                "Monitor progress weekly",
            ],
            timeframe=f"{weeks} weeks",
        )
