"""NUTRITION rule: protein intake below 2 g/kg over the trailing week.

Reference:
    Jäger et al. (2017). ISSN position stand: protein and exercise.
    J Int Soc Sports Nutr 14:20.
"""

from __future__ import annotations

from recovery_engine.math.aggregation import daily_totals, summarize_window
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    MIN_NUTRITION_RECORDS,
    PROTEIN_GAP_THRESHOLD_G,
    PROTEIN_TARGET_G_PER_KG,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import Insight
from recovery_engine.rules.base import InsightRule


class ProteinGapRule(InsightRule):
    """Flags average daily protein more than 20 g below ``weight x 2``."""

    rule_id = "protein_gap"
    version = "1.0.0"
    category = InsightCategory.NUTRITION
    required_data = ["nutrition"]

    def evaluate(self, context: AnalysisContext) -> Insight | None:
        weight = context.profile.weight_kg
        if weight is None or len(context.nutrition) < MIN_NUTRITION_RECORDS:
            return None

        protein = daily_totals((n.day, n.protein_g) for n in context.nutrition)
        avg_protein = summarize_window(protein, 7, context.as_of).average
        if avg_protein is None:
            return None

        target = weight * PROTEIN_TARGET_G_PER_KG
        deficit = target - avg_protein
        if deficit <= PROTEIN_GAP_THRESHOLD_G:
            return None

        return self.make_insight(
            context,
            priority=InsightPriority.MEDIUM,
            title="Protein Intake Optimization",
            description=(
                f"Your protein intake is {round(deficit)}g below the recommended "
                f"{round(target)}g per day for your goals."
            ),
            recommendation="Add protein-rich foods to each meal",
            expected_impact=75,
            confidence=90,
            data_points=[
                f"Protein: {avg_protein:.1f}g/day",
                f"Target: {target:.1f}g/day",
                f"Deficit: {deficit:.1f}g",
            ],
            action_required=True,
            action_items=[
                "Add protein-rich foods to each meal",
                "Consider a protein shake post-workout",
                "Include lean meats, eggs, or legumes",
            ],
            timeframe="Last 7 days",
        )
