"""Tests for ProteinGapRule — trailing-week protein against 2 g/kg."""

from __future__ import annotations

from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.rules.trend.protein_gap import ProteinGapRule


class TestProteinGapRule:
    def setup_method(self) -> None:
        self.rule = ProteinGapRule()

    def test_category(self) -> None:
        assert self.rule.category == InsightCategory.NUTRITION

    def test_fires_on_large_deficit(self, nutrition_factory, context_factory) -> None:
        # 80 kg -> 160 g target; 120 g eaten
        nutrition = [nutrition_factory(i, protein=120) for i in range(7)]
        insight = self.rule.evaluate(context_factory(nutrition=nutrition))
        assert insight is not None
        assert insight.priority == InsightPriority.MEDIUM
        assert insight.action_required is True
        assert "40g below" in insight.description
        assert "Target: 160.0g/day" in insight.data_points

    def test_small_deficit_does_not_fire(self, nutrition_factory, context_factory) -> None:
        nutrition = [nutrition_factory(i, protein=145) for i in range(7)]
        assert self.rule.evaluate(context_factory(nutrition=nutrition)) is None

    def test_meals_are_summed_per_day(self, nutrition_factory, context_factory) -> None:
        # Two 70 g meals a day -> 140 g, a 20 g deficit, which is not more than 20
        nutrition = [nutrition_factory(i, protein=70) for i in range(7) for _ in range(2)]
        assert self.rule.evaluate(context_factory(nutrition=nutrition)) is None

    def test_requires_seven_records(self, nutrition_factory, context_factory) -> None:
        nutrition = [nutrition_factory(i, protein=50) for i in range(6)]
        assert self.rule.evaluate(context_factory(nutrition=nutrition)) is None

    def test_only_trailing_week_counts(self, nutrition_factory, context_factory) -> None:
        old_low = [nutrition_factory(10 + i, protein=40) for i in range(7)]
        recent_ok = [nutrition_factory(i, protein=155) for i in range(3)]
        assert self.rule.evaluate(context_factory(nutrition=old_low + recent_ok)) is None
