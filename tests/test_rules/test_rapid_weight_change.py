"""Tests for RapidWeightChangeRule."""

from __future__ import annotations

from recovery_engine.models.enums import InsightCategory
from recovery_engine.rules.progression.weight_change import RapidWeightChangeRule


class TestRapidWeightChangeRule:
    def setup_method(self) -> None:
        self.rule = RapidWeightChangeRule()

    def _context(self, context_factory, workout_factory, progress_factory, weights):
        return context_factory(
            workouts=[workout_factory(i) for i in range(10)],
            progress=[progress_factory(d, w) for d, w in zip((21, 14, 7, 0), weights)],
        )

    def test_category(self) -> None:
        assert self.rule.category == InsightCategory.PROGRESSION

    def test_fast_loss_fires(self, context_factory, workout_factory, progress_factory) -> None:
        context = self._context(context_factory, workout_factory, progress_factory, (80, 79, 78, 77))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert insight.title == "Rapid Weight Loss"
        assert "Change: -1.00 kg/week" in insight.data_points

    def test_fast_gain_fires(self, context_factory, workout_factory, progress_factory) -> None:
        context = self._context(context_factory, workout_factory, progress_factory, (70, 71, 72, 73))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert insight.title == "Rapid Weight Gain"

    def test_moderate_change_does_not_fire(
        self, context_factory, workout_factory, progress_factory
    ) -> None:
        context = self._context(
            context_factory, workout_factory, progress_factory, (80, 79.5, 79, 78.5)
        )
        assert self.rule.evaluate(context) is None

    def test_needs_ten_workouts(self, context_factory, workout_factory, progress_factory) -> None:
        context = context_factory(
            workouts=[workout_factory(i) for i in range(5)],
            progress=[progress_factory(d, w) for d, w in zip((21, 14, 7, 0), (80, 79, 78, 77))],
        )
        assert self.rule.evaluate(context) is None
