"""Tests for PlateauWarningRule — frequency drop between training blocks."""

from __future__ import annotations

from datetime import date

from recovery_engine.engine import OptimizationEngine
from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.registry import RuleRegistry
from recovery_engine.rules.trend.plateau import PlateauWarningRule


class TestPlateauWarningRule:
    def setup_method(self) -> None:
        self.rule = PlateauWarningRule()

    def _workouts(self, workout_factory, days_ago: list[int]):
        return [workout_factory(d) for d in days_ago]

    def test_category(self) -> None:
        assert self.rule.category == InsightCategory.PROGRESSION

    def test_fires_when_last_week_collapses(self, workout_factory, context_factory) -> None:
        # Weeks 1-2: 4 sessions each; week 3: a single session
        days = [20, 18, 16, 14, 13, 11, 9, 7, 0]
        context = context_factory(workouts=self._workouts(workout_factory, days))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert insight.priority == InsightPriority.HIGH
        assert insight.action_required is True
        assert "75%" in insight.description
        assert "Recent frequency: 1.0/week" in insight.data_points
        assert "Previous frequency: 4.0/week" in insight.data_points
        assert len(insight.action_items) == 3

    def test_fires_on_first_day_of_third_week(self, workout_factory, male_profile) -> None:
        # Mon 2 Feb 2026 onwards: 4 + 4 sessions, then only Monday of week 3.
        # No as_of given, so the context is anchored on that Monday.
        offsets = [0, 1, 3, 5, 7, 8, 10, 12, 14]
        workouts = self._workouts(workout_factory, [27 - o for o in offsets])
        engine = OptimizationEngine(registry=RuleRegistry())
        context = engine.build_context(male_profile, workouts=workouts)
        assert context.as_of == date(2026, 2, 16)

        insight = self.rule.evaluate(context)
        assert insight is not None
        assert "75%" in insight.description
        assert insight.timeframe == "Last 3 weeks"

    def test_partial_first_week_counts_as_a_week(self, workout_factory, context_factory) -> None:
        # First session late in its week; three training weeks by as_of
        days = [15, 14, 13, 12, 11, 10, 9, 8, 0]
        context = context_factory(workouts=self._workouts(workout_factory, days))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert "Recent frequency: 1.0/week" in insight.data_points

    def test_three_week_blocks_with_long_history(self, workout_factory, context_factory) -> None:
        # Six weeks: 4/week for the older block, 2/week for the recent block
        older = [d for week in range(3, 6) for d in (7 * week, 7 * week + 2, 7 * week + 4, 7 * week + 6)]
        recent = [d for week in range(0, 3) for d in (7 * week + 1, 7 * week + 4)]
        context = context_factory(workouts=self._workouts(workout_factory, older + recent))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert "50%" in insight.description
        assert insight.timeframe == "Last 6 weeks"

    def test_steady_frequency_does_not_fire(self, workout_factory, context_factory) -> None:
        days = [d for week in range(6) for d in (7 * week + 1, 7 * week + 3, 7 * week + 5)]
        context = context_factory(workouts=self._workouts(workout_factory, days))
        assert self.rule.evaluate(context) is None

    def test_drop_at_threshold_does_not_fire(self, workout_factory, context_factory) -> None:
        # 4/week -> 3/week is exactly 25%
        days = [20, 18, 16, 14, 13, 11, 9, 8, 6, 4, 2]
        context = context_factory(workouts=self._workouts(workout_factory, days))
        assert self.rule.evaluate(context) is None

    def test_short_history_does_not_fire(self, workout_factory, context_factory) -> None:
        days = [13, 12, 11, 10, 0]
        context = context_factory(workouts=self._workouts(workout_factory, days))
        assert self.rule.evaluate(context) is None

    def test_no_workouts_is_not_applicable(self, context_factory) -> None:
        assert not self.rule.has_required_data(context_factory())
