"""Tests for WorkoutTimingRule."""

from __future__ import annotations

from datetime import time

from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.rules.timing.workout_timing import WorkoutTimingRule


class TestWorkoutTimingRule:
    def setup_method(self) -> None:
        self.rule = WorkoutTimingRule()

    def test_category(self) -> None:
        assert self.rule.category == InsightCategory.TIMING

    def test_early_morning_fires(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i, start=time(7, 0)) for i in range(3)]
        insight = self.rule.evaluate(context_factory(workouts=workouts))
        assert insight is not None
        assert insight.priority == InsightPriority.LOW
        assert "Avg time: 7:00" in insight.data_points

    def test_afternoon_does_not_fire(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i, start=time(16, 30)) for i in range(3)]
        assert self.rule.evaluate(context_factory(workouts=workouts)) is None

    def test_untimed_workouts_are_not_applicable(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i) for i in range(5)]
        assert not self.rule.has_required_data(context_factory(workouts=workouts))
