"""Tests for WorkoutIntensityRule."""

from __future__ import annotations

from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.rules.workout.intensity import WorkoutIntensityRule


class TestWorkoutIntensityRule:
    def setup_method(self) -> None:
        self.rule = WorkoutIntensityRule()

    def test_category(self) -> None:
        assert self.rule.category == InsightCategory.WORKOUT

    def test_low_rpe_fires(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i, duration=50, rpe=6) for i in range(5)]
        insight = self.rule.evaluate(context_factory(workouts=workouts))
        assert insight is not None
        assert insight.priority == InsightPriority.HIGH
        assert insight.expected_impact == 85
        assert insight.data_points == ("RPE: 6.0", "Duration: 50min")

    def test_rpe_at_target_does_not_fire(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i, rpe=7) for i in range(5)]
        assert self.rule.evaluate(context_factory(workouts=workouts)) is None

    def test_only_last_ten_sessions_count(self, workout_factory, context_factory) -> None:
        old_easy = [workout_factory(20 + i, rpe=3) for i in range(10)]
        recent_hard = [workout_factory(i, rpe=8) for i in range(10)]
        assert self.rule.evaluate(context_factory(workouts=old_easy + recent_hard)) is None

    def test_needs_three_workouts(self, workout_factory, context_factory) -> None:
        workouts = [workout_factory(i, rpe=4) for i in range(2)]
        assert self.rule.evaluate(context_factory(workouts=workouts)) is None
