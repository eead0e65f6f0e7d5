"""Tests for HRVTrendRule — weekly mean HRV decline."""

from __future__ import annotations

from recovery_engine.models.enums import InsightPriority
from recovery_engine.rules.recovery.hrv_trend import HRVTrendRule


class TestHRVTrendRule:
    def setup_method(self) -> None:
        self.rule = HRVTrendRule()

    def _samples(self, hrv_factory, older: float, recent: float):
        return [hrv_factory(13 - i, older) for i in range(7)] + [
            hrv_factory(6 - i, recent) for i in range(7)
        ]

    def test_decline_fires(self, hrv_factory, context_factory) -> None:
        context = context_factory(biometrics=self._samples(hrv_factory, 60.0, 50.0))
        insight = self.rule.evaluate(context)
        assert insight is not None
        assert insight.priority == InsightPriority.HIGH
        assert insight.confidence == 95
        assert "HRV Trend: -16.7%" in insight.data_points

    def test_small_decline_does_not_fire(self, hrv_factory, context_factory) -> None:
        context = context_factory(biometrics=self._samples(hrv_factory, 60.0, 57.0))
        assert self.rule.evaluate(context) is None

    def test_one_week_of_samples_has_no_trend(self, hrv_factory, context_factory) -> None:
        context = context_factory(biometrics=[hrv_factory(i, 40.0) for i in range(7)])
        assert self.rule.evaluate(context) is None

    def test_samples_without_hrv_are_ignored(self, context_factory) -> None:
        assert not self.rule.has_required_data(context_factory())
