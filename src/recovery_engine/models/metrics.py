"""Aggregated metric summaries, metric trends and the trend flags consumed by the Plan Adaptor."""

from __future__ import annotations

from dataclasses import dataclass

from recovery_engine.models.enums import ChangeStatus, TrendDirection, TrendSignificance


@dataclass(frozen=True)
class WindowSummary:
    """Summary of one value series over a trailing window.

    ``percent_change`` is None unless ``change_status`` is OK.
    """

    average: float | None
    latest: float | None
    percent_change: float | None
    change_status: ChangeStatus
    count: int = 0

    @property
    def has_change(self) -> bool:
        return self.change_status == ChangeStatus.OK


@dataclass(frozen=True)
class PerformanceMetrics:
    """0-100 performance indicators derived from recent workouts."""

    strength: float
    endurance: float
    power: float
    consistency: float | None
    recovery: float


@dataclass(frozen=True)
class TrendFlags:
    strength_declining: bool = False
    endurance_declining: bool = False
    volume_declining: bool = False
    consistency: float | None = None


@dataclass(frozen=True)
class MetricTrend:
    """One metric compared between the trailing window and the window before it."""

    metric: str
    current: float
    previous: float
    percent_change: float
    direction: TrendDirection
    significance: TrendSignificance
