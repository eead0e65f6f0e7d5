"""Insight Generator output — typed, ranked, explainable recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.models.metrics import MetricTrend


@dataclass(frozen=True)
class Insight:
    """A single structured recommendation.

    ``action_required`` is only set when the priority is HIGH or the rule's
    deviation exceeded its threshold. ``data_points`` carry literal values so
    a reader can check the numbers behind the recommendation.
    """

    id: str
    category: InsightCategory
    priority: InsightPriority
    title: str
    description: str
    recommendation: str
    expected_impact: int  # 0-100
    confidence: int  # 0-100
    data_points: tuple[str, ...] = field(default_factory=tuple)
    action_required: bool = False
    action_items: tuple[str, ...] = field(default_factory=tuple)
    timeframe: str = ""


class RuleStatus(IntEnum):
    """Whether a rule fired, was skipped, lacked data, or raised."""

    FIRED = auto()
    SKIPPED = auto()
    NOT_APPLICABLE = auto()
    FAILED = auto()


@dataclass(frozen=True)
class RuleResult:
    rule_id: str
    status: RuleStatus
    insight: Insight | None = None
    explanation: str = ""


@dataclass(frozen=True)
class OptimizationReport:
    """Ranked insights plus the roll-ups and metric trends a dashboard shows."""

    insights: tuple[Insight, ...]
    optimization_score: int
    risk_factors: tuple[str, ...] = field(default_factory=tuple)
    opportunities: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)
    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    trends: tuple[MetricTrend, ...] = field(default_factory=tuple)
