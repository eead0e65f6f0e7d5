"""Abstract base class for all insight rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import InsightCategory, InsightPriority
from recovery_engine.models.insight import Insight


class InsightRule(ABC):
    """Base class for every detector and metric analysis.

    Each rule encapsulates one check over the analysis context and returns
    at most one Insight. Rules are discovered automatically by the
    RuleRegistry and evaluated by the OptimizationEngine.

    Subclasses must define:
        rule_id: unique identifier (e.g. "plateau_warning")
        version: semantic version string
        category: InsightCategory the rule reports under
        required_data: AnalysisContext attribute names that must be present
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    category: InsightCategory
    required_data: list[str]

    def has_required_data(self, context: AnalysisContext) -> bool:
        """Check that all required context attributes are present and non-empty."""
        for field_name in self.required_data:
            value = getattr(context, field_name, None)
            if value is None:
                return False
            if isinstance(value, (list, tuple)) and len(value) == 0:
                return False
        return True

    @abstractmethod
    def evaluate(self, context: AnalysisContext) -> Insight | None:
        """Return an Insight if the rule has something to say, else None."""
        ...

    def make_insight(
        self,
        context: AnalysisContext,
        *,
        priority: InsightPriority,
        title: str,
        description: str,
        recommendation: str,
        expected_impact: int,
        confidence: int,
        data_points: list[str] | tuple[str, ...] = (),
        action_required: bool = False,
        action_items: list[str] | tuple[str, ...] = (),
        timeframe: str = "",
    ) -> Insight:
        """Build an Insight with a deterministic id derived from rule and day."""
        return Insight(
            id=f"{self.rule_id}_{context.as_of.isoformat()}",
            category=self.category,
            priority=priority,
            title=title,
            description=description,
            recommendation=recommendation,
            expected_impact=expected_impact,
            confidence=confidence,
            data_points=tuple(data_points),
            action_required=action_required,
            action_items=tuple(action_items),
            timeframe=timeframe,
        )
