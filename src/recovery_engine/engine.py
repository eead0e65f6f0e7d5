"""OptimizationEngine — the main orchestrator behind the daily optimization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from recovery_engine.adaptation.plan_adaptor import PlanAdaptor
from recovery_engine.math.aggregation import mean_or_none
from recovery_engine.math.nutrition import calculate_targets
from recovery_engine.math.performance import analyze_trend_flags
from recovery_engine.math.recovery import calculate_recovery_score
from recovery_engine.math.trends import analyze_trends
from recovery_engine.models.analysis_context import AnalysisContext
from recovery_engine.models.enums import (
    HIGH_PRIORITY_SCORE_PENALTY,
    OPPORTUNITY_IMPACT_THRESHOLD,
    InsightCategory,
    InsightPriority,
)
from recovery_engine.models.insight import (
    Insight,
    OptimizationReport,
    RuleResult,
    RuleStatus,
)
from recovery_engine.models.nutrition import NutritionTargets
from recovery_engine.models.records import (
    BiometricSample,
    NutritionRecord,
    ProgressRecord,
    SleepRecord,
    UserProfile,
    WorkoutRecord,
)
from recovery_engine.models.recovery import RecoveryScore
from recovery_engine.models.workout import AdaptedWorkout, CandidateWorkout
from recovery_engine.registry import RuleRegistry

logger = logging.getLogger(__name__)


def rank_insights(insights: Iterable[Insight]) -> list[Insight]:
    """Priority first (HIGH before LOW), then expected impact descending."""
    return sorted(insights, key=lambda i: (i.priority, -i.expected_impact))


def optimization_score(insights: Sequence[Insight]) -> int:
    """``round((mean confidence + max(0, 100 - 15 x high count)) / 2)``; 100 with no insights."""
    if not insights:
        return 100
    mean_confidence = mean_or_none(i.confidence for i in insights)
    high_count = sum(1 for i in insights if i.priority == InsightPriority.HIGH)
    priority_score = max(0, 100 - HIGH_PRIORITY_SCORE_PENALTY * high_count)
    return round((mean_confidence + priority_score) / 2)


def summary_recommendations(insights: Sequence[Insight]) -> list[str]:
    high = sum(1 for i in insights if i.priority == InsightPriority.HIGH)
    medium = sum(1 for i in insights if i.priority == InsightPriority.MEDIUM)
    recommendations: list[str] = []
    if high:
        recommendations.append(
            f"Focus on {high} high-priority optimizations for maximum impact"
        )
    if medium:
        recommendations.append(
            f"Consider {medium} medium-priority improvements for continued progress"
        )
    return recommendations


def _latest_day(
    sleep: Sequence[SleepRecord],
    workouts: Sequence[WorkoutRecord],
    nutrition: Sequence[NutritionRecord],
    progress: Sequence[ProgressRecord],
    biometrics: Sequence[BiometricSample],
) -> date | None:
    days = [r.day for r in (*sleep, *workouts, *nutrition, *progress)]
    days.extend(s.taken_at.date() for s in biometrics)
    return max(days) if days else None


class OptimizationEngine:
    """Runs the Recovery Scorer, the insight rules and the Plan Adaptor.

    Usage:
        engine = OptimizationEngine()
        context = engine.build_context(profile, sleep=..., workouts=...)
        report = engine.analyze(context)
        adapted = engine.adapt_workout(candidate, context)
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        adaptor: PlanAdaptor | None = None,
    ) -> None:
        self.registry = registry or RuleRegistry()
        self.adaptor = adaptor or PlanAdaptor()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    def build_context(
        self,
        profile: UserProfile,
        *,
        sleep: Sequence[SleepRecord] = (),
        workouts: Sequence[WorkoutRecord] = (),
        nutrition: Sequence[NutritionRecord] = (),
        progress: Sequence[ProgressRecord] = (),
        biometrics: Sequence[BiometricSample] = (),
        as_of: date | None = None,
    ) -> AnalysisContext:
        """Sort the histories, score recovery and freeze everything into a context.

        Args:
            profile: The user's profile.
            sleep, workouts, nutrition, progress, biometrics: Record histories
                in any order.
            as_of: Day that anchors every trailing window. Defaults to the
                most recent record's day, or today when there are no records.
                Records dated after an explicit ``as_of`` are left out.
        """
        sleep = sorted(sleep, key=lambda r: r.day)
        workouts = sorted(workouts, key=lambda r: r.day)
        nutrition = sorted(nutrition, key=lambda r: r.day)
        progress = sorted(progress, key=lambda r: r.day)
        biometrics = sorted(biometrics, key=lambda s: s.taken_at)

        if as_of is None:
            as_of = _latest_day(sleep, workouts, nutrition, progress, biometrics) or date.today()
        else:
            # Count-based windows (last 7 nights, last 10 sessions) must end at as_of
            sleep = [r for r in sleep if r.day <= as_of]
            workouts = [r for r in workouts if r.day <= as_of]
            nutrition = [r for r in nutrition if r.day <= as_of]
            progress = [r for r in progress if r.day <= as_of]
            biometrics = [s for s in biometrics if s.taken_at.date() <= as_of]

        return AnalysisContext(
            profile=profile,
            as_of=as_of,
            recovery=self.score_recovery(profile, sleep, workouts, as_of),
            sleep=tuple(sleep),
            workouts=tuple(workouts),
            nutrition=tuple(nutrition),
            progress=tuple(progress),
            biometrics=tuple(biometrics),
            trend_flags=analyze_trend_flags(workouts, as_of),
            trends=analyze_trends(workouts, nutrition, progress, as_of),
        )

    def score_recovery(
        self,
        profile: UserProfile | None,
        sleep: Sequence[SleepRecord],
        workouts: Sequence[WorkoutRecord] = (),
        as_of: date | None = None,
    ) -> RecoveryScore:
        return calculate_recovery_score(sleep, profile, workouts, as_of)

    def analyze(
        self,
        context: AnalysisContext,
        categories: Iterable[InsightCategory] | None = None,
    ) -> OptimizationReport:
        """Evaluate the registered rules and rank what they report.

        ``categories`` limits the pass to rules in those categories, e.g. a
        nutrition-only refresh after a meal is logged. A rule that raises is
        logged, recorded as FAILED and contributes no insight; the remaining
        rules still run.
        """
        rule_results: list[RuleResult] = []
        insights: list[Insight] = []

        for rule in self.registry.get_rules(categories):
            if not rule.has_required_data(context):
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.NOT_APPLICABLE,
                        explanation=f"Missing required data: {rule.required_data}",
                    )
                )
                continue

            try:
                insight = rule.evaluate(context)
            except Exception as exc:
                logger.warning("Rule %s failed: %s", rule.rule_id, exc)
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.FAILED,
                        explanation=f"{type(exc).__name__}: {exc}",
                    )
                )
                continue

            if insight is not None:
                logger.debug("Rule %s fired: %s", rule.rule_id, insight.title)
                insights.append(insight)
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.FIRED,
                        insight=insight,
                        explanation=insight.description,
                    )
                )
            else:
                rule_results.append(
                    RuleResult(
                        rule_id=rule.rule_id,
                        status=RuleStatus.SKIPPED,
                        explanation="Rule returned no insight.",
                    )
                )

        ranked = rank_insights(insights)
        return OptimizationReport(
            insights=tuple(ranked),
            optimization_score=optimization_score(ranked),
            risk_factors=tuple(
                i.title
                for i in ranked
                if i.priority == InsightPriority.HIGH and i.action_required
            ),
            opportunities=tuple(
                i.title for i in ranked if i.expected_impact > OPPORTUNITY_IMPACT_THRESHOLD
            ),
            recommendations=tuple(summary_recommendations(ranked)),
            rule_results=tuple(rule_results),
            trends=context.trends,
        )

    def adapt_workout(
        self, candidate: CandidateWorkout, context: AnalysisContext
    ) -> AdaptedWorkout:
        return self.adaptor.adapt(
            candidate, context.recovery, context.trend_flags, context.profile.goal
        )

    def nutrition_targets(self, profile: UserProfile) -> NutritionTargets:
        """Raises InvalidProfileError when the profile cannot support the formulas."""
        return calculate_targets(profile)
