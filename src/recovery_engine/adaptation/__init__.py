"""Plan Adaptor — rewrites a candidate workout for today's recovery and trends."""

from recovery_engine.adaptation.plan_adaptor import PlanAdaptor

__all__ = ["PlanAdaptor"]
