"""Insight rules, auto-discovered by the RuleRegistry."""
