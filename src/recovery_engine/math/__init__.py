"""Pure calculations: aggregation, recovery scoring, energy and nutrition."""
