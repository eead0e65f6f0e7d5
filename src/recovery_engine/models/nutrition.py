"""Nutrition Target Calculator output."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MacroBreakdown:
    protein_pct: int
    carb_pct: int
    fat_pct: int


@dataclass(frozen=True)
class NutritionTargets:
    """Daily targets. ``calories`` equals protein*4 + carbs*4 + fat*9."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    fiber_g: int
    water_l: float
    breakdown: MacroBreakdown
    tdee: int
    lean_body_mass_kg: float
    rationale: tuple[str, ...] = field(default_factory=tuple)
