"""Nutrition target calculation from a user profile.

Coefficients follow ISSN / ACSM position stands as summarised by
Jäger et al. (2017), J Int Soc Sports Nutr 14:20 (protein) and
Kerksick et al. (2018), J Int Soc Sports Nutr 15:38 (carbohydrate).

Each coefficient is chosen by a bracket function that also returns the
reason for the choice, so the rationale shown to the user is produced by the
same branch that produced the number.
"""

from __future__ import annotations

from recovery_engine.math.energy import (
    lean_body_mass,
    total_daily_energy_expenditure,
)
from recovery_engine.models.enums import (
    BASE_CARB_FRACTION,
    CARB_GOAL_ADJUSTMENT,
    CARB_MAX_FRACTION,
    CARB_MIN_FRACTION,
    FIBER_G_PER_1000_KCAL,
    HIGH_BODY_FAT_PCT,
    KCAL_PER_G_CARB,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    MIN_FAT_G_PER_KG,
    MODERATE_BODY_FAT_PCT,
    MUSCLE_GOALS,
    PROTEIN_FAT_LOSS_GOAL_BONUS,
    PROTEIN_G_PER_KG_HIGH_BF,
    PROTEIN_G_PER_KG_LOW_BF,
    PROTEIN_G_PER_KG_MODERATE_BF,
    PROTEIN_MAX_G_PER_KG,
    PROTEIN_MUSCLE_GOAL_BONUS,
    PROTEIN_VERY_ACTIVE_BONUS,
    WATER_BONUS_LITERS,
    WATER_ML_PER_KG,
    ActivityLevel,
    GoalType,
)
from recovery_engine.models.nutrition import MacroBreakdown, NutritionTargets
from recovery_engine.models.records import UserProfile


def protein_per_kg(
    body_fat_pct: float | None,
    activity_level: ActivityLevel,
    goal: GoalType,
) -> tuple[float, list[str]]:
    """Select the protein coefficient in g/kg and the reasons behind it."""
    reasons: list[str] = []
    if body_fat_pct is None:
        g_per_kg = PROTEIN_G_PER_KG_MODERATE_BF
        reasons.append("body fat unknown, using the moderate bracket")
    elif body_fat_pct > HIGH_BODY_FAT_PCT:
        g_per_kg = PROTEIN_G_PER_KG_HIGH_BF
        reasons.append(f"body fat {body_fat_pct:g}% above {HIGH_BODY_FAT_PCT:g}%")
    elif body_fat_pct > MODERATE_BODY_FAT_PCT:
        g_per_kg = PROTEIN_G_PER_KG_MODERATE_BF
        reasons.append(
            f"body fat {body_fat_pct:g}% between {MODERATE_BODY_FAT_PCT:g}% and {HIGH_BODY_FAT_PCT:g}%"
        )
    else:
        g_per_kg = PROTEIN_G_PER_KG_LOW_BF
        reasons.append(f"body fat {body_fat_pct:g}% at or below {MODERATE_BODY_FAT_PCT:g}%")

    if activity_level == ActivityLevel.VERY_ACTIVE:
        g_per_kg += PROTEIN_VERY_ACTIVE_BONUS
        reasons.append(f"+{PROTEIN_VERY_ACTIVE_BONUS:g} g/kg for very active training")

    if goal in MUSCLE_GOALS:
        g_per_kg += PROTEIN_MUSCLE_GOAL_BONUS
        reasons.append(f"+{PROTEIN_MUSCLE_GOAL_BONUS:g} g/kg for muscle and power goals")
    elif goal == GoalType.FAT_LOSS:
        g_per_kg += PROTEIN_FAT_LOSS_GOAL_BONUS
        reasons.append(f"+{PROTEIN_FAT_LOSS_GOAL_BONUS:g} g/kg to preserve muscle during fat loss")

    if g_per_kg > PROTEIN_MAX_G_PER_KG:
        g_per_kg = PROTEIN_MAX_G_PER_KG
        reasons.append(f"capped at {PROTEIN_MAX_G_PER_KG:g} g/kg")

    return round(g_per_kg, 2), reasons


def carb_fraction(activity_level: ActivityLevel, goal: GoalType) -> tuple[float, list[str]]:
    """Select the share of calories from carbohydrate and the reasons behind it."""
    fraction = BASE_CARB_FRACTION[activity_level]
    reasons = [f"{fraction:.0%} base for {activity_level.value.lower()} activity"]

    if goal == GoalType.FAT_LOSS:
        fraction -= CARB_GOAL_ADJUSTMENT
        reasons.append(f"-{CARB_GOAL_ADJUSTMENT:.0%} for fat loss")
    elif goal == GoalType.MUSCLE_GAIN:
        fraction += CARB_GOAL_ADJUSTMENT
        reasons.append(f"+{CARB_GOAL_ADJUSTMENT:.0%} for muscle gain")

    clamped = max(CARB_MIN_FRACTION, min(CARB_MAX_FRACTION, fraction))
    if clamped != fraction:
        reasons.append(f"clamped to {CARB_MIN_FRACTION:.0%}-{CARB_MAX_FRACTION:.0%}")
    return round(clamped, 4), reasons


def fat_grams(weight_kg: float, tdee: float, protein_g: int, carbs_g: int) -> int:
    """Remaining calories as fat, with a 0.8 g/kg floor."""
    remaining = tdee - protein_g * KCAL_PER_G_PROTEIN - carbs_g * KCAL_PER_G_CARB
    floor = weight_kg * MIN_FAT_G_PER_KG * KCAL_PER_G_FAT
    return round(max(remaining, floor) / KCAL_PER_G_FAT)


def fiber_grams(tdee: float) -> int:
    return round(tdee / 1000 * FIBER_G_PER_1000_KCAL)


def water_liters(weight_kg: float, activity_level: ActivityLevel) -> float:
    liters = weight_kg * WATER_ML_PER_KG / 1000 + WATER_BONUS_LITERS.get(activity_level, 0.0)
    return round(liters, 1)


def calculate_targets(profile: UserProfile) -> NutritionTargets:
    """Calculate daily nutrition targets from the profile alone.

    Calories are recomputed from the final rounded macros, so
    ``calories == protein*4 + carbs*4 + fat*9`` always holds.

    Raises:
        InvalidProfileError: age, height, weight or sex missing or invalid.
    """
    tdee = total_daily_energy_expenditure(profile)
    weight = profile.weight_kg
    lbm = lean_body_mass(weight, profile.height_cm, profile.sex)  # type: ignore[arg-type]

    g_per_kg, protein_reasons = protein_per_kg(
        profile.body_fat_pct, profile.activity_level, profile.goal
    )
    protein = round(weight * g_per_kg)

    carb_pct, carb_reasons = carb_fraction(profile.activity_level, profile.goal)
    carbs = round(tdee * carb_pct / KCAL_PER_G_CARB)

    fat = fat_grams(weight, tdee, protein, carbs)
    fiber = fiber_grams(tdee)
    water = water_liters(weight, profile.activity_level)

    calories = protein * KCAL_PER_G_PROTEIN + carbs * KCAL_PER_G_CARB + fat * KCAL_PER_G_FAT
    breakdown = MacroBreakdown(
        protein_pct=round(protein * KCAL_PER_G_PROTEIN / calories * 100),
        carb_pct=round(carbs * KCAL_PER_G_CARB / calories * 100),
        fat_pct=round(fat * KCAL_PER_G_FAT / calories * 100),
    )

    rationale = [
        f"Energy: TDEE {tdee} kcal from Mifflin-St Jeor BMR x "
        f"{profile.activity_level.value} multiplier",
        f"Protein: {protein}g ({g_per_kg:g} g/kg) - " + "; ".join(protein_reasons),
        f"Carbs: {carbs}g ({carb_pct:.0%} of TDEE) - " + "; ".join(carb_reasons),
        f"Fat: {fat}g ({breakdown.fat_pct}% of calories) - remaining energy with a "
        f"{MIN_FAT_G_PER_KG:g} g/kg floor for hormone production",
        f"Fiber: {fiber}g ({FIBER_G_PER_1000_KCAL:g}g per 1000 kcal)",
        f"Water: {water} L ({WATER_ML_PER_KG:g} mL/kg"
        + (
            f" + {WATER_BONUS_LITERS[profile.activity_level]:g} L activity bonus)"
            if profile.activity_level in WATER_BONUS_LITERS
            else ")"
        ),
    ]

    return NutritionTargets(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        fiber_g=fiber,
        water_l=water,
        breakdown=breakdown,
        tdee=tdee,
        lean_body_mass_kg=round(lbm, 1),
        rationale=tuple(rationale),
    )
