"""Body composition and energy expenditure.

References:
    Boer (1984). Estimated lean body mass as an index for normalization of
    body fluid volumes in humans. Am J Physiol 247(4 Pt 2):F632-F636.

    Mifflin et al. (1990). A new predictive equation for resting energy
    expenditure in healthy individuals. Am J Clin Nutr 51(2):241-247.
"""

from __future__ import annotations

from recovery_engine.exceptions import InvalidProfileError
from recovery_engine.models.enums import ACTIVITY_MULTIPLIERS, BiologicalSex
from recovery_engine.models.records import UserProfile


def validate_energy_profile(profile: UserProfile) -> None:
    """Raise InvalidProfileError unless age, height, weight and sex are usable."""
    missing = [
        name
        for name in ("age", "height_cm", "weight_kg")
        if getattr(profile, name) is None or getattr(profile, name) <= 0
    ]
    if profile.sex is None:
        missing.append("sex")
    if missing:
        raise InvalidProfileError(missing)


def lean_body_mass(weight_kg: float, height_cm: float, sex: BiologicalSex) -> float:
    """Boer formula estimate of lean body mass in kg."""
    if sex == BiologicalSex.MALE:
        return 0.407 * weight_kg + 0.267 * height_cm - 19.2
    return 0.252 * weight_kg + 0.473 * height_cm - 48.3


def basal_metabolic_rate(
    weight_kg: float, height_cm: float, age: int, sex: BiologicalSex
) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if sex == BiologicalSex.MALE else base - 161


def total_daily_energy_expenditure(profile: UserProfile) -> int:
    """BMR x activity multiplier, rounded to whole kcal.

    Raises:
        InvalidProfileError: if the profile cannot support the formula.
    """
    validate_energy_profile(profile)
    bmr = basal_metabolic_rate(
        profile.weight_kg, profile.height_cm, profile.age, profile.sex  # type: ignore[arg-type]
    )
    return round(bmr * ACTIVITY_MULTIPLIERS[profile.activity_level])
