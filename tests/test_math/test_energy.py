"""Tests for lean body mass, BMR and TDEE."""

from __future__ import annotations

import dataclasses

import pytest

from recovery_engine.exceptions import InvalidProfileError
from recovery_engine.math.energy import (
    basal_metabolic_rate,
    lean_body_mass,
    total_daily_energy_expenditure,
)
from recovery_engine.models.enums import ActivityLevel, BiologicalSex


class TestFormulas:
    def test_boer_male(self) -> None:
        assert lean_body_mass(80.0, 180.0, BiologicalSex.MALE) == pytest.approx(61.42)

    def test_boer_female(self) -> None:
        assert lean_body_mass(62.0, 168.0, BiologicalSex.FEMALE) == pytest.approx(46.788)

    def test_mifflin_male(self) -> None:
        assert basal_metabolic_rate(80.0, 180.0, 30, BiologicalSex.MALE) == pytest.approx(1780.0)

    def test_mifflin_female_is_166_lower(self) -> None:
        male = basal_metabolic_rate(70.0, 170.0, 40, BiologicalSex.MALE)
        female = basal_metabolic_rate(70.0, 170.0, 40, BiologicalSex.FEMALE)
        assert male - female == pytest.approx(166.0)


class TestTotalDailyEnergyExpenditure:
    def test_moderately_active_male(self, male_profile) -> None:
        assert total_daily_energy_expenditure(male_profile) == 2759

    @pytest.mark.parametrize(
        "level,multiplier",
        [
            (ActivityLevel.SEDENTARY, 1.2),
            (ActivityLevel.LIGHTLY_ACTIVE, 1.375),
            (ActivityLevel.VERY_ACTIVE, 1.725),
        ],
    )
    def test_activity_multipliers(self, male_profile, level, multiplier) -> None:
        profile = dataclasses.replace(male_profile, activity_level=level)
        assert total_daily_energy_expenditure(profile) == round(1780.0 * multiplier)

    def test_missing_weight_raises(self, male_profile) -> None:
        profile = dataclasses.replace(male_profile, weight_kg=None)
        with pytest.raises(InvalidProfileError) as excinfo:
            total_daily_energy_expenditure(profile)
        assert excinfo.value.missing_fields == ("weight_kg",)

    def test_zero_height_and_age_raise(self, male_profile) -> None:
        profile = dataclasses.replace(male_profile, height_cm=0, age=0)
        with pytest.raises(InvalidProfileError) as excinfo:
            total_daily_energy_expenditure(profile)
        assert set(excinfo.value.missing_fields) == {"age", "height_cm"}

    def test_missing_sex_raises(self, male_profile) -> None:
        profile = dataclasses.replace(male_profile, sex=None)
        with pytest.raises(InvalidProfileError, match="sex"):
            total_daily_energy_expenditure(profile)
