"""Daily calorie and macro target calculations.

All functions are pure. Values are returned unrounded; formatting is left to
the caller.
"""

from datetime import date
from typing import cast

from diet_tracker.domain.nutrition import (
    CalculationResult,
    InsufficientData,
    MacroTarget,
)
from diet_tracker.domain.profiles import (
    DEFAULT_PROTEIN_PER_KG,
    ActivityLevel,
    Gender,
    Goal,
    GoalType,
    Profile,
)

LOSE_OFFSET_KCAL = 500.0
GAIN_SURPLUS_KCAL = 300.0

KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARBS = 4.0
KCAL_PER_G_FAT = 9.0
CARBS_ENERGY_SHARE = 0.5
FAT_ENERGY_SHARE = 0.5

_ACTIVITY_FACTORS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}


def age(birth_date: date, as_of: date | None = None) -> int:
    """Return completed years between birth_date and as_of (default today)."""
    reference = as_of or date.today()
    years = reference.year - birth_date.year
    if (reference.month, reference.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def basal_metabolic_rate(
    gender: Gender | str, weight_kg: float, height_cm: float, age_years: int
) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    if Gender.parse(gender) is Gender.MALE:
        return base + 5
    return base - 161


def activity_factor(level: ActivityLevel | str) -> float:
    """Return the TDEE multiplier for an activity level."""
    return _ACTIVITY_FACTORS[ActivityLevel.parse(level)]


def total_daily_energy_expenditure(bmr: float, level: ActivityLevel | str) -> float:
    """Scale BMR by the activity multiplier."""
    return bmr * activity_factor(level)


def calorie_target(tdee: float, goal_type: GoalType | str) -> float:
    """Apply the fixed deficit or surplus for a goal type."""
    parsed = GoalType.parse(goal_type)
    if parsed is GoalType.LOSE:
        return tdee - LOSE_OFFSET_KCAL
    if parsed is GoalType.GAIN:
        return tdee + GAIN_SURPLUS_KCAL
    return tdee


def macro_targets(
    calorie_target: float,
    weight_kg: float,
    protein_per_kg: float = DEFAULT_PROTEIN_PER_KG,
) -> MacroTarget:
    """Split a calorie target into protein, carbs and fat grams.

    Protein is fixed by body weight and never reduced. The energy left after
    protein is clamped at zero and shared evenly between carbs and fat, so a
    protein demand above the calorie target yields zero carbs and fat rather
    than negative amounts.
    """
    protein_g = protein_per_kg * weight_kg
    remaining_kcal = max(0.0, calorie_target - protein_g * KCAL_PER_G_PROTEIN)
    return MacroTarget(
        protein_g=protein_g,
        carbs_g=remaining_kcal * CARBS_ENERGY_SHARE / KCAL_PER_G_CARBS,
        fat_g=remaining_kcal * FAT_ENERGY_SHARE / KCAL_PER_G_FAT,
    )


def compute_targets(
    profile: Profile, goal: Goal, as_of: date | None = None
) -> CalculationResult | InsufficientData:
    """Compute BMR, calorie and macro targets, or report missing fields."""
    missing = profile.missing_fields()
    if missing:
        return InsufficientData(missing=missing)
    # missing_fields() guarantees the optionals below are set
    gender = cast(Gender, profile.gender)
    birth_date = cast(date, profile.birth_date)
    height_cm = cast(float, profile.height_cm)
    weight_kg = cast(float, profile.weight_kg)
    level = cast(ActivityLevel, profile.activity_level)

    bmr = basal_metabolic_rate(gender, weight_kg, height_cm, age(birth_date, as_of))
    tdee = total_daily_energy_expenditure(bmr, level)
    target = calorie_target(tdee, goal.goal_type)
    return CalculationResult(
        bmr=bmr,
        tdee=tdee,
        calorie_target=target,
        macros=macro_targets(target, weight_kg, goal.protein_per_kg),
    )
