"""JSON serialization of domain objects for API responses."""

from diet_tracker.domain.meals import Food, MealItemRecord, MealSummary
from diet_tracker.domain.nutrition import (
    CalculationResult,
    ConsumedTotals,
    InsufficientData,
)
from diet_tracker.domain.profiles import Goal, Profile
from diet_tracker.services.aggregator import item_kcal


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "name": profile.name,
        "gender": profile.gender.value if profile.gender else None,
        "birth_date": profile.birth_date.isoformat() if profile.birth_date else None,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "activity_level": (
            profile.activity_level.value if profile.activity_level else None
        ),
    }


def serialize_goal(goal: Goal) -> dict[str, object]:
    return {
        "goal_type": goal.goal_type.value,
        "target_weight_kg": goal.target_weight_kg,
        "weekly_rate_kg": goal.weekly_rate_kg,
        "protein_per_kg": goal.protein_per_kg,
    }


def serialize_targets(result: CalculationResult | InsufficientData) -> dict[str, object]:
    """Serialize a target calculation or the list of missing fields."""
    if isinstance(result, InsufficientData):
        return {"status": "insufficient_data", "missing": list(result.missing)}
    return {
        "status": "ok",
        "bmr": result.bmr,
        "tdee": result.tdee,
        "calorie_target": result.calorie_target,
        "macros": {
            "protein_g": result.macros.protein_g,
            "carbs_g": result.macros.carbs_g,
            "fat_g": result.macros.fat_g,
        },
    }


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id) if food.id else None,
        "name": food.name,
        "kcal_per_100g": food.density.kcal_per_100g,
        "protein_per_100g": food.density.protein_per_100g,
        "carbs_per_100g": food.density.carbs_per_100g,
        "fat_per_100g": food.density.fat_per_100g,
    }


def serialize_totals(totals: ConsumedTotals) -> dict[str, float]:
    return {
        "kcal": totals.kcal,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
    }


def serialize_meal_item(item: MealItemRecord) -> dict[str, object]:
    return {
        "id": str(item.id),
        "food_id": str(item.food_id) if item.food_id else None,
        "name": item.food.name,
        "quantity_g": item.quantity_g,
        "kcal": item_kcal(item.as_logged_item()),
    }


def serialize_meal_summary(summary: MealSummary) -> dict[str, object]:
    """Serialize a meal with its items and consumed totals."""
    return {
        "meal": {
            "id": str(summary.meal.id),
            "date": summary.meal.day.isoformat(),
            "meal_type": summary.meal.meal_type,
        },
        "items": [serialize_meal_item(item) for item in summary.items],
        "totals": serialize_totals(summary.totals),
    }
