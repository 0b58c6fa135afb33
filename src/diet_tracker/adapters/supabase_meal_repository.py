"""Supabase repository for meals and meal items."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_tracker.adapters.supabase_food_repository import FOOD_COLUMNS, parse_food
from diet_tracker.domain.errors import RepositoryError
from diet_tracker.domain.meals import MealItemRecord, MealRecord
from diet_tracker.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def find_meal(self, user_id: UUID, day: date, meal_type: str) -> MealRecord | None:
        """Return the meal row for a user, day and meal type."""
        response = (
            self.client.table("meals")
            .select("id, user_id, date, meal_type")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .eq("meal_type", meal_type)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, user_id: UUID, day: date, meal_type: str) -> MealRecord:
        """Create a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "meal_type": meal_type,
                }
            )
            .execute()
        )
        if not response.data:
            raise RepositoryError("Failed to create meal in Supabase")
        return _parse_meal(response.data[0])

    def list_meal_items(self, meal_id: UUID) -> list[MealItemRecord]:
        """Return meal items with their embedded foods."""
        response = (
            self.client.table("meal_items")
            .select(f"id, meal_id, food_id, quantity_g, foods ( {FOOD_COLUMNS} )")
            .eq("meal_id", str(meal_id))
            .order("id", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def create_meal_item(self, meal_id: UUID, food_id: UUID, quantity_g: float) -> None:
        """Create a meal item row."""
        self.client.table("meal_items").insert(
            {
                "meal_id": str(meal_id),
                "food_id": str(food_id),
                "quantity_g": quantity_g,
            }
        ).execute()


def _parse_meal(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        meal_type=str(row.get("meal_type") or ""),
    )


def _parse_item(row: dict[str, object]) -> MealItemRecord:
    quantity = row.get("quantity_g")
    foods = row.get("foods")
    return MealItemRecord(
        id=UUID(str(row["id"])),
        meal_id=UUID(str(row["meal_id"])),
        food_id=UUID(str(row["food_id"])) if row.get("food_id") else None,
        quantity_g=float(quantity) if quantity is not None else 0.0,  # type: ignore[arg-type]
        food=parse_food(foods if isinstance(foods, dict) else None),
    )
