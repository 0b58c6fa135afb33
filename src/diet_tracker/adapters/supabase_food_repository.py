"""Supabase repository for the food catalogue."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.meals import Food
from diet_tracker.domain.nutrition import NutrientDensity
from diet_tracker.services.foods import FoodRepository

FOOD_COLUMNS = "id, name, kcal_per_100g, protein, carbs, fat"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for the foods table."""

    client: Client

    def list_foods(self, limit: int) -> list[Food]:
        """Return foods ordered by name."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .order("name", desc=False)
            .limit(limit)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])


def parse_food(row: dict[str, object] | None) -> Food:
    """Map a foods row to a Food, with null densities as zero."""
    if not row:
        return Food(id=None, name="", density=NutrientDensity())
    return Food(
        id=UUID(str(row["id"])) if row.get("id") else None,
        name=str(row.get("name") or ""),
        density=NutrientDensity.from_optional(
            kcal_per_100g=row.get("kcal_per_100g"),  # type: ignore[arg-type]
            protein_per_100g=row.get("protein"),  # type: ignore[arg-type]
            carbs_per_100g=row.get("carbs"),  # type: ignore[arg-type]
            fat_per_100g=row.get("fat"),  # type: ignore[arg-type]
        ),
    )
