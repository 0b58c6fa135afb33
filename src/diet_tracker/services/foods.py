"""Food catalogue lookups."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.meals import Food


class FoodRepository(Protocol):
    """Persistence interface for the food catalogue."""

    def list_foods(self, limit: int) -> list[Food]:
        """Return foods ordered by name."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id."""


@dataclass
class FoodService:
    """Service for browsing foods."""

    repository: FoodRepository
    limit: int = 200

    def list_foods(self) -> list[Food]:
        """Return the first page of foods ordered by name."""
        return self.repository.list_foods(self.limit)
