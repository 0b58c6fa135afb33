"""Domain models for foods and meal logging."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from diet_tracker.domain.nutrition import ConsumedTotals, LoggedItem, NutrientDensity


@dataclass(frozen=True)
class Food:
    """A food from the shared catalogue."""

    id: UUID | None
    name: str
    density: NutrientDensity


@dataclass(frozen=True)
class MealRecord:
    """A meal row for one user, day and meal type."""

    id: UUID
    user_id: UUID
    day: date
    meal_type: str


@dataclass(frozen=True)
class MealItemRecord:
    """A meal item joined with its food."""

    id: UUID
    meal_id: UUID
    food_id: UUID | None
    quantity_g: float
    food: Food

    def as_logged_item(self) -> LoggedItem:
        return LoggedItem(density=self.food.density, quantity_g=self.quantity_g)


@dataclass(frozen=True)
class MealSummary:
    """A meal with its items and consumed totals."""

    meal: MealRecord
    items: list[MealItemRecord]
    totals: ConsumedTotals
