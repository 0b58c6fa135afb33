"""Meal logging service."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.errors import MalformedNutrientData, NotFoundError
from diet_tracker.domain.meals import MealItemRecord, MealRecord, MealSummary
from diet_tracker.services.aggregator import sum_consumed
from diet_tracker.services.foods import FoodRepository
from diet_tracker.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals and meal items."""

    def find_meal(self, user_id: UUID, day: date, meal_type: str) -> MealRecord | None:
        """Return the meal for a user, day and meal type."""

    def create_meal(self, user_id: UUID, day: date, meal_type: str) -> MealRecord:
        """Create and return a meal row."""

    def list_meal_items(self, meal_id: UUID) -> list[MealItemRecord]:
        """Return meal items joined with their foods."""

    def create_meal_item(self, meal_id: UUID, food_id: UUID, quantity_g: float) -> None:
        """Create a meal item row."""


@dataclass
class MealService:
    """Service that keeps today's meal and its consumed totals."""

    repository: MealRepository
    food_repository: FoodRepository
    profile_service: ProfileService
    meal_type: str = "lunch"

    def ensure_meal(self, user_id: UUID, day: date | None = None) -> MealRecord:
        """Return the user's meal for the day, creating it if needed."""
        resolved_day = day or datetime.now(tz=UTC).date()
        existing = self.repository.find_meal(user_id, resolved_day, self.meal_type)
        if existing:
            return existing
        self.profile_service.ensure_profile(user_id)
        meal = self.repository.create_meal(user_id, resolved_day, self.meal_type)
        _logger.info("Created meal: user_id=%s day=%s", user_id, resolved_day)
        return meal

    def get_summary(self, user_id: UUID, day: date | None = None) -> MealSummary:
        """Return the day's meal with items and consumed totals."""
        meal = self.ensure_meal(user_id, day)
        return self._summarize(meal)

    def add_item(
        self,
        user_id: UUID,
        food_id: UUID,
        quantity_g: float,
        day: date | None = None,
    ) -> MealSummary:
        """Log a quantity of a food into the day's meal."""
        if not math.isfinite(quantity_g) or quantity_g <= 0:
            raise MalformedNutrientData("quantity_g", quantity_g)
        if self.food_repository.get_food(food_id) is None:
            raise NotFoundError(f"Food {food_id} not found")
        meal = self.ensure_meal(user_id, day)
        self.repository.create_meal_item(meal.id, food_id, quantity_g)
        _logger.info(
            "Added meal item: meal_id=%s food_id=%s quantity_g=%s",
            meal.id,
            food_id,
            quantity_g,
        )
        return self._summarize(meal)

    def _summarize(self, meal: MealRecord) -> MealSummary:
        items = self.repository.list_meal_items(meal.id)
        totals = sum_consumed(item.as_logged_item() for item in items)
        return MealSummary(meal=meal, items=items, totals=totals)
