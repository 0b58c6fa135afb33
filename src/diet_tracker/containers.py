"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.supabase_auth_client import AuthClient, SupabaseAuthClient
from diet_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from diet_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from diet_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from diet_tracker.config import Settings
from diet_tracker.services.foods import FoodService
from diet_tracker.services.meals import MealService
from diet_tracker.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_client: AuthClient
    profile_service: ProfileService
    food_service: FoodService
    meal_service: MealService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    profile_service = ProfileService(
        profile_repository=SupabaseProfileRepository(supabase_client),
        goal_repository=SupabaseGoalRepository(supabase_client),
    )
    food_service = FoodService(food_repository, limit=resolved_settings.foods_limit)
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        food_repository=food_repository,
        profile_service=profile_service,
        meal_type=resolved_settings.meal_type,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_client=SupabaseAuthClient(supabase_client),
        profile_service=profile_service,
        food_service=food_service,
        meal_service=meal_service,
    )
