"""Endpoints scoped to the authenticated user."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from diet_tracker.api.auth import require_user
from diet_tracker.api.models import (  # noqa: TC001
    GoalUpdate,
    MealItemCreate,
    NameUpdate,
    ProfileUpdate,
)
from diet_tracker.api.serializers import (
    serialize_goal,
    serialize_meal_summary,
    serialize_profile,
    serialize_targets,
)

if TYPE_CHECKING:
    from diet_tracker.containers import AppContainer

router = APIRouter(prefix="/me", tags=["me"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the user's profile."""
    container: AppContainer = request.app.state.container
    return serialize_profile(container.profile_service.get_profile(user_id))


@router.put("/profile")
async def put_profile(
    payload: ProfileUpdate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Save the user's biometric profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.save_profile(user_id, payload.to_profile())
    return serialize_profile(profile)


@router.put("/profile/name")
async def put_profile_name(
    payload: NameUpdate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, str]:
    """Set the user's display name."""
    container: AppContainer = request.app.state.container
    container.profile_service.set_name(user_id, payload.name)
    return {"status": "ok"}


@router.get("/goal")
async def get_goal(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the user's goal, or the default goal."""
    container: AppContainer = request.app.state.container
    return serialize_goal(container.profile_service.get_goal(user_id))


@router.put("/goal")
async def put_goal(
    payload: GoalUpdate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Save the user's goal."""
    container: AppContainer = request.app.state.container
    goal = container.profile_service.save_goal(user_id, payload.to_goal())
    return serialize_goal(goal)


@router.get("/targets")
async def get_targets(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return today's calorie and macro targets."""
    container: AppContainer = request.app.state.container
    return serialize_targets(container.profile_service.get_targets(user_id))


@router.get("/meals/today")
async def get_today_meal(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return today's meal with consumed totals."""
    container: AppContainer = request.app.state.container
    return serialize_meal_summary(container.meal_service.get_summary(user_id))


@router.post("/meals/today/items", status_code=201)
async def add_today_meal_item(
    payload: MealItemCreate, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Log a food into today's meal."""
    container: AppContainer = request.app.state.container
    summary = container.meal_service.add_item(
        user_id, payload.food_id, payload.quantity_g
    )
    return serialize_meal_summary(summary)
