"""Profile, goal and target business logic."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from diet_tracker.domain.nutrition import CalculationResult, InsufficientData
from diet_tracker.domain.profiles import Goal, Profile
from diet_tracker.services.calculator import compute_targets

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile, if present."""

    def profile_exists(self, user_id: UUID) -> bool:
        """Return True when a profile row exists for the user."""

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Insert or update the biometric fields of a profile."""

    def upsert_name(self, user_id: UUID, name: str) -> None:
        """Insert or update the profile display name."""


class GoalRepository(Protocol):
    """Persistence interface for user goals."""

    def get_goal(self, user_id: UUID) -> Goal | None:
        """Return the user's goal, if present."""

    def upsert_goal(self, user_id: UUID, goal: Goal) -> None:
        """Insert or update the user's goal."""


@dataclass
class ProfileService:
    """Application service for profiles, goals and daily targets."""

    profile_repository: ProfileRepository
    goal_repository: GoalRepository

    def get_profile(self, user_id: UUID) -> Profile:
        """Return the stored profile or an empty one."""
        return self.profile_repository.get_profile(user_id) or Profile()

    def save_profile(self, user_id: UUID, profile: Profile) -> Profile:
        """Persist biometric profile fields, keeping the stored name."""
        self.profile_repository.upsert_profile(user_id, profile)
        _logger.info("Saved profile: user_id=%s", user_id)
        return replace(profile, name=self.get_profile(user_id).name)

    def set_name(self, user_id: UUID, name: str) -> None:
        """Persist the profile display name."""
        self.profile_repository.upsert_name(user_id, name.strip())
        _logger.info("Saved profile name: user_id=%s", user_id)

    def ensure_profile(self, user_id: UUID) -> None:
        """Make sure a profile row exists for the user."""
        if not self.profile_repository.profile_exists(user_id):
            self.profile_repository.upsert_name(user_id, "")
            _logger.info("Created empty profile: user_id=%s", user_id)

    def get_goal(self, user_id: UUID) -> Goal:
        """Return the stored goal or the default goal."""
        return self.goal_repository.get_goal(user_id) or Goal()

    def save_goal(self, user_id: UUID, goal: Goal) -> Goal:
        """Persist the user's goal."""
        self.goal_repository.upsert_goal(user_id, goal)
        _logger.info("Saved goal: user_id=%s goal_type=%s", user_id, goal.goal_type)
        return goal

    def get_targets(
        self, user_id: UUID, as_of: date | None = None
    ) -> CalculationResult | InsufficientData:
        """Compute daily targets from the stored profile and goal."""
        return compute_targets(
            self.get_profile(user_id), self.get_goal(user_id), as_of=as_of
        )
