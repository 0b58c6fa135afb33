"""Supabase repository for user goals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_tracker.domain.profiles import (
    DEFAULT_PROTEIN_PER_KG,
    DEFAULT_WEEKLY_RATE_KG,
    Goal,
    GoalType,
)
from diet_tracker.services.profiles import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for the goals table."""

    client: Client

    def get_goal(self, user_id: UUID) -> Goal | None:
        """Return the goal row for a user."""
        response = (
            self.client.table("goals")
            .select("goal_type, target_weight_kg, weekly_rate_kg, protein_g_per_kg")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        target_weight = row.get("target_weight_kg")
        weekly_rate = row.get("weekly_rate_kg")
        protein_per_kg = row.get("protein_g_per_kg")
        return Goal(
            goal_type=GoalType.parse_optional(row.get("goal_type"))
            or GoalType.MAINTAIN,
            target_weight_kg=float(target_weight) if target_weight is not None else None,
            weekly_rate_kg=(
                float(weekly_rate) if weekly_rate is not None else DEFAULT_WEEKLY_RATE_KG
            ),
            protein_per_kg=(
                float(protein_per_kg)
                if protein_per_kg is not None
                else DEFAULT_PROTEIN_PER_KG
            ),
        )

    def upsert_goal(self, user_id: UUID, goal: Goal) -> None:
        """Insert or update the user's goal row."""
        self.client.table("goals").upsert(
            {
                "user_id": str(user_id),
                "goal_type": goal.goal_type.value,
                "target_weight_kg": goal.target_weight_kg,
                "weekly_rate_kg": goal.weekly_rate_kg,
                "protein_g_per_kg": goal.protein_per_kg,
            },
            on_conflict="user_id",
        ).execute()
