"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from diet_tracker.domain.profiles import ActivityLevel, Gender, Profile
from diet_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the profiles table."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user."""
        response = (
            self.client.table("profiles")
            .select(
                "id, name, gender, birth_date, height_cm, weight_kg, activity_level"
            )
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def profile_exists(self, user_id: UUID) -> bool:
        """Return True when a profiles row exists, without parsing it."""
        response = (
            self.client.table("profiles")
            .select("id")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def upsert_profile(self, user_id: UUID, profile: Profile) -> None:
        """Insert or update biometric fields."""
        self.client.table("profiles").upsert(
            {
                "id": str(user_id),
                "gender": profile.gender.value if profile.gender else None,
                "birth_date": (
                    profile.birth_date.isoformat() if profile.birth_date else None
                ),
                "height_cm": profile.height_cm,
                "weight_kg": profile.weight_kg,
                "activity_level": (
                    profile.activity_level.value if profile.activity_level else None
                ),
            },
            on_conflict="id",
        ).execute()

    def upsert_name(self, user_id: UUID, name: str) -> None:
        """Insert or update the display name."""
        self.client.table("profiles").upsert(
            {"id": str(user_id), "name": name}, on_conflict="id"
        ).execute()


def _parse_profile(row: dict[str, object]) -> Profile:
    birth_date = row.get("birth_date")
    return Profile(
        gender=Gender.parse_optional(row.get("gender")),
        birth_date=date.fromisoformat(str(birth_date)) if birth_date else None,
        height_cm=_optional_float(row.get("height_cm")),
        weight_kg=_optional_float(row.get("weight_kg")),
        activity_level=ActivityLevel.parse_optional(row.get("activity_level")),
        name=str(row.get("name") or ""),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)  # type: ignore[arg-type]
