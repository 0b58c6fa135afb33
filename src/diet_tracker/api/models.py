"""Pydantic models for API request bodies."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from diet_tracker.domain.profiles import (
    DEFAULT_PROTEIN_PER_KG,
    DEFAULT_WEEKLY_RATE_KG,
    ActivityLevel,
    Gender,
    Goal,
    GoalType,
    Profile,
)


class ProfileUpdate(BaseModel):
    """Biometric profile fields; omitted fields are cleared."""

    gender: Gender | None = None
    birth_date: date | None = None
    height_cm: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    weight_kg: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    activity_level: ActivityLevel | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: object) -> Gender | None:
        return Gender.parse_optional(value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _parse_activity(cls, value: object) -> ActivityLevel | None:
        return ActivityLevel.parse_optional(value)

    @field_validator("birth_date")
    @classmethod
    def _not_in_future(cls, value: date | None) -> date | None:
        if value is not None and value > date.today():
            raise ValueError("birth_date cannot be in the future")
        return value

    def to_profile(self) -> Profile:
        return Profile(
            gender=self.gender,
            birth_date=self.birth_date,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
        )


class GoalUpdate(BaseModel):
    """Goal selection."""

    goal_type: GoalType = GoalType.MAINTAIN
    target_weight_kg: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    weekly_rate_kg: float = Field(default=DEFAULT_WEEKLY_RATE_KG, allow_inf_nan=False)
    protein_per_kg: float = Field(
        default=DEFAULT_PROTEIN_PER_KG, gt=0, allow_inf_nan=False
    )

    @field_validator("goal_type", mode="before")
    @classmethod
    def _parse_goal_type(cls, value: object) -> GoalType:
        return GoalType.parse(value)

    def to_goal(self) -> Goal:
        return Goal(
            goal_type=self.goal_type,
            target_weight_kg=self.target_weight_kg,
            weekly_rate_kg=self.weekly_rate_kg,
            protein_per_kg=self.protein_per_kg,
        )


class NameUpdate(BaseModel):
    """Profile display name."""

    name: str = Field(min_length=1)


class MealItemCreate(BaseModel):
    """A food quantity to add to today's meal."""

    food_id: UUID
    quantity_g: float = Field(gt=0, allow_inf_nan=False)
