"""Domain models for user profiles and goals."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Self

from diet_tracker.domain.errors import UnsupportedEnumValue

DEFAULT_PROTEIN_PER_KG = 1.8
DEFAULT_WEEKLY_RATE_KG = 0.25


class _ParsableEnum(StrEnum):
    """String enum with a single validating constructor."""

    @classmethod
    def _field_name(cls) -> str:
        return cls.__name__

    @classmethod
    def parse(cls, value: object) -> Self:
        """Return the member for a value or raise UnsupportedEnumValue."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip())
            except ValueError:
                pass
        raise UnsupportedEnumValue(cls._field_name(), value)

    @classmethod
    def parse_optional(cls, value: object) -> Self | None:
        """Like parse, but None and blank strings mean "not set"."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return cls.parse(value)


class Gender(_ParsableEnum):
    """Genders supported by the Mifflin-St Jeor formula."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def _field_name(cls) -> str:
        return "gender"


class ActivityLevel(_ParsableEnum):
    """Daily activity levels."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def _field_name(cls) -> str:
        return "activity_level"


class GoalType(_ParsableEnum):
    """Weight goal directions."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    @classmethod
    def _field_name(cls) -> str:
        return "goal_type"


@dataclass(frozen=True)
class Profile:
    """Biometric profile; any field may be unset."""

    gender: Gender | None = None
    birth_date: date | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel | None = None
    name: str = ""

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of fields required for target calculation."""
        missing = []
        if self.gender is None:
            missing.append("gender")
        if self.birth_date is None:
            missing.append("birth_date")
        if not _is_positive(self.height_cm):
            missing.append("height_cm")
        if not _is_positive(self.weight_kg):
            missing.append("weight_kg")
        if self.activity_level is None:
            missing.append("activity_level")
        return tuple(missing)


@dataclass(frozen=True)
class Goal:
    """Goal selection. Target weight and weekly rate are informational."""

    goal_type: GoalType = GoalType.MAINTAIN
    target_weight_kg: float | None = None
    weekly_rate_kg: float = DEFAULT_WEEKLY_RATE_KG
    protein_per_kg: float = DEFAULT_PROTEIN_PER_KG


def _is_positive(value: float | None) -> bool:
    return value is not None and value > 0
