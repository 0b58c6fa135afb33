"""Errors raised by the nutrition core and the application services."""


class NutritionError(ValueError):
    """Base error for invalid input reaching the nutrition core."""

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class UnsupportedEnumValue(NutritionError):
    """A gender, activity level or goal type outside the known set."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(field, value, f"Unsupported {field}: {value!r}")


class MalformedNutrientData(NutritionError):
    """A quantity that cannot be aggregated."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(field, value, f"Malformed {field}: {value!r}")


class NotFoundError(LookupError):
    """A row the caller depends on does not exist."""


class RepositoryError(RuntimeError):
    """A Supabase write returned no data."""
