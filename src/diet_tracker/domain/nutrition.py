"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutrientDensity:
    """Nutritional content per 100 grams of a food."""

    kcal_per_100g: float = 0.0
    protein_per_100g: float = 0.0
    carbs_per_100g: float = 0.0
    fat_per_100g: float = 0.0

    @classmethod
    def from_optional(
        cls,
        kcal_per_100g: float | None = None,
        protein_per_100g: float | None = None,
        carbs_per_100g: float | None = None,
        fat_per_100g: float | None = None,
    ) -> "NutrientDensity":
        """Build a density treating absent values as zero."""
        return cls(
            kcal_per_100g=float(kcal_per_100g or 0.0),
            protein_per_100g=float(protein_per_100g or 0.0),
            carbs_per_100g=float(carbs_per_100g or 0.0),
            fat_per_100g=float(fat_per_100g or 0.0),
        )


@dataclass(frozen=True)
class LoggedItem:
    """A logged quantity of a food."""

    density: NutrientDensity
    quantity_g: float


@dataclass(frozen=True)
class MacroTarget:
    """Daily macronutrient targets in grams."""

    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class CalculationResult:
    """Daily energy and macro targets for a profile and goal."""

    bmr: float
    tdee: float
    calorie_target: float
    macros: MacroTarget


@dataclass(frozen=True)
class InsufficientData:
    """Targets cannot be computed until the listed fields are set."""

    missing: tuple[str, ...]


@dataclass(frozen=True)
class ConsumedTotals:
    """Nutrients summed across logged items."""

    kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float

    @classmethod
    def zero(cls) -> "ConsumedTotals":
        return cls(kcal=0.0, protein_g=0.0, carbs_g=0.0, fat_g=0.0)
