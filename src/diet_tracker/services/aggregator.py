"""Summing logged food quantities into consumed totals."""

import math
from collections.abc import Iterable

from diet_tracker.domain.errors import MalformedNutrientData
from diet_tracker.domain.nutrition import ConsumedTotals, LoggedItem


def sum_consumed(items: Iterable[LoggedItem]) -> ConsumedTotals:
    """Return kcal and macro totals for the logged items."""
    kcal = protein_g = carbs_g = fat_g = 0.0
    for item in items:
        factor = _scale_factor(item.quantity_g)
        density = item.density
        kcal += _density_value(density.kcal_per_100g) * factor
        protein_g += _density_value(density.protein_per_100g) * factor
        carbs_g += _density_value(density.carbs_per_100g) * factor
        fat_g += _density_value(density.fat_per_100g) * factor
    return ConsumedTotals(kcal=kcal, protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g)


def item_kcal(item: LoggedItem) -> float:
    """Return the energy of a single logged item."""
    return _density_value(item.density.kcal_per_100g) * _scale_factor(item.quantity_g)


def _scale_factor(quantity_g: float) -> float:
    if not isinstance(quantity_g, int | float) or not math.isfinite(quantity_g):
        raise MalformedNutrientData("quantity_g", quantity_g)
    if quantity_g < 0:
        raise MalformedNutrientData("quantity_g", quantity_g)
    return quantity_g / 100.0


def _density_value(value: float | None) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)
