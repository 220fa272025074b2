"""Macro breakdowns, dietary flags and display formatting."""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from nutrition_engine.domain.foods import Food
from nutrition_engine.domain.nutrition import (
    DietaryThresholds,
    MacroPercentages,
    NutritionProfile,
)
from nutrition_engine.services.rounding import is_number, round_half_up

_KCAL_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fats": 9,
}

_KETO_MAX_CARBS = 5
_LOW_FAT_MAX_FATS = 3

_WHOLE_NUMBER_UNITS = {"cal", "mg"}

# holds every digit of a finite float
_FORMAT_CONTEXT = Context(prec=500)

# JS number formatting switches to exponent notation from here on
_FIXED_POINT_LIMIT = 1e21


def macro_percentages(nutrition: NutritionProfile | None) -> MacroPercentages:
    """Return the share of calories from protein, carbs and fats."""
    if not isinstance(nutrition, NutritionProfile) or nutrition.calories == 0:
        return MacroPercentages(protein=0, carbs=0, fats=0)

    protein_cals = nutrition.protein * _KCAL_PER_GRAM["protein"]
    carbs_cals = nutrition.carbs * _KCAL_PER_GRAM["carbs"]
    fats_cals = nutrition.fats * _KCAL_PER_GRAM["fats"]
    total_cals = protein_cals + carbs_cals + fats_cals
    if total_cals == 0:
        return MacroPercentages(protein=0, carbs=0, fats=0)

    return MacroPercentages(
        protein=round_half_up(protein_cals / total_cals * 100),
        carbs=round_half_up(carbs_cals / total_cals * 100),
        fats=round_half_up(fats_cals / total_cals * 100),
    )


def dietary_criteria_flags(
    food: Food | None, thresholds: DietaryThresholds | None = None
) -> dict[str, bool]:
    """Evaluate dietary flags for a food's per-100g profile.

    An empty mapping means the food has no profile to evaluate.
    """
    if not isinstance(food, Food) or food.nutrition_per_100g is None:
        return {}
    limits = thresholds or DietaryThresholds()
    nutrition = food.nutrition_per_100g
    return {
        "is_high_protein": nutrition.protein >= limits.high_protein,
        "is_low_carb": nutrition.carbs <= limits.low_carb,
        "is_low_calorie": nutrition.calories <= limits.low_calorie,
        "is_high_fiber": (nutrition.fiber or 0) >= limits.high_fiber,
        "is_keto": nutrition.carbs <= _KETO_MAX_CARBS
        and nutrition.fats > nutrition.protein,
        "is_low_fat": nutrition.fats <= _LOW_FAT_MAX_FATS,
    }


def format_nutrition_value(value: object, unit: str = "", decimals: int = 1) -> str:
    """Format a nutrient amount for display, e.g. ``1.5g`` or ``120cal``."""
    if not is_number(value) or not math.isfinite(value):
        return f"0{unit}"
    if abs(value) >= _FIXED_POINT_LIMIT:
        return f"{float(value)!r}{unit}"
    if unit in _WHOLE_NUMBER_UNITS:
        return f"{round_half_up(value)}{unit}"
    return f"{_fixed_point(value, decimals)}{unit}"


def food_image_url(food: Food | None) -> str | None:
    """Return the food's image URL, or None when a placeholder should render."""
    if not isinstance(food, Food) or not food.image:
        return None
    return food.image


def _fixed_point(value: float, decimals: int) -> str:
    """Round half-up to ``decimals`` places and drop trailing zeros."""
    exponent = Decimal(1).scaleb(-max(decimals, 0))
    rounded = Decimal(value).quantize(
        exponent, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT
    )
    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
