"""Portion scaling and meal aggregation."""

import math
from collections.abc import Mapping

from nutrition_engine.domain.foods import Food, FoodQuantityEntry
from nutrition_engine.domain.nutrition import NutritionProfile
from nutrition_engine.services.rounding import is_number, round_half_up, round_tenth


def scale_nutrition(food: Food | None, quantity_grams: object) -> NutritionProfile:
    """Return the nutrition of ``quantity_grams`` of a food.

    Calories and sodium are rounded to whole numbers, the remaining fields
    to one decimal. Missing foods, missing profiles, non-finite quantities
    and negative quantities all yield the zero profile.
    """
    if not isinstance(food, Food) or food.nutrition_per_100g is None:
        return NutritionProfile.zero()
    if not is_number(quantity_grams) or not math.isfinite(quantity_grams):
        return NutritionProfile.zero()
    if quantity_grams <= 0:
        return NutritionProfile.zero()

    multiplier = quantity_grams / 100
    base = food.nutrition_per_100g
    return NutritionProfile(
        calories=round_half_up(base.calories * multiplier),
        protein=round_tenth(base.protein * multiplier),
        carbs=round_tenth(base.carbs * multiplier),
        fats=round_tenth(base.fats * multiplier),
        fiber=round_tenth((base.fiber or 0) * multiplier),
        sugar=round_tenth((base.sugar or 0) * multiplier),
        sodium=round_half_up((base.sodium or 0) * multiplier),
    )


def aggregate_nutrition(entries: object) -> NutritionProfile:
    """Sum scaled nutrition over food and quantity entries.

    Entries are FoodQuantityEntry records or mappings with ``food`` and
    ``quantity`` keys; anything else contributes nothing. Gram fields are
    re-rounded to one decimal after every addition, so the totals carry the
    same drift a running tally would show.
    """
    total = NutritionProfile.zero()
    if not isinstance(entries, list | tuple):
        return total
    for entry in entries:
        if isinstance(entry, FoodQuantityEntry):
            portion = scale_nutrition(entry.food, entry.quantity)
        elif isinstance(entry, Mapping):
            portion = scale_nutrition(entry.get("food"), entry.get("quantity"))
        else:
            continue
        total = NutritionProfile(
            calories=total.calories + portion.calories,
            protein=round_tenth(total.protein + portion.protein),
            carbs=round_tenth(total.carbs + portion.carbs),
            fats=round_tenth(total.fats + portion.fats),
            fiber=round_tenth(total.fiber + portion.fiber),
            sugar=round_tenth(total.sugar + portion.sugar),
            sodium=total.sodium + portion.sodium,
        )
    return total
