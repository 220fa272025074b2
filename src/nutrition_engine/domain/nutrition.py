"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionProfile:
    """Nutrient amounts for a food, per 100g or for a scaled portion."""

    calories: float
    protein: float
    carbs: float
    fats: float
    fiber: float = 0
    sugar: float = 0
    sodium: float = 0

    @classmethod
    def zero(cls) -> "NutritionProfile":
        """Return the all-zero profile."""
        return cls(calories=0, protein=0, carbs=0, fats=0)


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories contributed by each macronutrient."""

    protein: int
    carbs: int
    fats: int


@dataclass(frozen=True)
class DietaryThresholds:
    """Per-100g thresholds used for dietary flags."""

    high_protein: float = 15
    low_carb: float = 10
    low_calorie: float = 50
    high_fiber: float = 5
