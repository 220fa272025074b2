"""Tests for portion scaling and aggregation."""

from nutrition_engine.domain.foods import FoodQuantityEntry
from nutrition_engine.domain.nutrition import NutritionProfile
from nutrition_engine.services.portions import aggregate_nutrition, scale_nutrition
from tests.conftest import make_food, plain_apple


def test_scale_apple_to_150_grams() -> None:
    scaled = scale_nutrition(plain_apple(), 150)

    assert scaled == NutritionProfile(
        calories=78, protein=0.5, carbs=21, fats=0.3, fiber=3.6, sugar=0, sodium=0
    )


def test_scale_to_100_grams_returns_profile(catalog) -> None:
    for food in catalog:
        assert scale_nutrition(food, 100) == food.nutrition_per_100g


def test_scale_to_zero_grams_returns_zero(chicken) -> None:
    assert scale_nutrition(chicken, 0) == NutritionProfile.zero()


def test_scale_rounds_sodium_and_calories_half_up(chicken) -> None:
    scaled = scale_nutrition(chicken, 150)

    assert scaled.calories == 248
    assert scaled.protein == 46.5
    assert scaled.fats == 5.4
    assert scaled.sodium == 111


def test_scale_degrades_to_zero_for_bad_input(chicken) -> None:
    zero = NutritionProfile.zero()

    assert scale_nutrition(None, 100) == zero
    assert scale_nutrition(make_food("x", "No profile"), 100) == zero
    assert scale_nutrition(chicken, "100") == zero
    assert scale_nutrition(chicken, float("nan")) == zero
    assert scale_nutrition(chicken, float("inf")) == zero
    assert scale_nutrition(chicken, True) == zero
    assert scale_nutrition(chicken, -50) == zero


def test_aggregate_empty_or_invalid_returns_zero() -> None:
    assert aggregate_nutrition([]) == NutritionProfile.zero()
    assert aggregate_nutrition(None) == NutritionProfile.zero()
    assert aggregate_nutrition("apple") == NutritionProfile.zero()


def test_aggregate_single_entry_matches_scale(chicken) -> None:
    total = aggregate_nutrition([FoodQuantityEntry(food=chicken, quantity=100)])

    assert total == scale_nutrition(chicken, 100)


def test_aggregate_sums_entries(chicken) -> None:
    total = aggregate_nutrition(
        [
            FoodQuantityEntry(food=chicken, quantity=150),
            FoodQuantityEntry(food=plain_apple(), quantity=150),
        ]
    )

    assert total.calories == 326
    assert total.protein == 47.0
    assert total.carbs == 21.0
    assert total.fats == 5.7
    assert total.fiber == 3.6
    assert total.sodium == 111


def test_aggregate_rounds_running_totals() -> None:
    first = make_food(
        "a", "A", NutritionProfile(calories=1, protein=0.1, carbs=0, fats=0)
    )
    second = make_food(
        "b", "B", NutritionProfile(calories=2, protein=0.2, carbs=0, fats=0)
    )

    total = aggregate_nutrition(
        [
            FoodQuantityEntry(food=first, quantity=100),
            FoodQuantityEntry(food=second, quantity=100),
        ]
    )

    assert total.protein == 0.3
    assert total.calories == 3


def test_aggregate_accepts_mapping_entries(chicken) -> None:
    from_records = aggregate_nutrition(
        [FoodQuantityEntry(food=chicken, quantity=150), FoodQuantityEntry(chicken, 50)]
    )
    from_mappings = aggregate_nutrition(
        [{"food": chicken, "quantity": 150}, {"food": chicken, "quantity": 50}]
    )

    assert from_mappings == from_records
    assert from_mappings.calories == 331


def test_aggregate_skips_unusable_entries(chicken) -> None:
    total = aggregate_nutrition(
        [
            "chicken",
            {"food": chicken},
            {"quantity": 100},
            FoodQuantityEntry(food=chicken, quantity=100),
        ]
    )

    assert total == scale_nutrition(chicken, 100)
