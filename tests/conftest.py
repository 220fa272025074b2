"""Shared test fixtures."""

import logging
from datetime import UTC, datetime

import pytest

from nutrition_engine.app_logging import LOGGER_NAME
from nutrition_engine.config import Settings
from nutrition_engine.domain.foods import Food
from nutrition_engine.domain.nutrition import NutritionProfile


def make_food(
    food_id: str,
    name: str,
    nutrition: NutritionProfile | None = None,
    **fields: object,
) -> Food:
    """Build a food with sensible defaults for the fields a test ignores."""
    return Food(id=food_id, name=name, nutrition_per_100g=nutrition, **fields)


def plain_apple() -> Food:
    return make_food(
        "apple",
        "Apple",
        NutritionProfile(calories=52, protein=0.3, carbs=14, fats=0.2, fiber=2.4),
    )


@pytest.fixture
def chicken() -> Food:
    return make_food(
        "food001",
        "Chicken Breast",
        NutritionProfile(
            calories=165, protein=31, carbs=0, fats=3.6, fiber=0, sugar=0, sodium=74
        ),
        description="Skinless grilled chicken breast",
        category="protein",
        subcategory="poultry",
        dietary_tags=frozenset(
            {
                "high-protein",
                "low-carb",
                "keto-friendly",
                "paleo",
                "gluten-free",
                "dairy-free",
            }
        ),
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


@pytest.fixture
def catalog(chicken: Food) -> list[Food]:
    return [
        chicken,
        make_food(
            "food002",
            "Atlantic Salmon",
            NutritionProfile(calories=208, protein=20, carbs=0, fats=13, sodium=59),
            description="Fatty fish rich in omega-3",
            category="protein",
            subcategory="fish",
            dietary_tags=frozenset(
                {"high-protein", "omega-3", "keto-friendly", "paleo"}
            ),
            allergens=frozenset({"fish"}),
            created_at=datetime(2024, 2, 1, tzinfo=UTC),
        ),
        make_food(
            "food003",
            "Apple",
            NutritionProfile(
                calories=52,
                protein=0.3,
                carbs=14,
                fats=0.2,
                fiber=2.4,
                sugar=10.4,
                sodium=1,
            ),
            description="Crisp red apple",
            category="fruits",
            subcategory="fresh",
            dietary_tags=frozenset({"vegan", "vegetarian", "gluten-free"}),
            created_at=datetime(2024, 3, 1, tzinfo=UTC),
        ),
        make_food(
            "food004",
            "Rolled Oats",
            NutritionProfile(
                calories=389, protein=16.9, carbs=66.3, fats=6.9, fiber=10.6, sodium=2
            ),
            description="Whole grain oats",
            category="grains",
            subcategory="oats",
            dietary_tags=frozenset(
                {"vegan", "vegetarian", "whole-grain", "high-fiber"}
            ),
            allergens=frozenset({"gluten"}),
            created_at=datetime(2024, 1, 15, tzinfo=UTC),
        ),
        make_food(
            "food005",
            "almonds",
            NutritionProfile(
                calories=579,
                protein=21.2,
                carbs=21.6,
                fats=49.9,
                fiber=12.5,
                sugar=4.4,
                sodium=1,
            ),
            description="Raw almonds",
            category="nuts-seeds",
            subcategory="tree-nuts",
            dietary_tags=frozenset({"vegan", "keto-friendly", "paleo"}),
            allergens=frozenset({"tree-nuts"}),
            is_active=False,
            created_at=datetime(2023, 12, 1, tzinfo=UTC),
        ),
        make_food(
            "food006",
            "Chicken Noodle Soup",
            NutritionProfile(
                calories=62,
                protein=3.2,
                carbs=7.1,
                fats=2.4,
                fiber=0.5,
                sugar=0.7,
                sodium=343,
            ),
            description="Canned soup",
            category="carbs",
            subcategory="grains",
            allergens=frozenset({"wheat", "gluten"}),
        ),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def engine_logger():
    """Package logger with its handlers and level restored after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
