"""Dashboard statistics for a food catalog."""

from dataclasses import dataclass

from nutrition_engine.domain.catalog import (
    DIETARY_TAG_LABELS,
    DIETARY_TAGS,
    FOOD_CATEGORIES,
    FOOD_CATEGORY_COLORS,
    FOOD_CATEGORY_LABELS,
)
from nutrition_engine.domain.foods import Food, per_100g
from nutrition_engine.services.rounding import round_half_up

TOP_TAG_LIMIT = 8


@dataclass(frozen=True)
class CategoryStat:
    """Food count and average calories for one category."""

    category: str
    label: str
    color: str
    count: int
    avg_calories: int


@dataclass(frozen=True)
class TagStat:
    """Number of foods carrying a dietary tag."""

    tag: str
    label: str
    count: int


@dataclass
class CatalogSummary:
    """Aggregated figures for the catalog dashboard."""

    total_foods: int
    active_foods: int
    category_count: int
    avg_calories: int
    categories: list[CategoryStat]
    top_tags: list[TagStat]


def summarize_catalog(catalog: object) -> CatalogSummary:
    """Compute totals, per-category averages and the most common tags."""
    foods = (
        [food for food in catalog if isinstance(food, Food)]
        if isinstance(catalog, list | tuple)
        else []
    )
    return CatalogSummary(
        total_foods=len(foods),
        active_foods=sum(1 for food in foods if food.is_active),
        category_count=len(FOOD_CATEGORIES),
        avg_calories=_average_calories(foods),
        categories=_category_stats(foods),
        top_tags=_top_tags(foods),
    )


def _average_calories(foods: list[Food]) -> int:
    if not foods:
        return 0
    total = sum(per_100g(food).calories for food in foods)
    return round_half_up(total / len(foods))


def _category_stats(foods: list[Food]) -> list[CategoryStat]:
    stats = []
    for category in FOOD_CATEGORIES:
        members = [food for food in foods if food.category == category]
        if not members:
            continue
        stats.append(
            CategoryStat(
                category=category,
                label=FOOD_CATEGORY_LABELS[category],
                color=FOOD_CATEGORY_COLORS[category],
                count=len(members),
                avg_calories=_average_calories(members),
            )
        )
    return stats


def _top_tags(foods: list[Food]) -> list[TagStat]:
    counts = [
        TagStat(
            tag=tag,
            label=DIETARY_TAG_LABELS[tag],
            count=sum(1 for food in foods if tag in food.dietary_tags),
        )
        for tag in DIETARY_TAGS
    ]
    ranked = sorted(
        (stat for stat in counts if stat.count > 0),
        key=lambda stat: stat.count,
        reverse=True,
    )
    return ranked[:TOP_TAG_LIMIT]
