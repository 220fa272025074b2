"""Catalog search, sorting and goal-based suggestions."""

import logging
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from nutrition_engine.domain.foods import Food, per_100g
from nutrition_engine.domain.nutrition import DietaryThresholds
from nutrition_engine.domain.queries import (
    ALL,
    SORT_CALORIES_ASC,
    SORT_CALORIES_DESC,
    SORT_CREATED_ASC,
    SORT_CREATED_DESC,
    SORT_NAME_ASC,
    SORT_NAME_DESC,
    SORT_PROTEIN_ASC,
    SORT_PROTEIN_DESC,
    FoodSuggestion,
    NutritionalGoals,
    SearchCriteria,
)
from nutrition_engine.payloads import parse_catalog
from nutrition_engine.services.macros import dietary_criteria_flags
from nutrition_engine.services.stats import CatalogSummary, summarize_catalog

SUGGESTION_LIMIT = 10

_PROTEIN_WEIGHT = 30
_CARBS_WEIGHT = 20
_FATS_WEIGHT = 20
_DENSITY_CAP = 30

_logger = logging.getLogger(__name__)


def search_foods(
    catalog: object, criteria: SearchCriteria | None = None
) -> list[Food]:
    """Return the foods matching every criterion, in catalog order."""
    if not isinstance(catalog, list | tuple):
        return []
    if criteria is None:
        criteria = SearchCriteria()
    elif not isinstance(criteria, SearchCriteria):
        return []
    term = criteria.term.lower()
    return [
        food
        for food in catalog
        if isinstance(food, Food) and _matches(food, criteria, term)
    ]


def sort_foods(catalog: object, sort_key: str | None) -> list[Food]:
    """Return a sorted copy of the catalog.

    Unknown keys keep the input order. Ties keep their relative order for
    both ascending and descending keys.
    """
    if not isinstance(catalog, list | tuple):
        return []
    foods = [food for food in catalog if isinstance(food, Food)]
    sorter = _SORTERS.get(sort_key) if isinstance(sort_key, str) else None
    if sorter is None:
        return foods
    key, reverse = sorter
    return sorted(foods, key=key, reverse=reverse)


def suggest_foods(
    catalog: object,
    goals: NutritionalGoals | None,
    limit: int = SUGGESTION_LIMIT,
) -> list[FoodSuggestion]:
    """Rank active foods against nutritional goals, best first."""
    if not isinstance(catalog, list | tuple):
        return []
    if not isinstance(goals, NutritionalGoals):
        return []
    suggestions = [
        FoodSuggestion(food=food, score=_goal_score(food, goals))
        for food in catalog
        if isinstance(food, Food) and _meets_goals(food, goals)
    ]
    ranked = sorted(suggestions, key=lambda item: item.score, reverse=True)
    return ranked[: max(limit, 0)]


def available_subcategories(catalog: object, category: str = ALL) -> list[str]:
    """Return distinct subcategories, optionally within one category."""
    if not isinstance(catalog, list | tuple):
        return []
    seen: dict[str, None] = {}
    for food in catalog:
        if not isinstance(food, Food):
            continue
        if category != ALL and food.category != category:
            continue
        seen.setdefault(food.subcategory, None)
    return list(seen)


def find_food(catalog: object, food_id: str) -> Food | None:
    """Return the food with the given id, if present."""
    if not isinstance(catalog, list | tuple):
        return None
    for food in catalog:
        if isinstance(food, Food) and food.id == food_id:
            return food
    return None


def foods_by_category(catalog: object, category: str) -> list[Food]:
    """Return the foods in a category."""
    return search_foods(catalog, SearchCriteria(category=category))


def search_by_name(catalog: object, name: str) -> list[Food]:
    """Return the foods whose name contains ``name``, ignoring case."""
    if not isinstance(catalog, list | tuple):
        return []
    needle = name.lower()
    return [
        food
        for food in catalog
        if isinstance(food, Food) and needle in food.name.lower()
    ]


@dataclass
class CatalogService:
    """Application service for browsing and ranking a food catalog."""

    thresholds: DietaryThresholds = field(default_factory=DietaryThresholds)
    suggestion_limit: int = SUGGESTION_LIMIT
    default_sort: str = SORT_NAME_ASC
    debug: bool = False

    def load(self, records: object) -> list[Food]:
        """Build a catalog from raw camelCase records."""
        foods = parse_catalog(records)
        if self.debug:
            _logger.info("Catalog load: foods=%s", len(foods))
        return foods

    def browse(
        self,
        catalog: object,
        criteria: SearchCriteria | None = None,
        sort_key: str | None = None,
    ) -> list[Food]:
        """Filter the catalog and sort the matches."""
        matches = search_foods(catalog, criteria)
        ordered = sort_foods(matches, sort_key or self.default_sort)
        if self.debug:
            _logger.info(
                "Catalog browse: matches=%s sort=%s",
                len(ordered),
                sort_key or self.default_sort,
            )
        return ordered

    def suggest(
        self, catalog: object, goals: NutritionalGoals | None
    ) -> list[FoodSuggestion]:
        """Return the best foods for the given goals."""
        suggestions = suggest_foods(catalog, goals, limit=self.suggestion_limit)
        if self.debug:
            top = suggestions[0].score if suggestions else None
            _logger.info(
                "Catalog suggest: results=%s top_score=%s", len(suggestions), top
            )
        return suggestions

    def flags(self, food: Food | None) -> dict[str, bool]:
        """Evaluate dietary flags with the configured thresholds."""
        return dietary_criteria_flags(food, self.thresholds)

    def summarize(self, catalog: object) -> CatalogSummary:
        """Return dashboard statistics for the catalog."""
        return summarize_catalog(catalog)


def _matches(food: Food, criteria: SearchCriteria, term: str) -> bool:
    nutrition = per_100g(food)
    matches_text = (
        not term
        or term in food.name.lower()
        or term in food.description.lower()
        or term in food.category.lower()
    )
    matches_category = criteria.category == ALL or food.category == criteria.category
    matches_subcategory = (
        criteria.subcategory == ALL or food.subcategory == criteria.subcategory
    )
    matches_tags = not criteria.dietary_tags or bool(
        criteria.dietary_tags & food.dietary_tags
    )
    matches_allergens = not criteria.allergen_free or not (
        criteria.allergen_free & food.allergens
    )
    return (
        matches_text
        and matches_category
        and matches_subcategory
        and matches_tags
        and nutrition.protein >= criteria.min_protein
        and nutrition.calories <= criteria.max_calories
        and matches_allergens
    )


def _meets_goals(food: Food, goals: NutritionalGoals) -> bool:
    return (
        food.is_active
        and per_100g(food).calories <= goals.max_calories
        and goals.dietary_restrictions <= food.dietary_tags
    )


def _goal_score(food: Food, goals: NutritionalGoals) -> float:
    nutrition = per_100g(food)
    score = 0.0
    if goals.target_protein > 0 and nutrition.protein > 0:
        score += min(nutrition.protein / goals.target_protein, 1) * _PROTEIN_WEIGHT
    if goals.target_carbs > 0 and nutrition.carbs > 0:
        score += min(nutrition.carbs / goals.target_carbs, 1) * _CARBS_WEIGHT
    if goals.target_fats > 0 and nutrition.fats > 0:
        score += min(nutrition.fats / goals.target_fats, 1) * _FATS_WEIGHT
    # zero-calorie foods get no density bonus
    if nutrition.calories > 0:
        density = (nutrition.protein + (nutrition.fiber or 0)) / nutrition.calories
        score += min(density * 100, _DENSITY_CAP)
    return score


def _collation_key(name: str) -> tuple[str, str]:
    """Accent- and case-insensitive key, lowercase first on ties."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), name.swapcase()


def _created_key(food: Food) -> datetime:
    created_at = food.created_at
    if created_at is None:
        return datetime.min.replace(tzinfo=UTC)
    if created_at.tzinfo is None:
        return created_at.replace(tzinfo=UTC)
    return created_at


_SORTERS: dict[str, tuple[Callable[[Food], object], bool]] = {
    SORT_NAME_ASC: (lambda food: _collation_key(food.name), False),
    SORT_NAME_DESC: (lambda food: _collation_key(food.name), True),
    SORT_CALORIES_ASC: (lambda food: per_100g(food).calories, False),
    SORT_CALORIES_DESC: (lambda food: per_100g(food).calories, True),
    SORT_PROTEIN_ASC: (lambda food: per_100g(food).protein, False),
    SORT_PROTEIN_DESC: (lambda food: per_100g(food).protein, True),
    SORT_CREATED_ASC: (_created_key, False),
    SORT_CREATED_DESC: (_created_key, True),
}
