"""Pydantic models for raw catalog and query payloads."""

import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nutrition_engine.domain.foods import Food
from nutrition_engine.domain.nutrition import NutritionProfile
from nutrition_engine.domain.queries import ALL, NutritionalGoals, SearchCriteria

_logger = logging.getLogger(__name__)


def parse_tag_list(raw: object) -> frozenset[str]:
    """Parse tags from a comma-separated string or a list of strings."""
    if raw is None:
        return frozenset()
    chunks = raw.split(",") if isinstance(raw, str) else raw
    if not isinstance(chunks, list | tuple | set | frozenset):
        return frozenset()
    tags: set[str] = set()
    for chunk in chunks:
        value = str(chunk).strip()
        if value:
            tags.add(value)
    return frozenset(tags)


class NutritionPayload(BaseModel):
    """Per-100g nutrition payload."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fats: float = Field(ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)

    def to_domain(self) -> NutritionProfile:
        return NutritionProfile(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            fiber=self.fiber or 0,
            sugar=self.sugar or 0,
            sodium=self.sodium or 0,
        )


class FoodPayload(BaseModel):
    """Catalog food record as supplied by the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    category: str = ""
    subcategory: str = ""
    dietary_tags: list[str] = Field(default_factory=list, alias="dietaryTags")
    allergens: list[str] = Field(default_factory=list)
    image: str | None = None
    is_active: bool = Field(default=True, alias="isActive")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    nutrition_per_100g: NutritionPayload | None = Field(
        default=None, alias="nutritionPer100g"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_domain(self) -> Food:
        return Food(
            id=self.id,
            name=self.name,
            description=self.description,
            category=self.category,
            subcategory=self.subcategory,
            dietary_tags=frozenset(self.dietary_tags),
            allergens=frozenset(self.allergens),
            image=self.image,
            is_active=self.is_active,
            created_at=self.created_at,
            nutrition_per_100g=(
                self.nutrition_per_100g.to_domain()
                if self.nutrition_per_100g
                else None
            ),
            updated_at=self.updated_at,
        )


class SearchCriteriaPayload(BaseModel):
    """Search filters from query parameters or a JSON body."""

    model_config = ConfigDict(populate_by_name=True)

    term: str = ""
    category: str = ALL
    subcategory: str = ALL
    dietary_tags: frozenset[str] = Field(default=frozenset(), alias="dietaryTags")
    min_protein: float = Field(default=0, alias="minProtein")
    max_calories: float = Field(default=float("inf"), alias="maxCalories")
    allergen_free: frozenset[str] = Field(default=frozenset(), alias="allergenFree")

    @field_validator("dietary_tags", "allergen_free", mode="before")
    @classmethod
    def _split_tags(cls, value: object) -> frozenset[str]:
        return parse_tag_list(value)

    def to_domain(self) -> SearchCriteria:
        return SearchCriteria(
            term=self.term,
            category=self.category,
            subcategory=self.subcategory,
            dietary_tags=self.dietary_tags,
            min_protein=self.min_protein,
            max_calories=self.max_calories,
            allergen_free=self.allergen_free,
        )


class NutritionalGoalsPayload(BaseModel):
    """Suggestion goals from query parameters or a JSON body."""

    model_config = ConfigDict(populate_by_name=True)

    target_protein: float = Field(default=0, alias="targetProtein")
    target_carbs: float = Field(default=0, alias="targetCarbs")
    target_fats: float = Field(default=0, alias="targetFats")
    max_calories: float = Field(default=float("inf"), alias="maxCalories")
    dietary_restrictions: frozenset[str] = Field(
        default=frozenset(), alias="dietaryRestrictions"
    )

    @field_validator("dietary_restrictions", mode="before")
    @classmethod
    def _split_tags(cls, value: object) -> frozenset[str]:
        return parse_tag_list(value)

    def to_domain(self) -> NutritionalGoals:
        return NutritionalGoals(
            target_protein=self.target_protein,
            target_carbs=self.target_carbs,
            target_fats=self.target_fats,
            max_calories=self.max_calories,
            dietary_restrictions=self.dietary_restrictions,
        )


def parse_catalog(records: object) -> list[Food]:
    """Validate raw records into foods, skipping invalid ones."""
    if not isinstance(records, list | tuple):
        _logger.warning("Catalog payload is not a list: %s", type(records).__name__)
        return []
    foods: list[Food] = []
    for index, record in enumerate(records):
        try:
            payload = FoodPayload.model_validate(record)
        except ValidationError as exc:
            _logger.warning(
                "Skipping catalog record %s (%s errors): %s",
                index,
                exc.error_count(),
                exc.errors()[0]["msg"],
            )
            continue
        foods.append(payload.to_domain())
    return foods
