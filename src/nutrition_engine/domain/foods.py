"""Domain models for the food catalog."""

from dataclasses import dataclass, field
from datetime import datetime

from nutrition_engine.domain.nutrition import NutritionProfile

_TEXT_FIELDS = ("name", "description", "category", "subcategory")


def tag_set(value: object) -> frozenset[str]:
    """Normalise a tag collection; a lone string counts as one tag."""
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, list | tuple | set | frozenset):
        return frozenset(item for item in value if isinstance(item, str))
    return frozenset()


@dataclass(frozen=True)
class Food:
    """Represents a food entry in the catalog."""

    id: str
    name: str
    description: str = ""
    category: str = ""
    subcategory: str = ""
    dietary_tags: frozenset[str] = field(default_factory=frozenset)
    allergens: frozenset[str] = field(default_factory=frozenset)
    image: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    nutrition_per_100g: NutritionProfile | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        for name in _TEXT_FIELDS:
            if not isinstance(getattr(self, name), str):
                object.__setattr__(self, name, "")
        object.__setattr__(self, "dietary_tags", tag_set(self.dietary_tags))
        object.__setattr__(self, "allergens", tag_set(self.allergens))
        if not isinstance(self.nutrition_per_100g, NutritionProfile):
            object.__setattr__(self, "nutrition_per_100g", None)


@dataclass(frozen=True)
class FoodQuantityEntry:
    """A catalog food paired with a quantity in grams."""

    food: Food
    quantity: float


def per_100g(food: Food) -> NutritionProfile:
    """Return the food's per-100g profile, or the zero profile when absent."""
    return food.nutrition_per_100g or NutritionProfile.zero()
