"""Query and ranking models for catalog lookups."""

from dataclasses import dataclass, field, fields

from nutrition_engine.domain.foods import Food, tag_set

SORT_NAME_ASC = "name-asc"
SORT_NAME_DESC = "name-desc"
SORT_CALORIES_ASC = "calories-asc"
SORT_CALORIES_DESC = "calories-desc"
SORT_PROTEIN_ASC = "protein-asc"
SORT_PROTEIN_DESC = "protein-desc"
SORT_CREATED_ASC = "created-asc"
SORT_CREATED_DESC = "created-desc"

SORT_KEYS = (
    SORT_NAME_ASC,
    SORT_NAME_DESC,
    SORT_CALORIES_ASC,
    SORT_CALORIES_DESC,
    SORT_PROTEIN_ASC,
    SORT_PROTEIN_DESC,
    SORT_CREATED_ASC,
    SORT_CREATED_DESC,
)

ALL = "all"


@dataclass(frozen=True)
class SearchCriteria:
    """Filters applied when searching the catalog.

    Tag fields accept any collection of strings and are stored as frozensets.
    Values of the wrong type fall back to the field default.
    """

    term: str = ""
    category: str = ALL
    subcategory: str = ALL
    dietary_tags: frozenset[str] = field(default_factory=frozenset)
    min_protein: float = 0
    max_calories: float = float("inf")
    allergen_free: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("term", "category", "subcategory"):
            if not isinstance(getattr(self, name), str):
                object.__setattr__(self, name, _default(self, name))
        for name in ("min_protein", "max_calories"):
            _reset_non_number(self, name)
        object.__setattr__(self, "dietary_tags", tag_set(self.dietary_tags))
        object.__setattr__(self, "allergen_free", tag_set(self.allergen_free))


@dataclass(frozen=True)
class NutritionalGoals:
    """Targets used to rank food suggestions."""

    target_protein: float = 0
    target_carbs: float = 0
    target_fats: float = 0
    max_calories: float = float("inf")
    dietary_restrictions: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("target_protein", "target_carbs", "target_fats", "max_calories"):
            _reset_non_number(self, name)
        object.__setattr__(
            self, "dietary_restrictions", tag_set(self.dietary_restrictions)
        )


@dataclass(frozen=True)
class FoodSuggestion:
    """A suggested food with its goal score."""

    food: Food
    score: float


def _default(record: object, name: str) -> object:
    return next(item.default for item in fields(record) if item.name == name)


def _reset_non_number(record: object, name: str) -> None:
    value = getattr(record, name)
    if isinstance(value, bool) or not isinstance(value, int | float):
        object.__setattr__(record, name, _default(record, name))
