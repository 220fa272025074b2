"""Copy-on-write edits for a food catalog."""

from collections.abc import Mapping
from dataclasses import fields, replace
from datetime import UTC, datetime
from uuid import uuid4

from nutrition_engine.domain.foods import Food

_EDITABLE_FIELDS = frozenset(item.name for item in fields(Food)) - {"id"}


def add_food(
    catalog: object, food: Food, now: datetime | None = None
) -> list[Food]:
    """Return a new catalog with ``food`` appended as an active entry."""
    stamp = now or datetime.now(tz=UTC)
    created = replace(
        food,
        id=food.id or str(uuid4()),
        is_active=True,
        created_at=stamp,
        updated_at=stamp,
    )
    return [*_foods(catalog), created]


def update_food(
    catalog: object,
    food_id: str,
    changes: Mapping[str, object],
    now: datetime | None = None,
) -> list[Food]:
    """Return a new catalog with the named fields of one food replaced."""
    unknown = set(changes) - _EDITABLE_FIELDS
    if unknown:
        msg = f"Unknown food fields: {', '.join(sorted(unknown))}"
        raise ValueError(msg)
    stamp = now or datetime.now(tz=UTC)
    return [
        replace(food, **{**changes, "updated_at": stamp})
        if food.id == food_id
        else food
        for food in _foods(catalog)
    ]


def remove_food(catalog: object, food_id: str) -> list[Food]:
    """Return a new catalog without the given food."""
    return [food for food in _foods(catalog) if food.id != food_id]


def toggle_food_status(
    catalog: object, food_id: str, now: datetime | None = None
) -> list[Food]:
    """Return a new catalog with one food's active flag flipped."""
    stamp = now or datetime.now(tz=UTC)
    return [
        replace(food, is_active=not food.is_active, updated_at=stamp)
        if food.id == food_id
        else food
        for food in _foods(catalog)
    ]


def _foods(catalog: object) -> list[Food]:
    if not isinstance(catalog, list | tuple):
        return []
    return [food for food in catalog if isinstance(food, Food)]
