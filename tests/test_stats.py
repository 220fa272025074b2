"""Tests for catalog statistics."""

from nutrition_engine.services.stats import CategoryStat, summarize_catalog


def test_summarize_catalog_totals(catalog) -> None:
    summary = summarize_catalog(catalog)

    assert summary.total_foods == 6
    assert summary.active_foods == 5
    assert summary.category_count == 10
    assert summary.avg_calories == 243


def test_summarize_catalog_categories_follow_vocabulary_order(catalog) -> None:
    summary = summarize_catalog(catalog)

    assert [stat.category for stat in summary.categories] == [
        "protein",
        "carbs",
        "fruits",
        "grains",
        "nuts-seeds",
    ]
    assert summary.categories[0] == CategoryStat(
        category="protein",
        label="Proteins",
        color="error",
        count=2,
        avg_calories=187,
    )


def test_summarize_catalog_top_tags(catalog) -> None:
    summary = summarize_catalog(catalog)

    assert [(stat.tag, stat.count) for stat in summary.top_tags] == [
        ("keto-friendly", 3),
        ("paleo", 3),
        ("vegan", 3),
        ("high-protein", 2),
        ("vegetarian", 2),
        ("gluten-free", 2),
        ("low-carb", 1),
        ("dairy-free", 1),
    ]
    assert summary.top_tags[0].label == "Keto Friendly"


def test_summarize_empty_catalog() -> None:
    summary = summarize_catalog([])

    assert summary.total_foods == 0
    assert summary.avg_calories == 0
    assert summary.categories == []
    assert summary.top_tags == []
    assert summarize_catalog(None).total_foods == 0
