"""Tests for category parsing and per-category slot policy."""

from __future__ import annotations

import pytest

from closet.recommender.categories import Category, normalize_category


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("top", Category.TOP),
        ("  Shirt ", Category.TOP),
        ("jeans", Category.BOTTOM),
        ("Sneakers", Category.SHOES),
        ("coat", Category.OUTERWEAR),
        ("accessories", Category.ACCESSORY),
        ("bag", Category.ACCESSORY),
    ],
)
def test_normalize_category_accepts_aliases(raw: str, expected: Category) -> None:
    assert normalize_category(raw) is expected


@pytest.mark.parametrize("raw", ["", "socks?", "dress-ish"])
def test_normalize_category_rejects_unknown_labels(raw: str) -> None:
    assert normalize_category(raw) is None


def test_categories_are_declared_in_slot_order() -> None:
    assert [category.value for category in Category] == [
        "top",
        "bottom",
        "shoes",
        "outerwear",
        "accessory",
    ]


def test_slot_policy() -> None:
    assert [c for c in Category if c.is_required] == [Category.TOP, Category.BOTTOM]
    assert Category.SHOES.inclusion_threshold is None
    assert Category.OUTERWEAR.inclusion_threshold == 0.55
    assert Category.ACCESSORY.inclusion_threshold == 0.65
    assert {c: c.completeness_bonus for c in Category} == {
        Category.TOP: 0,
        Category.BOTTOM: 0,
        Category.SHOES: 8,
        Category.OUTERWEAR: 4,
        Category.ACCESSORY: 4,
    }
