"""Garment categories and the slot policy attached to each of them."""

from __future__ import annotations

from enum import Enum

CATEGORY_ALIASES = {
    "top": "top",
    "tops": "top",
    "shirt": "top",
    "t-shirt": "top",
    "tshirt": "top",
    "blouse": "top",
    "sweater": "top",
    "bottom": "bottom",
    "bottoms": "bottom",
    "pants": "bottom",
    "trousers": "bottom",
    "jeans": "bottom",
    "skirt": "bottom",
    "shorts": "bottom",
    "shoes": "shoes",
    "shoe": "shoes",
    "sneakers": "shoes",
    "boots": "shoes",
    "outerwear": "outerwear",
    "jacket": "outerwear",
    "coat": "outerwear",
    "layer": "outerwear",
    "accessory": "accessory",
    "accessories": "accessory",
    "bag": "accessory",
    "belt": "accessory",
    "hat": "accessory",
    "scarf": "accessory",
}


class Category(str, Enum):
    """Fixed set of wardrobe categories, declared in outfit slot order."""

    TOP = "top"
    BOTTOM = "bottom"
    SHOES = "shoes"
    OUTERWEAR = "outerwear"
    ACCESSORY = "accessory"

    @property
    def is_required(self) -> bool:
        """Whether an outfit cannot exist without this slot."""

        return self in (Category.TOP, Category.BOTTOM)

    @property
    def inclusion_threshold(self) -> float | None:
        """Draw value an optional slot must exceed to be worn, ``None`` if always worn."""

        return _INCLUSION_THRESHOLDS.get(self)

    @property
    def completeness_bonus(self) -> int:
        """Points added to an outfit's score when this slot is filled."""

        return _COMPLETENESS_BONUS.get(self, 0)


_INCLUSION_THRESHOLDS = {
    Category.OUTERWEAR: 0.55,
    Category.ACCESSORY: 0.65,
}

_COMPLETENESS_BONUS = {
    Category.SHOES: 8,
    Category.OUTERWEAR: 4,
    Category.ACCESSORY: 4,
}


def normalize_category(raw: str) -> Category | None:
    """Map free-form user input (``"Jeans"``, ``"bag"``) onto a category."""

    normalized = raw.strip().lower()
    value = CATEGORY_ALIASES.get(normalized)
    if value is None:
        return None
    return Category(value)
