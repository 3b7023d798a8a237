"""Outfit generation and scoring engine."""

from .categories import Category, normalize_category
from .harmony import HSL, Harmony, harmony_score, to_hue_saturation_lightness
from .outfit import Catalogue, CatalogueItem, Outfit
from .rng import SeededRandom
from .sampler import OutfitGenerator, day_seed
from .scorer import OutfitScorer

__all__ = [
    "Catalogue",
    "CatalogueItem",
    "Category",
    "HSL",
    "Harmony",
    "Outfit",
    "OutfitGenerator",
    "OutfitScorer",
    "SeededRandom",
    "day_seed",
    "harmony_score",
    "normalize_category",
    "to_hue_saturation_lightness",
]
