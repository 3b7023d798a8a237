"""Tests for outfit scoring."""

from __future__ import annotations

from closet.recommender import CatalogueItem, Category, Outfit, OutfitScorer

GRAY = (128, 128, 128)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
CYAN = (0, 255, 255)
YELLOW = (255, 255, 0)


def _outfit(**colors) -> Outfit:
    pieces = {}
    for index, (slot, color) in enumerate(colors.items()):
        category = Category(slot)
        pieces[category] = CatalogueItem(garment_id=index, category=category, dominant_color=color)
    return Outfit(pieces=pieces)


def test_base_score_for_uncoloured_top_and_bottom() -> None:
    assert OutfitScorer().score(_outfit(top=None, bottom=None)) == 50


def test_red_top_with_blue_bottom_is_triadic() -> None:
    assert OutfitScorer().score(_outfit(top=RED, bottom=BLUE)) == 58


def test_missing_colour_skips_pairs_but_keeps_completeness_bonus() -> None:
    outfit = _outfit(top=GRAY, bottom=None, shoes=None)

    assert OutfitScorer().score(outfit) == 50 + 8


def test_all_pairs_and_bonuses_are_added() -> None:
    # red/cyan complementary (15), red/yellow none (0), cyan/yellow none (0)
    outfit = _outfit(top=RED, bottom=CYAN, shoes=YELLOW)

    assert OutfitScorer().score(outfit) == 50 + 15 + 0 + 0 + 8


def test_outerwear_and_accessory_bonuses() -> None:
    outfit = _outfit(top=None, bottom=None, outerwear=None, accessory=None)

    assert OutfitScorer().score(outfit) == 50 + 4 + 4


def test_score_is_clamped_to_100() -> None:
    outfit = _outfit(top=GRAY, bottom=GRAY, shoes=GRAY, outerwear=GRAY, accessory=GRAY)

    # 10 neutral pairs and every bonus would reach 166.
    assert OutfitScorer().score(outfit) == 100
