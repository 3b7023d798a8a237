"""Outfit scoring utilities."""

from __future__ import annotations

from itertools import combinations

from closet.recommender.harmony import harmony_score
from closet.recommender.outfit import Outfit

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100


class OutfitScorer:
    """Rates an outfit on color harmony and how complete it is."""

    def score(self, outfit: Outfit) -> int:
        """Return an integer in ``[0, 100]`` where higher is better."""

        total = BASE_SCORE
        for color_a, color_b in combinations(outfit.colors(), 2):
            total += harmony_score(color_a, color_b)
        for category, _ in outfit.slots():
            total += category.completeness_bonus
        return min(MAX_SCORE, max(MIN_SCORE, total))
