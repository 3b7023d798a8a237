"""Deterministic daily outfit sampling."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from closet.recommender.categories import Category
from closet.recommender.outfit import Catalogue, Outfit
from closet.recommender.rng import SeededRandom
from closet.recommender.scorer import OutfitScorer

logger = logging.getLogger(__name__)

DEFAULT_OUTFIT_COUNT = 5
# Spreads consecutive draws of the same day far apart in seed space.
DRAW_SEED_STRIDE = 7919

RandomFactory = Callable[[int], SeededRandom]


def day_seed(day: date) -> int:
    """Return ``YYYYMMDD`` as an integer, stable for the whole calendar day."""

    return day.year * 10000 + day.month * 100 + day.day


class OutfitGenerator:
    """Samples candidate outfits for a day and ranks them by score."""

    def __init__(
        self,
        scorer: OutfitScorer | None = None,
        random_factory: RandomFactory = SeededRandom,
    ) -> None:
        self._scorer = scorer or OutfitScorer()
        self._random_factory = random_factory

    def generate(
        self,
        catalogue: Catalogue,
        count: int = DEFAULT_OUTFIT_COUNT,
        *,
        today: date | None = None,
    ) -> list[Outfit]:
        """
        Draw ``count`` outfits and return them sorted by descending score.

        Returns an empty list when the catalogue has no tops or no bottoms.
        Outfits with equal scores keep the order in which they were drawn.
        """

        if not catalogue.can_build_outfits():
            logger.info("Skipping outfit generation: no tops or no bottoms in the catalogue.")
            return []

        seed = day_seed(today or date.today())
        outfits: list[Outfit] = []
        for draw in range(count):
            rng = self._random_factory(seed + draw * DRAW_SEED_STRIDE)
            outfit = self._draw(catalogue, rng)
            outfit.score = self._scorer.score(outfit)
            outfits.append(outfit)

        outfits.sort(key=lambda outfit: outfit.score, reverse=True)
        logger.debug("Generated %d outfits for seed %d", len(outfits), seed)
        return outfits

    @staticmethod
    def _draw(catalogue: Catalogue, rng: SeededRandom) -> Outfit:
        outfit = Outfit()
        for category in Category:
            items = catalogue[category]
            if not items:
                continue
            threshold = category.inclusion_threshold
            if threshold is not None and not rng.next() > threshold:
                continue
            outfit.pieces[category] = items[rng.index(len(items))]
        return outfit
