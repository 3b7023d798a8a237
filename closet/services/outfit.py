"""Daily outfit suggestions assembled from the stored wardrobe."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from closet.db import models
from closet.metrics.prometheus_exporter import outfit_generation_empty_total, outfit_generation_total
from closet.recommender import Category, OutfitGenerator
from closet.services.wardrobe import WardrobeService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OutfitSuggestion:
    """Ranked outfit with the stored garments filling each slot."""

    rank: int
    score: int
    pieces: dict[Category, models.Garment]

    @property
    def label(self) -> str:
        return f"Outfit {self.rank}"

    def colors(self) -> list[list[int]]:
        """Dominant colours of the pieces, in slot order."""

        return [
            self.pieces[category].dominant_color
            for category in Category
            if category in self.pieces and self.pieces[category].dominant_color
        ]


class OutfitService:
    """Runs the outfit generator against the current wardrobe."""

    def __init__(
        self,
        wardrobe_service: WardrobeService,
        *,
        generator: OutfitGenerator | None = None,
        default_count: int = 6,
    ) -> None:
        self._wardrobe_service = wardrobe_service
        self._generator = generator or OutfitGenerator()
        self._default_count = default_count

    async def suggest(
        self,
        session: AsyncSession,
        *,
        count: int | None = None,
        today: date | None = None,
    ) -> list[OutfitSuggestion]:
        """Return today's outfits, best first; empty when no tops or bottoms exist."""

        outfit_generation_total.inc()
        catalogue, garments = await self._wardrobe_service.load_catalogue(session)
        if count is None:
            count = self._default_count
        outfits = self._generator.generate(catalogue, count, today=today)
        if not outfits:
            outfit_generation_empty_total.inc()
            return []

        suggestions = [
            OutfitSuggestion(
                rank=rank,
                score=outfit.score,
                pieces={category: garments[item.garment_id] for category, item in outfit.slots()},
            )
            for rank, outfit in enumerate(outfits, start=1)
        ]
        logger.info(
            "Suggested %d outfits from %d garments (best score %d)",
            len(suggestions),
            len(catalogue),
            suggestions[0].score,
        )
        return suggestions
