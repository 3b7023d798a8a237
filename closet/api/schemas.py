"""Response models for the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from closet.db import models
from closet.recommender import Category
from closet.services.outfit import OutfitSuggestion


class GarmentOut(BaseModel):
    """Garment metadata with links to its media."""

    id: int
    category: Category
    dominant_color: list[int] | None = None
    color_palette: list[list[int]] = Field(default_factory=list)
    added_at: datetime
    image_url: str
    thumbnail_url: str

    @classmethod
    def from_model(cls, garment: models.Garment) -> "GarmentOut":
        return cls(
            id=garment.id,
            category=Category(garment.category),
            dominant_color=garment.dominant_color,
            color_palette=garment.color_palette or [],
            added_at=garment.added_at,
            image_url=f"/garments/{garment.id}/image",
            thumbnail_url=f"/garments/{garment.id}/thumbnail",
        )


class GarmentCount(BaseModel):
    count: int


class OutfitPieceOut(BaseModel):
    """One filled slot of an outfit."""

    slot: Category
    garment: GarmentOut


class OutfitOut(BaseModel):
    """Ranked outfit suggestion."""

    rank: int
    label: str
    score: int = Field(..., ge=0, le=100, description="Outfit score 0-100")
    pieces: list[OutfitPieceOut]
    colors: list[list[int]]

    @classmethod
    def from_suggestion(cls, suggestion: OutfitSuggestion) -> "OutfitOut":
        return cls(
            rank=suggestion.rank,
            label=suggestion.label,
            score=suggestion.score,
            pieces=[
                OutfitPieceOut(slot=category, garment=GarmentOut.from_model(garment))
                for category, garment in suggestion.pieces.items()
            ],
            colors=suggestion.colors(),
        )
