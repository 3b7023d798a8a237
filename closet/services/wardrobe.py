"""Business logic for managing the wardrobe."""

from __future__ import annotations

import asyncio
import logging
import uuid
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from closet.db import models
from closet.errors import GarmentNotFoundError, UnknownCategoryError
from closet.imgproc.color_extract import ColorExtractor
from closet.imgproc.thumbnail import ThumbnailMaker
from closet.metrics.prometheus_exporter import garments_added_total, garments_removed_total
from closet.recommender import Catalogue, CatalogueItem, Category, normalize_category
from closet.storage.backend import StorageBackend

logger = logging.getLogger(__name__)


def resolve_category(raw: str | Category) -> Category:
    """Return the category for ``raw`` or raise ``UnknownCategoryError``."""

    if isinstance(raw, Category):
        return raw
    category = normalize_category(raw)
    if category is None:
        raise UnknownCategoryError(raw)
    return category


def to_catalogue_item(garment: models.Garment) -> CatalogueItem:
    """Project a stored garment onto the fields the recommender reads."""

    color = tuple(garment.dominant_color) if garment.dominant_color else None
    return CatalogueItem(
        garment_id=garment.id,
        category=Category(garment.category),
        dominant_color=color,  # type: ignore[arg-type]
    )


class WardrobeService:
    """Facade over media storage, image processing and database operations."""

    def __init__(
        self,
        storage: StorageBackend,
        *,
        thumbnails: ThumbnailMaker | None = None,
        colors: ColorExtractor | None = None,
    ) -> None:
        self._storage = storage
        self._thumbnails = thumbnails or ThumbnailMaker()
        self._colors = colors or ColorExtractor()

    async def add_garment(
        self,
        session: AsyncSession,
        *,
        file_name: str,
        file_data: bytes,
        category: str | Category,
    ) -> models.Garment:
        """Process the photo, persist media and store garment metadata."""

        resolved = resolve_category(category)
        thumbnail, summary = await asyncio.gather(
            asyncio.to_thread(self._thumbnails.make, file_data),
            asyncio.to_thread(self._colors.extract, file_data),
        )

        token = uuid.uuid4().hex
        extension = Path(file_name).suffix.lower() or ".jpg"
        storage_path, thumbnail_path = await asyncio.gather(
            self._storage.save(f"garments/{token}{extension}", file_data),
            self._storage.save(f"thumbnails/{token}.jpg", thumbnail),
        )

        garment = models.Garment(
            category=resolved.value,
            storage_path=storage_path,
            thumbnail_path=thumbnail_path,
            dominant_color=list(summary.dominant),
            color_palette=[list(color) for color in summary.palette],
        )
        session.add(garment)
        try:
            await session.commit()
            await session.refresh(garment)
        except Exception:
            logger.exception("Failed to store garment metadata, removing %s", storage_path)
            await session.rollback()
            await asyncio.gather(
                self._storage.delete(storage_path),
                self._storage.delete(thumbnail_path),
            )
            raise

        garments_added_total.labels(category=resolved.value).inc()
        logger.info("Saved garment %s (%s, colour %s)", garment.id, resolved.value, summary.dominant)
        return garment

    async def list_garments(
        self,
        session: AsyncSession,
        *,
        category: str | Category | None = None,
    ) -> list[models.Garment]:
        """Return stored garments, newest first, optionally for one category."""

        stmt = select(models.Garment).order_by(models.Garment.added_at.desc(), models.Garment.id.desc())
        if category is not None:
            stmt = stmt.where(models.Garment.category == resolve_category(category).value)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def count_garments(self, session: AsyncSession) -> int:
        """Return the number of stored garments."""

        result = await session.execute(select(func.count()).select_from(models.Garment))
        return int(result.scalar_one())

    async def get_garment(self, session: AsyncSession, garment_id: int) -> models.Garment:
        """Return the garment or raise ``GarmentNotFoundError``."""

        garment = await session.get(models.Garment, garment_id)
        if garment is None:
            raise GarmentNotFoundError(garment_id)
        return garment

    async def remove_garment(self, session: AsyncSession, garment_id: int) -> None:
        """Delete garment metadata together with its photo and thumbnail."""

        garment = await self.get_garment(session, garment_id)
        paths = [path for path in (garment.storage_path, garment.thumbnail_path) if path]
        await session.delete(garment)
        await session.commit()
        await asyncio.gather(*(self._storage.delete(path) for path in paths))

        garments_removed_total.inc()
        logger.info("Removed garment %s", garment_id)

    async def load_catalogue(self, session: AsyncSession) -> tuple[Catalogue, dict[int, models.Garment]]:
        """Return the recommender catalogue and the garments it was built from."""

        # Insertion order keeps sampled indices stable as new garments are added.
        result = await session.execute(select(models.Garment).order_by(models.Garment.id))
        garments = list(result.scalars().all())
        by_id = {garment.id: garment for garment in garments}
        return Catalogue(to_catalogue_item(garment) for garment in garments), by_id
