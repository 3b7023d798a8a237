"""SQLAlchemy models describing the closet tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for ORM models."""


class Garment(Base):
    """Clothing item photographed by the user."""

    __tablename__ = "garments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    storage_path: Mapped[str] = mapped_column(String(256), nullable=False)
    thumbnail_path: Mapped[str | None] = mapped_column(String(256))
    dominant_color: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    color_palette: Mapped[list[list[int]]] = mapped_column(JSON, default=list)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        index=True,
    )
