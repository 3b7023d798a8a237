"""Domain exceptions raised by the wardrobe services."""

from __future__ import annotations


class ClosetError(RuntimeError):
    """Base class for errors surfaced to API and script callers."""


class GarmentNotFoundError(ClosetError, LookupError):
    """Raised when a garment id does not exist in the wardrobe."""

    def __init__(self, garment_id: int) -> None:
        super().__init__(f"Garment {garment_id} does not exist.")
        self.garment_id = garment_id


class UnknownCategoryError(ClosetError, ValueError):
    """Raised when a category label cannot be mapped to a known category."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Unknown garment category: {raw!r}.")
        self.raw = raw


class ImageDecodeError(ClosetError):
    """Raised when uploaded bytes are not a readable image."""
