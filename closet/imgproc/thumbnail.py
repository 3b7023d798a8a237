"""Thumbnail generation for closet listings."""

from __future__ import annotations

from io import BytesIO

from closet.imgproc.decode import open_rgb

DEFAULT_MAX_WIDTH = 300
DEFAULT_QUALITY = 75


class ThumbnailMaker:
    """Scales photos to a fixed width and re-encodes them as JPEG."""

    def __init__(self, max_width: int = DEFAULT_MAX_WIDTH, quality: int = DEFAULT_QUALITY) -> None:
        self._max_width = max_width
        self._quality = quality

    def make(self, image_bytes: bytes) -> bytes:
        """Return JPEG bytes of the image scaled to ``max_width`` pixels wide."""

        image = open_rgb(image_bytes)
        ratio = self._max_width / image.width
        height = max(1, int(image.height * ratio))
        thumb = image.resize((self._max_width, height))

        buffer = BytesIO()
        thumb.save(buffer, format="JPEG", quality=self._quality)
        return buffer.getvalue()
