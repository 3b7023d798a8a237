"""Shared image decoding helper."""

from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from closet.errors import ImageDecodeError


def open_rgb(image_bytes: bytes) -> Image.Image:
    """Decode raw bytes into a fully loaded RGB image."""

    try:
        with Image.open(BytesIO(image_bytes)) as img:
            img.load()
            return img.convert("RGB")
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError("Uploaded file is not a supported image.") from exc
