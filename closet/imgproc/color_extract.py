"""Dominant colour extraction utilities."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from PIL import Image

from closet.imgproc.decode import open_rgb
from closet.recommender.harmony import RGB

SAMPLE_SIZE = 50
PALETTE_SIZE = 5
MIN_LUMA = 20
MAX_LUMA = 240
FALLBACK_COLOR: RGB = (128, 128, 128)


@dataclass(slots=True)
class ColorSummary:
    """Dominant colour plus the most frequent quantised colours."""

    dominant: RGB
    palette: list[RGB] = field(default_factory=list)


class ColorExtractor:
    """Quantised RGB histogram over a downscaled copy of the photo."""

    def __init__(self, sample_size: int = SAMPLE_SIZE, palette_size: int = PALETTE_SIZE) -> None:
        self._sample_size = sample_size
        self._palette_size = palette_size

    def extract(self, image_bytes: bytes) -> ColorSummary:
        """Decode ``image_bytes`` and summarise its colours."""

        return self.extract_from_image(open_rgb(image_bytes))

    def extract_from_image(self, image: Image.Image) -> ColorSummary:
        """Summarise colours of an already decoded image."""

        sample = image.convert("RGB").resize(
            (self._sample_size, self._sample_size),
            Image.Resampling.BILINEAR,
        )
        counter: Counter[RGB] = Counter()
        for count, (r, g, b) in sample.getcolors(maxcolors=self._sample_size * self._sample_size):
            # Near-black and near-white pixels are usually background or shadow.
            luma = 0.299 * r + 0.587 * g + 0.114 * b
            if luma < MIN_LUMA or luma > MAX_LUMA:
                continue
            counter[(r >> 3) << 3, (g >> 3) << 3, (b >> 3) << 3] += count

        palette = [color for color, _ in counter.most_common(self._palette_size)]
        dominant = palette[0] if palette else FALLBACK_COLOR
        return ColorSummary(dominant=dominant, palette=palette)
