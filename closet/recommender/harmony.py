"""Color harmony rules built on the HSL color space.

Two garment colors are compared by the shortest angular distance between
their hues. Low-saturation colors count as neutrals and pair with anything.
The first matching rule decides the contribution:

- Neutral: either color has saturation below 0.15 -> 10
- Analogous: hues within 30 degrees -> 10
- Complementary: hues 150-210 degrees apart -> 15
- Triadic: hues 105-135 degrees apart -> 8
- anything else -> 0
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

NEUTRAL_SATURATION = 0.15


class HSL(NamedTuple):
    """Hue in degrees ``[0, 360)``, saturation and lightness in ``[0, 1]``."""

    hue: float
    saturation: float
    lightness: float


class Harmony(str, Enum):
    """Relationship between two colors."""

    NEUTRAL = "neutral"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    NONE = "none"

    @property
    def points(self) -> int:
        """Score contribution of a pair in this relationship."""

        return _HARMONY_POINTS[self]


_HARMONY_POINTS = {
    Harmony.NEUTRAL: 10,
    Harmony.ANALOGOUS: 10,
    Harmony.COMPLEMENTARY: 15,
    Harmony.TRIADIC: 8,
    Harmony.NONE: 0,
}


def to_hue_saturation_lightness(rgb: RGB) -> HSL:
    """Convert an 8-bit RGB triple to HSL using the 60 degree sector formula."""

    r, g, b = (channel / 255 for channel in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    if high == low:
        return HSL(hue=0.0, saturation=0.0, lightness=lightness)

    # Operation order is fixed: rule edges are inclusive, so rounding matters.
    delta = high - low
    saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
    if high == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) * 60
    elif high == g:
        hue = ((b - r) / delta + 2) * 60
    else:
        hue = ((r - g) / delta + 4) * 60
    return HSL(hue=hue, saturation=saturation, lightness=lightness)


def hue_distance(first: float, second: float) -> float:
    """Shortest angular distance between two hues, in degrees."""

    diff = abs(first - second)
    return min(diff, 360.0 - diff)


def classify(color_a: RGB, color_b: RGB) -> Harmony:
    """Return the first harmony rule satisfied by the pair."""

    hsl_a = to_hue_saturation_lightness(color_a)
    hsl_b = to_hue_saturation_lightness(color_b)

    if hsl_a.saturation < NEUTRAL_SATURATION or hsl_b.saturation < NEUTRAL_SATURATION:
        return Harmony.NEUTRAL

    diff = hue_distance(hsl_a.hue, hsl_b.hue)
    if diff <= 30:
        return Harmony.ANALOGOUS
    if 150 <= diff <= 210:
        return Harmony.COMPLEMENTARY
    if 105 <= diff <= 135:
        return Harmony.TRIADIC
    return Harmony.NONE


def harmony_score(color_a: RGB, color_b: RGB) -> int:
    """Points contributed by a single pair of garment colors."""

    harmony = classify(color_a, color_b)
    logger.debug("Harmony %s + %s: %s (+%d)", color_a, color_b, harmony.value, harmony.points)
    return harmony.points
