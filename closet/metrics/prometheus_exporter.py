"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


outfit_generation_total = Counter(
    "outfit_generation_total",
    "Total number of outfit generation requests.",
)

outfit_generation_empty_total = Counter(
    "outfit_generation_empty_total",
    "Outfit generation requests answered with no outfits (no tops or no bottoms).",
)

garments_added_total = Counter(
    "garments_added_total",
    "Garments saved to the closet.",
    ["category"],
)

garments_removed_total = Counter(
    "garments_removed_total",
    "Garments removed from the closet.",
)
