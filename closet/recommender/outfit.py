"""Value types shared by the outfit sampler and scorer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from closet.recommender.categories import Category
from closet.recommender.harmony import RGB


@dataclass(frozen=True, slots=True)
class CatalogueItem:
    """Read-only view of a stored garment, as seen by the recommender."""

    garment_id: int
    category: Category
    dominant_color: RGB | None = None


class Catalogue:
    """Garments partitioned into one list per category."""

    def __init__(self, items: Iterable[CatalogueItem] = ()) -> None:
        self._by_category: dict[Category, list[CatalogueItem]] = {
            category: [] for category in Category
        }
        for item in items:
            self._by_category[item.category].append(item)

    def __getitem__(self, category: Category) -> list[CatalogueItem]:
        return self._by_category[category]

    def __iter__(self) -> Iterator[CatalogueItem]:
        for category in Category:
            yield from self._by_category[category]

    def __len__(self) -> int:
        return sum(len(items) for items in self._by_category.values())

    def can_build_outfits(self) -> bool:
        """Return ``True`` when every required slot has at least one garment."""

        return all(self._by_category[category] for category in Category if category.is_required)


@dataclass(slots=True)
class Outfit:
    """One sampled combination of garments with its derived score."""

    pieces: dict[Category, CatalogueItem] = field(default_factory=dict)
    score: int = 0

    def get(self, category: Category) -> CatalogueItem | None:
        """Return the garment worn in ``category`` or ``None``."""

        return self.pieces.get(category)

    def slots(self) -> list[tuple[Category, CatalogueItem]]:
        """Filled slots in fixed category order."""

        return [(category, self.pieces[category]) for category in Category if category in self.pieces]

    def colors(self) -> list[RGB]:
        """Dominant colors of the filled slots, skipping garments without one."""

        return [item.dominant_color for _, item in self.slots() if item.dominant_color is not None]
