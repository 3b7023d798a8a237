"""Print today's outfit suggestions for the configured closet."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Iterable

from closet.config.settings import get_settings
from closet.db.session import create_engine, create_session_factory, init_db
from closet.monitoring.logging import configure_logging
from closet.services.outfit import OutfitService, OutfitSuggestion
from closet.services.wardrobe import WardrobeService
from closet.storage.backend import LocalStorage


def _format_suggestion(suggestion: OutfitSuggestion) -> str:
    pieces = ", ".join(
        f"{category.value} #{garment.id}" for category, garment in suggestion.pieces.items()
    )
    return f"{suggestion.label} [{suggestion.score:>3}] {pieces}"


def print_suggestions(suggestions: Iterable[OutfitSuggestion]) -> None:
    for suggestion in suggestions:
        print(_format_suggestion(suggestion))


async def run(count: int | None) -> list[OutfitSuggestion]:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    try:
        await init_db(engine)
        wardrobe = WardrobeService(LocalStorage(Path(settings.media_root)))
        service = OutfitService(wardrobe, default_count=settings.outfit_count)
        async with create_session_factory(engine)() as session:
            return await service.suggest(session, count=count)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-n", "--count", type=int, default=None, help="number of outfits to draw")
    args = parser.parse_args()

    configure_logging()
    suggestions = asyncio.run(run(args.count))
    if not suggestions:
        print("Add at least one top and one bottom to get outfit ideas.")
        return
    print_suggestions(suggestions)


if __name__ == "__main__":
    main()
