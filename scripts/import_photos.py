"""Import every photo in a directory into the closet under one category."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from closet.config.settings import get_settings
from closet.db.session import create_engine, create_session_factory, init_db
from closet.errors import ImageDecodeError
from closet.imgproc.thumbnail import ThumbnailMaker
from closet.monitoring.logging import configure_logging
from closet.services.wardrobe import WardrobeService, resolve_category
from closet.storage.backend import LocalStorage

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".webp", ".bmp"}


async def import_directory(directory: Path, category: str) -> int:
    """Add all images found in ``directory``; return how many were stored."""

    settings = get_settings()
    resolved = resolve_category(category)
    engine = create_engine(settings.database_url)
    wardrobe = WardrobeService(
        LocalStorage(Path(settings.media_root)),
        thumbnails=ThumbnailMaker(settings.thumbnail_max_width, settings.thumbnail_quality),
    )
    imported = 0
    try:
        await init_db(engine)
        async with create_session_factory(engine)() as session:
            for path in sorted(directory.iterdir()):
                if path.suffix.lower() not in IMAGE_SUFFIXES:
                    continue
                data = await asyncio.to_thread(path.read_bytes)
                try:
                    await wardrobe.add_garment(
                        session,
                        file_name=path.name,
                        file_data=data,
                        category=resolved,
                    )
                except ImageDecodeError:
                    logger.warning("Skipping unreadable image %s", path)
                    continue
                imported += 1
    finally:
        await engine.dispose()
    return imported


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", type=Path)
    parser.add_argument("category", help="top, bottom, shoes, outerwear, accessory (or an alias)")
    args = parser.parse_args()

    configure_logging()
    count = asyncio.run(import_directory(args.directory, args.category))
    print(f"Imported {count} garment(s) into {args.category}.")


if __name__ == "__main__":
    main()
