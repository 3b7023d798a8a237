"""Shared fixtures for the closet test-suite."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import AsyncIterator, Callable

import pytest
import pytest_asyncio
from PIL import Image
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from closet.db.session import create_engine, create_session_factory, init_db
from closet.services.wardrobe import WardrobeService
from closet.storage.backend import LocalStorage

ImageFactory = Callable[..., bytes]


@pytest.fixture
def image_bytes() -> ImageFactory:
    """Return a factory producing encoded single-colour images."""

    def _make(color: tuple[int, int, int], size: tuple[int, int] = (100, 100), fmt: str = "PNG") -> bytes:
        buffer = BytesIO()
        Image.new("RGB", size, color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'closet.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_session_factory(engine)() as session:
        yield session


@pytest.fixture
def media_root(tmp_path: Path) -> Path:
    return tmp_path / "media"


@pytest.fixture
def wardrobe(media_root: Path) -> WardrobeService:
    return WardrobeService(LocalStorage(media_root))
