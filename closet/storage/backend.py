"""Storage backends for garment photos and thumbnails."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path


class StorageBackend(ABC):
    """Interface for saving and loading binary media."""

    @abstractmethod
    async def save(self, key: str, data: bytes) -> str:
        """Persist ``data`` under ``key`` and return its storage path."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Return bytes stored at ``path``."""

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove the object at ``path`` if present."""


class LocalStorage(StorageBackend):
    """Keeps media as plain files under a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    async def save(self, key: str, data: bytes) -> str:
        path = self._root / key
        await asyncio.to_thread(self._write_file, path, data)
        return str(path)

    async def read(self, path: str) -> bytes:
        return await asyncio.to_thread(Path(path).read_bytes)

    async def delete(self, path: str) -> None:
        await asyncio.to_thread(Path(path).unlink, missing_ok=True)

    @staticmethod
    def _write_file(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
