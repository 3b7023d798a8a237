"""Binary media storage."""

from .backend import LocalStorage, StorageBackend

__all__ = ["LocalStorage", "StorageBackend"]
