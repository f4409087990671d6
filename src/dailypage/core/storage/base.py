"""
Abstract base class for cache backends.

A cache backend is a durable key -> text mapping with prefix scans. Keys are
``/``-separated strings; callers embed their own partitioning (user, date)
in the key.
"""

from abc import ABC, abstractmethod


class CacheBackend(ABC):
    """Abstract base class for key/value cache backends."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent.

        Raises:
            CacheCorruptError: If the stored bytes cannot be read back as text.
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if deleted, False if it didn't exist."""

    @abstractmethod
    async def scan_prefix(self, prefix: str) -> list[tuple[str, str]]:
        """Return ``(key, value)`` pairs whose key starts with ``prefix``, sorted by key.

        Keys whose value cannot be read back are left out.
        """

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None


class StorageError(Exception):
    """Base exception for storage errors."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""
