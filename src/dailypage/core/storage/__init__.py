"""
Cache backends for dailypage.

Provides an async key/value cache interface with a durable local filesystem
implementation and an in-memory one.
"""

from .base import (
    CacheBackend,
    StorageError,
    StoragePermissionError,
)
from .local import LocalCache
from .memory import MemoryCache

__all__ = [
    "CacheBackend",
    "LocalCache",
    "MemoryCache",
    "StorageError",
    "StoragePermissionError",
]
