"""
Local filesystem cache backend.

One UTF-8 file per key under ``base_path``. Writes land in a temp file that
is renamed over the target, so a reader never sees a half-written value.
"""

import os
from pathlib import Path

import aiofiles
import aiofiles.os
from loguru import logger

from dailypage.core.exceptions import CacheCorruptError

from .base import CacheBackend, StoragePermissionError

_VALUE_SUFFIX = ".val"
_TMP_SUFFIX = ".tmp"


class LocalCache(CacheBackend):
    """Durable cache backed by the local filesystem."""

    def __init__(self, base_path: str = "~/.dailypage-data/cache", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        """Resolve a cache key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Cache key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Cache key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Cache key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe cache key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / (raw_key + _VALUE_SUFFIX)).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe cache key '{key}': path traversal is not allowed.") from e
        return full_path

    async def get(self, key: str) -> str | None:
        path = self._get_full_path(key)
        if not path.exists():
            return None
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CacheCorruptError(f"Cache key '{key}' is not valid UTF-8: {e}") from e

    async def set(self, key: str, value: str) -> None:
        path = self._get_full_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + _TMP_SUFFIX)

        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(value)
            await aiofiles.os.replace(tmp_path, path)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e

    async def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        if not path.exists():
            return False
        await aiofiles.os.remove(path)
        return True

    async def scan_prefix(self, prefix: str) -> list[tuple[str, str]]:
        base_len = len(str(self.base_path)) + 1
        keys = []

        for root, _dirs, files in os.walk(self.base_path):
            for file in files:
                if not file.endswith(_VALUE_SUFFIX):
                    continue
                full_path = Path(root) / file
                key = str(full_path)[base_len : -len(_VALUE_SUFFIX)].replace(os.sep, "/")
                if prefix and not key.startswith(prefix):
                    continue
                keys.append(key)

        results = []
        for key in sorted(keys):
            try:
                value = await self.get(key)
            except CacheCorruptError as e:
                logger.warning(f"{e}; skipping")
                continue
            if value is None:
                logger.debug(f"Cache key '{key}' vanished during scan")
                continue
            results.append((key, value))
        return results
