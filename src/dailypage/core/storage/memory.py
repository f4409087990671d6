"""In-process cache backend. Nothing survives the process."""

from .base import CacheBackend


class MemoryCache(CacheBackend):
    """Dict-backed cache, handy for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None, **config):
        super().__init__(**config)
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def scan_prefix(self, prefix: str) -> list[tuple[str, str]]:
        return sorted((k, v) for k, v in self._data.items() if k.startswith(prefix))

    def __len__(self) -> int:
        return len(self._data)
