"""Who is signed in on this device.

Authentication itself happens elsewhere; this only remembers the identity it
produced so the journal can be partitioned by it across restarts.
"""

from __future__ import annotations

from loguru import logger

from dailypage.core.exceptions import CacheCorruptError, NotAuthenticatedError
from dailypage.core.storage import CacheBackend

from .keys import SESSION_NAMESPACE, cache_key

_USER_KEY = cache_key(SESSION_NAMESPACE, None, "user")


class Session:
    """Signed-in identity persisted in the local cache."""

    def __init__(self, cache: CacheBackend):
        self.cache = cache

    async def login(self, identity: str) -> str:
        identity = (identity or "").strip()
        if not identity:
            raise ValueError("identity must be a non-empty string")
        await self.cache.set(_USER_KEY, identity)
        logger.info(f"Signed in as {identity}")
        return identity

    async def logout(self) -> None:
        await self.cache.delete(_USER_KEY)

    async def current_user(self) -> str | None:
        try:
            identity = await self.cache.get(_USER_KEY)
        except CacheCorruptError as e:
            logger.warning(f"{e}; treating as signed out")
            return None
        return identity or None

    async def is_logged_in(self) -> bool:
        return await self.current_user() is not None

    async def require_user(self) -> str:
        """The signed-in identity. Raises NotAuthenticatedError when signed out."""
        identity = await self.current_user()
        if identity is None:
            raise NotAuthenticatedError("Not logged in")
        return identity
