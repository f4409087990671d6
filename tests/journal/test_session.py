"""Tests for dailypage.journal.session."""

import pytest

from dailypage.core.exceptions import NotAuthenticatedError
from dailypage.core.storage import LocalCache
from dailypage.journal.session import Session


class TestSession:
    @pytest.mark.asyncio
    async def test_signed_out_by_default(self, cache):
        session = Session(cache)
        assert not await session.is_logged_in()
        assert await session.current_user() is None

    @pytest.mark.asyncio
    async def test_login_logout(self, cache):
        session = Session(cache)
        assert await session.login("  alice@example.com ") == "alice@example.com"
        assert await session.current_user() == "alice@example.com"
        assert await session.is_logged_in()

        await session.logout()
        assert not await session.is_logged_in()

    @pytest.mark.asyncio
    async def test_blank_identity_rejected(self, cache):
        with pytest.raises(ValueError):
            await Session(cache).login("   ")

    @pytest.mark.asyncio
    async def test_require_user(self, cache):
        session = Session(cache)
        with pytest.raises(NotAuthenticatedError):
            await session.require_user()
        await session.login("alice")
        assert await session.require_user() == "alice"

    @pytest.mark.asyncio
    async def test_survives_restart(self, tmp_path):
        await Session(LocalCache(base_path=str(tmp_path))).login("alice")
        assert await Session(LocalCache(base_path=str(tmp_path))).current_user() == "alice"


@pytest.mark.asyncio
async def test_undecodable_identity_reads_as_signed_out(tmp_path):
    cache = LocalCache(base_path=str(tmp_path))
    session = Session(cache)
    await session.login("alice@example.com")
    (tmp_path / "session" / "_global" / "user.val").write_bytes(b"\xff\xfe\x00garbage")

    assert await session.current_user() is None
    with pytest.raises(NotAuthenticatedError):
        await session.require_user()
