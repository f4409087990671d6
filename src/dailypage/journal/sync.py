"""Offline-first coordination between the local cache and the remote store.

Every read tries the remote store first. When it answers, its answer wins
and is mirrored into the local cache; when it doesn't, the local cache
answers instead. Saves always land in the local cache before the remote is
tried, so an unreachable remote costs "not synced yet", never "lost".

Reachability decides authority, not timestamps. When enumerating, the only
local contribution on a successful remote call is date keys the remote
doesn't have at all (entries written while offline). Stale local copies are
never used to override or remove remote rows.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from datetime import date, datetime, timezone
from typing import Any, TypeVar

from loguru import logger

from dailypage.core.exceptions import CacheCorruptError, NotAuthenticatedError
from dailypage.core.storage import CacheBackend
from dailypage.core.types import AnalysisResult, EntryIndex

from . import streaks as streak_calc
from .analyzer import analyze_text
from .config import AnalyticsConfig
from .export import ExportScope, select_for_export
from .history import record_sample
from .keys import (
    ENTRY_NAMESPACE,
    decode_entry,
    decode_history,
    encode_entry,
    encode_history,
    entry_key,
    history_key,
    name_from_key,
    scope_prefix,
)
from .models import (
    CloudTerm,
    Entry,
    ExportRecord,
    RemoteResult,
    RemoteRow,
    SearchHit,
    StreakReward,
    StreakStats,
    SyncStatus,
    WordCountSample,
    parse_date_key,
)
from .search import search_entries
from .store import RemoteStore
from .wordcloud import build_word_cloud

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class SyncCoordinator:
    """The journal's public surface: entries, history and derived stats.

    Args:
        cache: Local cache; always holds a mirror of what this device has seen.
        remote: Canonical remote store.
        clock: Returns the current time (timezone-aware). Defaults to UTC now.
        config: Analytics knobs.

    Every operation takes the user identity explicitly. A missing identity
    raises NotAuthenticatedError; remote failures are never raised.
    """

    def __init__(
        self,
        cache: CacheBackend,
        remote: RemoteStore,
        clock: Callable[[], datetime] | None = None,
        config: AnalyticsConfig | None = None,
    ):
        self.cache = cache
        self.remote = remote
        self.clock = clock or _utcnow
        self.config = config or AnalyticsConfig()

    # ── Preconditions ───────────────────────────────────────────────

    @staticmethod
    def _require_user(user: str | None) -> str:
        if user is None or not str(user).strip():
            raise NotAuthenticatedError("Not logged in")
        return user

    @staticmethod
    def _require_date_key(date_key: str) -> str:
        parse_date_key(date_key)
        return date_key

    # ── Remote wrapper ──────────────────────────────────────────────

    async def _call_remote(self, op: str, func: Callable[..., Awaitable[T]], *args: Any) -> RemoteResult[T]:
        """Run a remote call, turning any failure into a failed RemoteResult."""
        try:
            value = await func(*args)
        except Exception as e:
            logger.warning(f"Remote store unavailable during {op}: {e}")
            return RemoteResult.failure(e)
        return RemoteResult.success(value)

    # ── Local cache helpers ─────────────────────────────────────────

    async def _read_cached_entry(self, user: str, date_key: str) -> Entry | None:
        try:
            raw = await self.cache.get(entry_key(user, date_key))
            if raw is None:
                return None
            return decode_entry(date_key, raw)
        except CacheCorruptError as e:
            logger.warning(f"{e}; treating as absent")
            return None

    async def _write_cached_entry(self, user: str, entry: Entry) -> None:
        key = entry_key(user, entry.date_key)
        if entry.is_empty:
            await self.cache.delete(key)
        else:
            await self.cache.set(key, encode_entry(entry))

    async def _cached_entries(self, user: str) -> dict[str, Entry]:
        """Every non-empty cached entry for ``user``, by date key."""
        entries = {}
        for key, raw in await self.cache.scan_prefix(scope_prefix(ENTRY_NAMESPACE, user)):
            date_key = name_from_key(key)
            try:
                entry = decode_entry(date_key, raw)
            except CacheCorruptError as e:
                logger.warning(f"{e}; skipping")
                continue
            if not entry.is_empty:
                entries[date_key] = entry
        return entries

    async def _resolved_entries(self, user: str) -> tuple[list[RemoteRow] | None, dict[str, Entry]]:
        """Remote rows (None when unreachable) plus the cached entries."""
        result = await self._call_remote("fetch_entries", self.remote.fetch_entries, user)
        cached = await self._cached_entries(user)
        if not result.ok:
            logger.info(f"Listing entries for {user} from local cache only")
            return None, cached
        return list(result.value or []), cached

    # ── Entries ─────────────────────────────────────────────────────

    async def get_entry(self, user: str | None, date_key: str) -> str:
        """Text of the entry for ``date_key``, or ``""`` if there is none."""
        user = self._require_user(user)
        self._require_date_key(date_key)

        result = await self._call_remote("fetch_entry", self.remote.fetch_entry, user, date_key)
        if result.ok:
            row = result.value
            content = row.content if row is not None else ""
            updated_at = _parse_timestamp(row.updated_at) if row is not None else None
            await self._write_cached_entry(user, Entry(date_key, content, updated_at=updated_at))
            return content

        cached = await self._read_cached_entry(user, date_key)
        logger.info(f"Serving {date_key} from local cache")
        return cached.content if cached is not None else ""

    async def save_entry(self, user: str | None, date_key: str, text: str | None) -> SyncStatus:
        """Persist the entry for ``date_key``; empty text deletes it.

        Returns SYNCED when the remote store accepted the write, LOCAL_ONLY
        when only the local cache has it.
        """
        user = self._require_user(user)
        self._require_date_key(date_key)

        now = self.clock()
        entry = Entry(date_key, text or "", updated_at=now)

        await self._write_cached_entry(user, entry)
        await self._track_history(user, date_key, entry.word_count, now)

        if entry.is_empty:
            result = await self._call_remote("delete", self.remote.delete, user, date_key)
        else:
            result = await self._call_remote(
                "upsert", self.remote.upsert, user, date_key, entry.content, entry.word_count, now
            )

        if result.ok:
            logger.debug(f"Synced {date_key} ({entry.word_count} words)")
            return SyncStatus.SYNCED
        logger.info(f"Saved {date_key} locally; remote sync pending")
        return SyncStatus.LOCAL_ONLY

    async def list_entries(self, user: str | None) -> EntryIndex:
        """Date key -> word count for every non-empty entry, sorted by date."""
        user = self._require_user(user)
        rows, cached = await self._resolved_entries(user)

        if rows is None:
            index = {date_key: entry.word_count for date_key, entry in cached.items()}
        else:
            index = {row.date_key: row.word_count for row in rows if row.word_count > 0}
            remote_keys = {row.date_key for row in rows}
            for date_key, entry in cached.items():
                if date_key not in remote_keys:
                    index[date_key] = entry.word_count
        return dict(sorted(index.items()))

    async def entries_with_content(self, user: str | None) -> dict[str, str]:
        """Date key -> content for every non-empty entry, same merge rules as ``list_entries``."""
        user = self._require_user(user)
        rows, cached = await self._resolved_entries(user)

        if rows is None:
            contents = {date_key: entry.content for date_key, entry in cached.items()}
        else:
            contents = {row.date_key: row.content for row in rows if row.word_count > 0}
            remote_keys = {row.date_key for row in rows}
            for date_key, entry in cached.items():
                if date_key not in remote_keys:
                    contents[date_key] = entry.content
        return dict(sorted(contents.items()))

    # ── Word-count history ──────────────────────────────────────────

    async def get_history(self, user: str | None, date_key: str) -> list[WordCountSample]:
        user = self._require_user(user)
        try:
            raw = await self.cache.get(history_key(user, date_key))
            if raw is None:
                return []
            return decode_history(date_key, raw)
        except CacheCorruptError as e:
            logger.warning(f"{e}; starting a fresh history")
            return []

    async def save_history(self, user: str | None, date_key: str, samples: Iterable[WordCountSample]) -> None:
        """Replace the stored history. Timestamps must not decrease."""
        user = self._require_user(user)
        samples = list(samples)
        for prev, cur in zip(samples, samples[1:]):
            if cur.timestamp < prev.timestamp:
                raise ValueError(f"history timestamps must not decrease ({prev.timestamp} > {cur.timestamp})")
        await self.cache.set(history_key(user, date_key), encode_history(samples))

    async def _track_history(self, user: str, date_key: str, word_count: int, now: datetime) -> None:
        samples = await self.get_history(user, date_key)
        updated = record_sample(
            samples,
            word_count,
            now_ms=int(now.timestamp() * 1000),
            backfill_ms=self.config.history_backfill_ms,
        )
        if updated != samples or word_count == 0:
            await self.save_history(user, date_key, updated)

    # ── Derived statistics ──────────────────────────────────────────

    async def get_streaks(self, user: str | None, today: date | None = None) -> StreakStats:
        """Current and longest writing streak. ``today`` defaults to the clock's local date."""
        index = await self.list_entries(user)
        today = today or self.clock().astimezone().date()
        return streak_calc.calculate_streaks(index, today=today)

    async def unlocked_rewards(self, user: str | None, today: date | None = None) -> list[StreakReward]:
        stats = await self.get_streaks(user, today=today)
        return streak_calc.unlocked_rewards(stats.longest_streak)

    async def analyze_entry(self, user: str | None, date_key: str) -> AnalysisResult:
        return analyze_text(await self.get_entry(user, date_key))

    async def word_cloud(self, user: str | None, date_key: str) -> list[CloudTerm]:
        content = await self.get_entry(user, date_key)
        return build_word_cloud(
            content,
            max_terms=self.config.cloud_max_terms,
            min_weight=self.config.cloud_min_weight,
            max_weight=self.config.cloud_max_weight,
        )

    async def search(self, user: str | None, query: str) -> list[SearchHit]:
        user = self._require_user(user)
        if not query or not query.strip():
            return []
        contents = await self.entries_with_content(user)
        return search_entries(contents, query, radius=self.config.snippet_radius)

    async def export_entries(
        self,
        user: str | None,
        scope: ExportScope | str = ExportScope.ALL,
        reference: date | None = None,
    ) -> list[ExportRecord]:
        """Entries in ``scope`` around ``reference``, oldest first, ready for a renderer."""
        contents = await self.entries_with_content(user)
        reference = reference or self.clock().astimezone().date()
        return select_for_export(contents, scope, reference)
