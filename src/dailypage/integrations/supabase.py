"""Supabase (PostgREST) client for the remote entry table.

Uses PostgREST's REST API with the project's anon/service key.
No external dependencies beyond the standard library. Requests are blocking,
so the async RemoteStore methods run them in the default executor.

Expected table::

    create table journal_entries (
        user_email text not null,
        date_key   text not null,
        content    text not null default '',
        word_count integer not null default 0,
        updated_at timestamptz not null default now(),
        primary key (user_email, date_key)
    );
"""

from __future__ import annotations

import asyncio
import functools
import json
import urllib.error
import urllib.parse
import urllib.request
from datetime import datetime
from typing import Any

from dailypage.core.config_schema import RemoteConfig
from dailypage.core.exceptions import ConfigurationError, RemoteUnavailableError
from dailypage.journal.models import RemoteRow

_SELECT_COLUMNS = "date_key,content,word_count,updated_at"


class SupabaseStore:
    """RemoteStore backed by one Supabase table, partitioned by a user column."""

    def __init__(
        self,
        url: str,
        api_key: str,
        *,
        table: str = "journal_entries",
        user_column: str = "user_email",
        timeout: float = 10,
    ):
        if not url or not api_key:
            raise ConfigurationError("Supabase url and api_key are required")
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.user_column = user_column
        self.timeout = timeout

    @classmethod
    def from_settings(cls, remote: RemoteConfig) -> SupabaseStore:
        """Build from the validated ``remote`` config section."""
        return cls(
            url=remote.url,
            api_key=remote.api_key,
            table=remote.table,
            user_column=remote.user_column,
            timeout=remote.timeout,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.url}/rest/v1/{self.table}"

    def _request(
        self,
        method: str,
        *,
        query: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
        prefer: str | None = None,
    ) -> Any:
        url = self.endpoint
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"

        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        data = None
        if payload is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(payload).encode("utf-8")

        req = urllib.request.Request(url=url, data=data, method=method.upper(), headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="ignore") if hasattr(e, "read") else ""
            raise RemoteUnavailableError(f"Supabase API {e.code}: {body or e.reason}") from e
        except urllib.error.URLError as e:
            raise RemoteUnavailableError(f"Supabase API request failed: {e}") from e
        except TimeoutError as e:
            raise RemoteUnavailableError(f"Supabase API request timed out after {self.timeout}s") from e

        if not raw:
            return None
        try:
            return json.loads(raw.decode("utf-8", errors="ignore"))
        except json.JSONDecodeError as e:
            raise RemoteUnavailableError(f"Supabase API returned invalid JSON: {e}") from e

    async def _run(self, func, *args, **kwargs) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    def _filters(self, user: str, date_key: str | None = None) -> dict[str, str]:
        filters = {self.user_column: f"eq.{user}"}
        if date_key is not None:
            filters["date_key"] = f"eq.{date_key}"
        return filters

    @staticmethod
    def _rows(payload: Any) -> list[RemoteRow]:
        if not isinstance(payload, list):
            raise RemoteUnavailableError(f"Unexpected Supabase response: {type(payload).__name__}")
        return [RemoteRow.from_dict(item) for item in payload if isinstance(item, dict)]

    # Sync API

    def upsert_sync(self, user: str, date_key: str, content: str, word_count: int, updated_at: datetime) -> None:
        self._request(
            "POST",
            query={"on_conflict": f"{self.user_column},date_key"},
            payload={
                self.user_column: user,
                "date_key": date_key,
                "content": content,
                "word_count": word_count,
                "updated_at": updated_at.isoformat(),
            },
            prefer="resolution=merge-duplicates,return=minimal",
        )

    def fetch_entries_sync(self, user: str) -> list[RemoteRow]:
        query = {"select": _SELECT_COLUMNS, **self._filters(user), "order": "date_key.asc"}
        return self._rows(self._request("GET", query=query))

    def fetch_entry_sync(self, user: str, date_key: str) -> RemoteRow | None:
        query = {"select": _SELECT_COLUMNS, **self._filters(user, date_key), "limit": "1"}
        rows = self._rows(self._request("GET", query=query))
        return rows[0] if rows else None

    def delete_sync(self, user: str, date_key: str) -> None:
        self._request("DELETE", query=self._filters(user, date_key), prefer="return=minimal")

    # RemoteStore protocol

    async def upsert(self, user: str, date_key: str, content: str, word_count: int, updated_at: datetime) -> None:
        await self._run(self.upsert_sync, user, date_key, content, word_count, updated_at)

    async def fetch_entries(self, user: str) -> list[RemoteRow]:
        return await self._run(self.fetch_entries_sync, user)

    async def fetch_entry(self, user: str, date_key: str) -> RemoteRow | None:
        return await self._run(self.fetch_entry_sync, user, date_key)

    async def delete(self, user: str, date_key: str) -> None:
        await self._run(self.delete_sync, user, date_key)
