"""RemoteStore protocol: the contract for the canonical entry store.

The remote store is partitioned by user identity and keyed by date key.
Implementations signal failure by raising (any exception); "no such row" is
a normal answer (``None``), never an error.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from dailypage.core.exceptions import RemoteUnavailableError

from .models import RemoteRow


@runtime_checkable
class RemoteStore(Protocol):
    """Protocol for the multi-user remote entry store."""

    async def upsert(
        self,
        user: str,
        date_key: str,
        content: str,
        word_count: int,
        updated_at: datetime,
    ) -> None:
        """Insert or replace the row for ``(user, date_key)``."""
        ...

    async def fetch_entries(self, user: str) -> list[RemoteRow]:
        """Return every row stored for ``user``."""
        ...

    async def fetch_entry(self, user: str, date_key: str) -> RemoteRow | None:
        """Return the row for ``(user, date_key)``, or None if there is none."""
        ...

    async def delete(self, user: str, date_key: str) -> None:
        """Remove the row for ``(user, date_key)``. Deleting a missing row is not an error."""
        ...


class MemoryRemoteStore:
    """In-process RemoteStore with a switch for simulating outages.

    Example::

        remote = MemoryRemoteStore()
        remote.online = False   # every call now raises RemoteUnavailableError
    """

    def __init__(self, online: bool = True):
        self.online = online
        self.rows: dict[tuple[str, str], RemoteRow] = {}
        self.calls: list[str] = []

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if not self.online:
            raise RemoteUnavailableError(f"remote store offline ({op})")

    async def upsert(
        self,
        user: str,
        date_key: str,
        content: str,
        word_count: int,
        updated_at: datetime,
    ) -> None:
        self._check("upsert")
        self.rows[(user, date_key)] = RemoteRow(
            date_key=date_key,
            content=content,
            word_count=word_count,
            updated_at=updated_at.isoformat(),
        )

    async def fetch_entries(self, user: str) -> list[RemoteRow]:
        self._check("fetch_entries")
        return [row for (owner, _), row in sorted(self.rows.items()) if owner == user]

    async def fetch_entry(self, user: str, date_key: str) -> RemoteRow | None:
        self._check("fetch_entry")
        return self.rows.get((user, date_key))

    async def delete(self, user: str, date_key: str) -> None:
        self._check("delete")
        self.rows.pop((user, date_key), None)
