"""Core data models for the journal store.

Plain dataclasses and enums; nothing here knows about storage or the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from dailypage.core.utils.text import count_words

T = TypeVar("T")

DATE_KEY_FORMAT = "%Y-%m-%d"


def parse_date_key(date_key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key. Raises ValueError for anything else."""
    return datetime.strptime(date_key, DATE_KEY_FORMAT).date()


def to_date_key(day: date | datetime) -> str:
    """Render a date (or the date part of a datetime) as ``YYYY-MM-DD``."""
    if isinstance(day, datetime):
        day = day.date()
    return day.strftime(DATE_KEY_FORMAT)


class SyncStatus(Enum):
    """Where the most recent save ended up."""

    SYNCED = "synced"  # Local cache and remote store both hold it
    LOCAL_ONLY = "local_only"  # Remote write failed; not saved remotely yet


@dataclass
class Entry:
    """The journal text for one user on one day.

    ``word_count`` is always derived from ``content``.
    """

    date_key: str
    content: str = ""
    updated_at: datetime | None = None

    @property
    def word_count(self) -> int:
        return count_words(self.content)

    @property
    def is_empty(self) -> bool:
        return self.word_count == 0


@dataclass(frozen=True)
class WordCountSample:
    """One point on an entry's word-count chart. ``timestamp`` is epoch milliseconds."""

    timestamp: int
    word_count: int

    def to_dict(self) -> dict[str, int]:
        return {"timestamp": self.timestamp, "word_count": self.word_count}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WordCountSample:
        return cls(timestamp=int(data["timestamp"]), word_count=int(data["word_count"]))


@dataclass
class RemoteRow:
    """A row as read back from the remote entry table."""

    date_key: str
    content: str = ""
    word_count: int | None = None
    updated_at: str | None = None

    def __post_init__(self):
        if self.content is None:
            self.content = ""
        if self.word_count is None:
            self.word_count = count_words(self.content)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RemoteRow:
        return cls(
            date_key=str(data["date_key"]),
            content=data.get("content") or "",
            word_count=data.get("word_count"),
            updated_at=data.get("updated_at"),
        )


@dataclass
class RemoteResult(Generic[T]):
    """Outcome of a wrapped remote call.

    Either ``ok`` with a ``value`` (which may legitimately be None, e.g. "no
    such row"), or not ok with the ``error`` that was caught.
    """

    ok: bool
    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: T | None = None) -> RemoteResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Exception) -> RemoteResult[T]:
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class StreakStats:
    current_streak: int = 0
    longest_streak: int = 0


@dataclass(frozen=True)
class StreakReward:
    """A milestone unlocked by the longest writing streak."""

    days: int
    title: str
    description: str
    shape: str

    def is_unlocked(self, longest_streak: int) -> bool:
        return longest_streak >= self.days


@dataclass(frozen=True)
class CloudTerm:
    word: str
    count: int
    weight: float


@dataclass(frozen=True)
class SearchHit:
    """A matching entry with a highlighted excerpt."""

    date_key: str
    snippet: str


@dataclass(frozen=True)
class ExportRecord:
    date_key: str
    content: str
    word_count: int = 0
