"""Cache key layout and value codecs.

Keys are ``namespace/scope/name`` where scope is the percent-encoded user
identity (or ``_global``). Encoding keeps keys filesystem-safe and distinct
per user: ``a/b@x.com`` and ``a%2Fb@x.com`` never map to the same scope.
"""

from __future__ import annotations

import json
import urllib.parse
from datetime import datetime

from dailypage.core.exceptions import CacheCorruptError

from .models import Entry, WordCountSample

ENTRY_NAMESPACE = "entry"
HISTORY_NAMESPACE = "history"
SESSION_NAMESPACE = "session"
GLOBAL_SCOPE = "_global"


def encode_scope(user: str) -> str:
    # "." is escaped too so a scope can never be "." or ".."
    return urllib.parse.quote(user, safe="").replace(".", "%2E")


def cache_key(namespace: str, user: str | None, name: str) -> str:
    scope = GLOBAL_SCOPE if user is None else encode_scope(user)
    return f"{namespace}/{scope}/{name}"


def scope_prefix(namespace: str, user: str | None) -> str:
    """Prefix matching every key of ``namespace`` owned by ``user``."""
    return cache_key(namespace, user, "")


def entry_key(user: str, date_key: str) -> str:
    return cache_key(ENTRY_NAMESPACE, user, date_key)


def history_key(user: str, date_key: str) -> str:
    return cache_key(HISTORY_NAMESPACE, user, date_key)


def name_from_key(key: str) -> str:
    """The trailing ``name`` part of a key (the date key for entries)."""
    return key.rsplit("/", 1)[-1]


# ── Value codecs ────────────────────────────────────────────────────


def encode_entry(entry: Entry) -> str:
    return json.dumps(
        {
            "content": entry.content,
            "updated_at": entry.updated_at.isoformat() if entry.updated_at else None,
        }
    )


def decode_entry(date_key: str, raw: str) -> Entry:
    """Decode a cached entry. Raises CacheCorruptError if it doesn't parse."""
    try:
        data = json.loads(raw)
        content = data["content"]
        if not isinstance(content, str):
            raise TypeError(f"content is {type(content).__name__}, expected str")
        updated_at = datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else None
    except (ValueError, KeyError, TypeError) as e:
        raise CacheCorruptError(f"Unreadable cached entry for {date_key}: {e}") from e
    return Entry(date_key=date_key, content=content, updated_at=updated_at)


def encode_history(samples: list[WordCountSample]) -> str:
    return json.dumps([s.to_dict() for s in samples])


def decode_history(date_key: str, raw: str) -> list[WordCountSample]:
    """Decode cached history. Raises CacheCorruptError if it doesn't parse."""
    try:
        data = json.loads(raw)
        if not isinstance(data, list):
            raise TypeError(f"history is {type(data).__name__}, expected list")
        return [WordCountSample.from_dict(item) for item in data]
    except (ValueError, KeyError, TypeError) as e:
        raise CacheCorruptError(f"Unreadable word-count history for {date_key}: {e}") from e
