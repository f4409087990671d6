"""Substring search over entry content.

A linear scan: journals are small enough that an index would cost more
than it saves.
"""

from __future__ import annotations

from collections.abc import Mapping

from dailypage.core.utils.text import make_snippet

from .models import SearchHit


def search_entries(entries: Mapping[str, str], query: str, radius: int = 80) -> list[SearchHit]:
    """Find entries containing ``query`` (case-insensitive).

    Args:
        entries: Date key -> content.
        query: Text to look for. Blank queries match nothing.
        radius: Characters of context on each side of the first match.

    Returns:
        Hits sorted newest date first.
    """
    needle = query.strip()
    if not needle:
        return []

    lowered = needle.lower()
    hits = [
        SearchHit(date_key=date_key, snippet=make_snippet(content, needle, radius=radius))
        for date_key, content in entries.items()
        if content and lowered in content.lower()
    ]
    hits.sort(key=lambda hit: hit.date_key, reverse=True)
    return hits
