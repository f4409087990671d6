"""Choosing which entries go into an export.

Rendering (PDF, text files) is somebody else's job; this only selects and
orders the records.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, timedelta
from enum import Enum

from dailypage.core.utils.text import count_words

from .models import ExportRecord, parse_date_key


class ExportScope(Enum):
    TODAY = "today"
    CURRENT_WEEK = "current_week"
    CURRENT_MONTH = "current_month"
    ALL = "all"


def week_range(day: date) -> tuple[date, date]:
    """Sunday through Saturday of the week containing ``day``."""
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def _in_scope(day: date, scope: ExportScope, reference: date) -> bool:
    if scope is ExportScope.TODAY:
        return day == reference
    if scope is ExportScope.CURRENT_WEEK:
        start, end = week_range(reference)
        return start <= day <= end
    if scope is ExportScope.CURRENT_MONTH:
        return (day.year, day.month) == (reference.year, reference.month)
    return True


def select_for_export(
    entries: Mapping[str, str],
    scope: ExportScope | str = ExportScope.ALL,
    reference: date | None = None,
) -> list[ExportRecord]:
    """Entries within ``scope`` of ``reference``, oldest first.

    Args:
        entries: Date key -> content.
        scope: An ExportScope or its string value.
        reference: The day the scope is relative to. Defaults to today.
    """
    scope = ExportScope(scope)
    reference = reference or date.today()

    records = []
    for date_key in sorted(entries):
        content = entries[date_key]
        word_count = count_words(content)
        if word_count == 0:
            continue
        if _in_scope(parse_date_key(date_key), scope, reference):
            records.append(ExportRecord(date_key=date_key, content=content, word_count=word_count))
    return records
