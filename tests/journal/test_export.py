"""Tests for dailypage.journal.export."""

from datetime import date

import pytest

from dailypage.journal.export import ExportScope, select_for_export, week_range

ENTRIES = {
    "2024-03-14": "thursday words here",  # reference day (a Thursday)
    "2024-03-10": "sunday start",
    "2024-03-16": "saturday end",
    "2024-03-17": "next sunday",
    "2024-03-09": "previous saturday",
    "2024-02-29": "leap day",
    "2023-03-14": "a year ago",
    "2024-03-12": "   ",
}
REFERENCE = date(2024, 3, 14)


def test_week_range_sunday_to_saturday():
    assert week_range(REFERENCE) == (date(2024, 3, 10), date(2024, 3, 16))
    assert week_range(date(2024, 3, 10)) == (date(2024, 3, 10), date(2024, 3, 16))
    assert week_range(date(2024, 3, 16)) == (date(2024, 3, 10), date(2024, 3, 16))


def test_today():
    records = select_for_export(ENTRIES, ExportScope.TODAY, REFERENCE)
    assert [r.date_key for r in records] == ["2024-03-14"]
    assert records[0].word_count == 3


def test_current_week():
    records = select_for_export(ENTRIES, ExportScope.CURRENT_WEEK, REFERENCE)
    assert [r.date_key for r in records] == ["2024-03-10", "2024-03-14", "2024-03-16"]


def test_current_month_same_year_only():
    records = select_for_export(ENTRIES, "current_month", REFERENCE)
    assert [r.date_key for r in records] == ["2024-03-09", "2024-03-10", "2024-03-14", "2024-03-16", "2024-03-17"]


def test_all_sorted_ascending_skips_blank():
    records = select_for_export(ENTRIES, ExportScope.ALL, REFERENCE)
    keys = [r.date_key for r in records]
    assert keys == sorted(keys)
    assert "2024-03-12" not in keys
    assert len(keys) == 7


def test_unknown_scope():
    with pytest.raises(ValueError):
        select_for_export(ENTRIES, "fortnight", REFERENCE)


def test_empty():
    assert select_for_export({}, ExportScope.ALL, REFERENCE) == []
