"""Shared type aliases used across dailypage."""

DateKey = str  # YYYY-MM-DD
EntryIndex = dict[DateKey, int]
AnalysisResult = dict[str, dict[str, int]]
