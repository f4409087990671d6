"""Offline-first journal store and writing analytics.

Provides the SyncCoordinator (entries, history, derived stats), the
RemoteStore protocol for canonical backends, and the pure analytics
functions it builds on: keyword analysis, streaks, word clouds, search and
export selection.
"""

from .analyzer import analyze_text, dominant_subcategory, summarize
from .config import AnalyticsConfig
from .export import ExportScope, select_for_export
from .history import record_sample
from .lexicon import CATEGORIES, LEXICON
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
)
from .search import search_entries
from .session import Session
from .store import MemoryRemoteStore, RemoteStore
from .streaks import STREAK_REWARDS, calculate_streaks, unlocked_rewards
from .sync import SyncCoordinator
from .wordcloud import build_word_cloud

__all__ = [
    "CATEGORIES",
    "LEXICON",
    "STREAK_REWARDS",
    "AnalyticsConfig",
    "CloudTerm",
    "Entry",
    "ExportRecord",
    "ExportScope",
    "MemoryRemoteStore",
    "RemoteResult",
    "RemoteRow",
    "RemoteStore",
    "SearchHit",
    "Session",
    "StreakReward",
    "StreakStats",
    "SyncCoordinator",
    "SyncStatus",
    "WordCountSample",
    "analyze_text",
    "build_word_cloud",
    "calculate_streaks",
    "dominant_subcategory",
    "record_sample",
    "search_entries",
    "select_for_export",
    "summarize",
    "unlocked_rewards",
]
