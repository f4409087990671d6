"""Configuration dataclasses for journal analytics.

These are pure data containers with sensible defaults.
Override them from YAML config, env vars, or constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnalyticsConfig:
    """Settings for derived entry statistics.

    Attributes:
        cloud_max_terms: Most words shown in a word cloud.
        cloud_min_weight: Display weight of the least frequent cloud word.
        cloud_max_weight: Display weight of the most frequent cloud word.
        snippet_radius: Characters kept on each side of a search match.
        history_backfill_ms: Offset of the synthetic zero point that starts
            a new word-count history.
    """

    cloud_max_terms: int = 50
    cloud_min_weight: float = 16
    cloud_max_weight: float = 36
    snippet_radius: int = 80
    history_backfill_ms: int = 1000

    def __post_init__(self):
        if self.cloud_max_terms < 1:
            raise ValueError("cloud_max_terms must be at least 1")
        if self.cloud_min_weight > self.cloud_max_weight:
            raise ValueError("cloud_min_weight cannot exceed cloud_max_weight")
        if self.snippet_radius < 0 or self.history_backfill_ms < 0:
            raise ValueError("snippet_radius and history_backfill_ms must be non-negative")
