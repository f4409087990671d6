"""Tests for dailypage.journal.config."""

import pytest

from dailypage.journal.config import AnalyticsConfig


class TestAnalyticsConfig:
    def test_defaults(self):
        config = AnalyticsConfig()
        assert config.cloud_max_terms == 50
        assert config.cloud_min_weight == 16
        assert config.cloud_max_weight == 36
        assert config.snippet_radius == 80
        assert config.history_backfill_ms == 1000

    def test_custom_values(self):
        config = AnalyticsConfig(cloud_max_terms=10, snippet_radius=20)
        assert config.cloud_max_terms == 10
        assert config.snippet_radius == 20

    def test_rejects_inverted_weights(self):
        with pytest.raises(ValueError, match="cloud_min_weight"):
            AnalyticsConfig(cloud_min_weight=40, cloud_max_weight=10)

    def test_rejects_zero_terms(self):
        with pytest.raises(ValueError, match="cloud_max_terms"):
            AnalyticsConfig(cloud_max_terms=0)

    def test_rejects_negative_radius(self):
        with pytest.raises(ValueError):
            AnalyticsConfig(snippet_radius=-1)
