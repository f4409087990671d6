"""Tests for dailypage.journal.factory."""

import os
from pathlib import Path

import pytest
import yaml

from dailypage.core.config import Config, reset_config
from dailypage.core.exceptions import ConfigurationError
from dailypage.core.storage import LocalCache
from dailypage.integrations.supabase import SupabaseStore
from dailypage.journal.config import AnalyticsConfig
from dailypage.journal.factory import build_cache, build_coordinator, build_session
from dailypage.journal.session import Session


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_config()
    yield
    reset_config()


def test_build_coordinator_from_file(tmp_config_file, tmp_dir):
    config = Config(config_file=tmp_config_file, data_dir=tmp_dir)
    coordinator = build_coordinator(config, analytics=AnalyticsConfig(snippet_radius=10))

    assert isinstance(coordinator.cache, LocalCache)
    assert isinstance(coordinator.remote, SupabaseStore)
    assert coordinator.remote.endpoint == "https://example.supabase.co/rest/v1/journal_entries"
    assert coordinator.config.snippet_radius == 10


def test_build_coordinator_from_env(monkeypatch, tmp_dir):
    monkeypatch.setenv("DAILYPAGE_REMOTE__URL", "https://env.supabase.co/")
    monkeypatch.setenv("DAILYPAGE_REMOTE__API_KEY", "secret")
    monkeypatch.setenv("DAILYPAGE_REMOTE__TIMEOUT", "3")
    coordinator = build_coordinator(Config(data_dir=tmp_dir))
    assert coordinator.remote.url == "https://env.supabase.co"
    assert coordinator.remote.timeout == 3


def test_missing_remote_settings(tmp_dir, monkeypatch):
    monkeypatch.delenv("DAILYPAGE_REMOTE__URL", raising=False)
    monkeypatch.delenv("DAILYPAGE_REMOTE__API_KEY", raising=False)
    with pytest.raises(ConfigurationError, match="remote.url"):
        build_coordinator(Config(data_dir=tmp_dir))


def test_cache_and_session_share_location(tmp_dir):
    config = Config(data_dir=tmp_dir)
    cache = build_cache(config)
    assert str(cache.base_path).endswith("cache")
    assert isinstance(build_session(config), Session)


def test_cache_follows_data_dir_from_file(tmp_dir):
    moved = os.path.join(tmp_dir, "journal-data")
    path = os.path.join(tmp_dir, "config.yaml")
    with open(path, "w") as f:
        yaml.dump({"paths": {"data_dir": moved}}, f)

    cache = build_cache(Config(config_file=path))
    assert cache.base_path == (Path(moved) / "cache").resolve()
