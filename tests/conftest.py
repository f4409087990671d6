"""Shared test fixtures for dailypage."""

import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

from dailypage.core.storage import MemoryCache
from dailypage.journal.store import MemoryRemoteStore
from dailypage.journal.sync import SyncCoordinator


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "cache_dir": os.path.join(tmp_dir, "cache"),
        },
        "remote": {
            "url": "https://example.supabase.co",
            "api_key": "anon-key",
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


class FakeClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache():
    return MemoryCache()


@pytest.fixture
def remote():
    return MemoryRemoteStore()


@pytest.fixture
def coordinator(cache, remote, clock):
    return SyncCoordinator(cache=cache, remote=remote, clock=clock)
