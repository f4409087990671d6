"""Build a ready-to-use journal from configuration."""

from __future__ import annotations

from dailypage.core.config import Config, get_config
from dailypage.core.exceptions import ConfigurationError
from dailypage.core.storage import LocalCache

from .config import AnalyticsConfig
from .session import Session
from .sync import SyncCoordinator


def build_cache(config: Config | None = None) -> LocalCache:
    config = config or get_config()
    return LocalCache(base_path=str(config.settings.paths.cache_dir))


def build_coordinator(
    config: Config | None = None,
    analytics: AnalyticsConfig | None = None,
) -> SyncCoordinator:
    """Wire a LocalCache and a SupabaseStore from ``config``.

    Raises:
        ConfigurationError: If ``remote.url`` or ``remote.api_key`` is missing.
    """
    from dailypage.integrations.supabase import SupabaseStore

    config = config or get_config()
    remote = config.settings.remote
    if not remote.is_configured:
        raise ConfigurationError(
            "Missing remote.url or remote.api_key (set DAILYPAGE_REMOTE__URL and DAILYPAGE_REMOTE__API_KEY)"
        )
    return SyncCoordinator(cache=build_cache(config), remote=SupabaseStore.from_settings(remote), config=analytics)


def build_session(config: Config | None = None) -> Session:
    return Session(build_cache(config))
