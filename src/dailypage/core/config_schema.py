"""Pydantic models for config validation.

``Config`` validates its merged data into ``DailypageConfig`` at load time and
exposes it as ``Config.settings``. The model defaults are the built-in
defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    cache_dir: Path | None = None
    log_dir: Path | None = None

    @field_validator("data_dir", "cache_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @model_validator(mode="after")
    def _derive_subdirs(self) -> PathsConfig:
        if self.cache_dir is None:
            self.cache_dir = self.data_dir / "cache"
        if self.log_dir is None:
            self.log_dir = self.data_dir / "logs"
        return self


class RemoteConfig(BaseModel):
    """Connection settings for the remote entry table."""

    url: str = ""
    api_key: str = ""
    table: str = "journal_entries"
    user_column: str = "user_email"
    timeout: float = 10

    @field_validator("url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("remote.timeout must be positive")
        return v

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.api_key)


class LoggingConfig(BaseModel):
    """Log level and optional log file."""

    level: str = "WARNING"
    file: str = ""

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level


class DailypageConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.dailypage-data"))
    remote: RemoteConfig = RemoteConfig()
    logging: LoggingConfig = LoggingConfig()
