"""
Layered configuration for dailypage.

Sources, highest precedence first:
    1. Environment variables (DAILYPAGE_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults (the ``DailypageConfig`` model defaults)

The merged data is validated once, when it is loaded, into
``Config.settings``. ``paths.cache_dir`` and ``paths.log_dir`` follow
``paths.data_dir`` unless they are set explicitly.

Usage:
    config = Config(config_file="~/.dailypage.yaml")

    config.settings.remote.url
    config.settings.paths.cache_dir
"""

from __future__ import annotations

import json
import os
from typing import Any

import yaml
from pydantic import ValidationError

from .config_schema import DailypageConfig
from .exceptions import ConfigurationError

ENV_PREFIX = "DAILYPAGE_"
DEFAULT_DATA_DIR = "~/.dailypage-data"


def _merge(target: dict[str, Any], source: dict[str, Any]) -> None:
    """Recursively merge source into target."""
    for key, value in source.items():
        if isinstance(target.get(key), dict) and isinstance(value, dict):
            _merge(target[key], value)
        else:
            target[key] = value


def _read_file(path: str) -> dict[str, Any]:
    ext = os.path.splitext(path)[1].lower()
    try:
        with open(path) as f:
            if ext in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif ext == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(f"Unsupported config file type '{ext}': {path}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


class Config:
    """
    Journal configuration: paths, the remote table and logging.

    Env vars use double-underscore to denote nesting:
    DAILYPAGE_REMOTE__URL=https://x.supabase.co -> settings.remote.url

    Raises:
        ConfigurationError: If the file cannot be parsed or the merged
            values fail validation.
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = ENV_PREFIX,
        data_dir: str | None = None,
    ):
        """
        Args:
            config_file: Path to a YAML or JSON file. A missing file is skipped.
            env_prefix: Prefix for environment variable overrides.
            data_dir: Default for ``paths.data_dir``; the file and env still win.
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self.data: dict[str, Any] = {"paths": {"data_dir": data_dir or DEFAULT_DATA_DIR}}

        if config_file:
            path = os.path.expanduser(config_file)
            if os.path.exists(path):
                _merge(self.data, _read_file(path))
        _merge(self.data, self._env_overrides())

        self.settings = self._validate()

    def _env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        if not self.env_prefix:
            return overrides
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            *sections, leaf = env_key[len(self.env_prefix) :].lower().split("__")
            current = overrides
            for part in sections:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[leaf] = env_value
        return overrides

    def _validate(self) -> DailypageConfig:
        try:
            return DailypageConfig.model_validate(self.data)
        except ValidationError as e:
            source = f" ({self.config_file})" if self.config_file else ""
            raise ConfigurationError(f"Invalid configuration{source}: {e}") from e


# Module-level singleton
_config_instance: Config | None = None


def get_config(
    config_file: str | None = None,
    env_prefix: str = ENV_PREFIX,
    data_dir: str | None = None,
) -> Config:
    """Get or create the global Config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = Config(config_file=config_file, env_prefix=env_prefix, data_dir=data_dir)
    return _config_instance


def reset_config() -> None:
    """Reset the global Config singleton (useful for testing)."""
    global _config_instance
    _config_instance = None
