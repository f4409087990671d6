"""Tests for dailypage.core.utils.logging."""

import os
import sys
from pathlib import Path

import pytest
import yaml
from loguru import logger

from dailypage.core.config import Config
from dailypage.core.utils.logging import configure_logging, resolve_log_file


@pytest.fixture(autouse=True)
def _restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def _config(tmp_dir, logging_section) -> Config:
    path = os.path.join(tmp_dir, "config.yaml")
    with open(path, "w") as f:
        yaml.dump({"logging": logging_section}, f)
    return Config(config_file=path, data_dir=tmp_dir)


def test_relative_file_lands_in_log_dir(tmp_dir):
    config = _config(tmp_dir, {"level": "info", "file": "dailypage.log"})
    log_file = configure_logging(config)

    assert log_file == Path(tmp_dir) / "logs" / "dailypage.log"
    logger.info("entry synced")
    logger.debug("too chatty")
    logger.complete()

    text = log_file.read_text()
    assert "entry synced" in text
    assert "too chatty" not in text


def test_absolute_file_used_as_is(tmp_dir, tmp_path):
    target = tmp_path / "elsewhere" / "journal.log"
    config = _config(tmp_dir, {"level": "DEBUG", "file": str(target)})

    assert configure_logging(config) == target
    logger.debug("debug line")
    logger.complete()
    assert "debug line" in target.read_text()


def test_stderr_only_by_default(tmp_dir):
    assert configure_logging(Config(data_dir=tmp_dir)) is None
    assert not (Path(tmp_dir) / "logs").exists()


def test_resolve_log_file():
    assert resolve_log_file("", Path("/var/log")) is None
    assert resolve_log_file("a.log", Path("/var/log")) == Path("/var/log/a.log")
    assert resolve_log_file("a.log", None) == Path("a.log")
