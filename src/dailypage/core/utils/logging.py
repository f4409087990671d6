"""
Loguru sinks for dailypage.

Call ``configure_logging(config)`` once at app startup. The level and file
come from ``logging.*``; a relative ``logging.file`` is placed under
``paths.log_dir``. Library code just does ``from loguru import logger``.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dailypage.core.config import Config

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def resolve_log_file(file: str, log_dir: Path | None) -> Path | None:
    """Where ``logging.file`` points, or None when file logging is off."""
    if not file:
        return None
    path = Path(file).expanduser()
    if not path.is_absolute() and log_dir is not None:
        path = log_dir / path
    return path


def configure_logging(config: Config, rotation: str = "10 MB", retention: str = "7 days") -> Path | None:
    """
    Replace loguru's sinks with a stderr sink and an optional rotating file.

    Returns:
        The log file path, or None if only stderr is used.
    """
    settings = config.settings
    level = settings.logging.level

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    log_file = resolve_log_file(settings.logging.file, settings.paths.log_dir)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
    return log_file
