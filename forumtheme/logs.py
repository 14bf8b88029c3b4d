"""Logger setup for the forumtheme package."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from forumtheme.config.settings import ThemeSettings

LOGGER_NAME = "forumtheme"
LOG_FILE_NAME = "forumtheme.log"


def configure_logger(settings: ThemeSettings, *, level: int = logging.INFO) -> logging.Logger:
    """Attach a rotating file handler when ``settings.log_dir`` is set.

    Repeated calls leave an already configured logger alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    if not settings.log_dir:
        return logger

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    logger.info("logging to %s", log_dir / LOG_FILE_NAME)
    return logger
