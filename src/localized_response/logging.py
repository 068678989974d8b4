from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from localized_response.config.models import LoggingSettings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_PACKAGE_LOGGER = "localized_response"


def init_logging(settings: LoggingSettings) -> None:
    """Attach console and optional daily-rotated file handlers to the package logger."""
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(settings.level.upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if settings.file is not None:
        log_path = Path(settings.file.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when="midnight",
            backupCount=settings.file.rotation.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
