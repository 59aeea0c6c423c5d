"""Logging setup"""

import logging
import os
from logging.handlers import TimedRotatingFileHandler

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger for the API process.

    Console output outside production, plus daily rotated ``combined.log``
    and ``error.log`` files under ``LOG_FILE_PATH``. File handlers are not
    installed while testing.
    """
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    for handler in list(root.handlers):
        if getattr(handler, "_bowen_hooks", False):
            root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []

    if not settings.is_production:
        handlers.append(logging.StreamHandler())

    if not settings.TESTING:
        os.makedirs(settings.LOG_FILE_PATH, exist_ok=True)
        combined = TimedRotatingFileHandler(
            os.path.join(settings.LOG_FILE_PATH, "combined.log"),
            when="midnight",
            backupCount=settings.LOG_MAX_DAYS,
            encoding="utf-8",
        )
        errors = TimedRotatingFileHandler(
            os.path.join(settings.LOG_FILE_PATH, "error.log"),
            when="midnight",
            backupCount=settings.LOG_MAX_DAYS,
            encoding="utf-8",
        )
        errors.setLevel(logging.ERROR)
        handlers.extend([combined, errors])

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._bowen_hooks = True
        root.addHandler(handler)
