"""Service logging.

Each named logger writes to stdout and to two files under ``LOG_DIR``:
``ytmusic-api.log`` (rolled over by size) and ``ytmusic-api_daily.log``
(rolled over at midnight).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import List

from .config import settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10_000_000
SIZE_BACKUPS = 5
DAILY_BACKUPS = 30


def _build_handlers() -> List[logging.Handler]:
    log_dir = settings.log_dir_path
    handlers: List[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(log_dir / "ytmusic-api.log", maxBytes=MAX_LOG_BYTES, backupCount=SIZE_BACKUPS),
        TimedRotatingFileHandler(
            log_dir / "ytmusic-api_daily.log", when="midnight", interval=1, backupCount=DAILY_BACKUPS
        ),
    ]
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(settings.LOG_LEVEL)
    return handlers


def get_logger(name: str = "ytmusic_api") -> logging.Logger:
    """Return the named logger, attaching console and rotating file handlers once.

    Args:
        name: Logger identifier, e.g. ``"api.search"``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL)
    # uvicorn configures the root logger too; keep records from printing twice.
    logger.propagate = False

    if not logger.handlers:
        for handler in _build_handlers():
            logger.addHandler(handler)
    return logger
