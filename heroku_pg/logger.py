"""
heroku_pg/logger.py
-------------------
Logging setup shared by the library, the command line and the web app.

Library modules only call logging.getLogger(__name__); nothing is printed
until an entry point calls setup_logger().
"""

import logging
from logging.handlers import RotatingFileHandler

from heroku_pg.config import Config

LOGGER_NAME = "heroku_pg"
LOG_FORMAT  = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: str | int | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configure the package logger with a console handler and, when a log
    file is given, a rotating file handler (10 MB, 5 backups).

    Safe to call more than once: existing handlers are replaced.
    """
    level    = level if level is not None else Config.LOG_LEVEL
    log_file = log_file if log_file is not None else Config.LOG_FILE

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_file:
        try:
            handler = RotatingFileHandler(log_file, maxBytes=10485760, backupCount=5)
        except OSError as e:
            logger.warning(f"Could not open log file {log_file}: {e}. Logging to console only.")
        else:
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    return logger


__all__ = ["setup_logger", "LOGGER_NAME"]
