import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


LOGGER_NAME = "fredulator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level_name: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the "fredulator" logger: console output, plus a rotating file
    when a path is given. Defaults come from FREDULATOR_LOG_LEVEL and
    FREDULATOR_LOG_FILE. Safe to call more than once: a later call adopts the
    new level and adds the file handler if none is attached yet.
    """
    if level_name is None:
        level_name = os.getenv("FREDULATOR_LOG_LEVEL", "INFO")
    if log_file is None:
        log_file = os.getenv("FREDULATOR_LOG_FILE") or None

    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)

    # at most one console and one file handler, whatever the number of calls
    has_file = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    has_console = any(type(h) is logging.StreamHandler for h in logger.handlers)

    if not has_console:
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    if log_file and not has_file:
        fh = RotatingFileHandler(log_file, maxBytes=512_000, backupCount=2, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
