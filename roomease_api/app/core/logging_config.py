"""
Logging configuration for the RoomEase API.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the ``roomease_api`` package logger and to
uvicorn's loggers, so application and server lines share one format.
Calling it again replaces the handlers it installed earlier instead of
stacking new ones, which lets tests and ``create_app`` reconfigure
logging freely.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers owned by this module.  ``uvicorn.error`` propagates to
# ``uvicorn``; ``uvicorn.access`` does not when uvicorn configures it.
APP_LOGGERS = ("roomease_api", "uvicorn", "uvicorn.access")


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return the console handler and, if ``logfile`` is given, a file handler.

    The log file's parent directories are created when missing.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the application and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, only
        the console handler is installed.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers = build_handlers(logfile)
    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False
