"""Logging configuration for the GMV campaign bot.

Console output follows uvicorn's own format so bot lines sit alongside the
server's access and error lines. httpx request logging is kept at WARNING:
every Telegram call URL contains the bot token.
"""

import logging
import sys
from datetime import datetime

from uvicorn.logging import DefaultFormatter

from config import LOG_DIR, LOG_LEVEL

# Libraries whose INFO lines would leak credentials or flood the log
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging() -> logging.Logger:
    """Set up logging to a dated file and to stderr."""
    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("gmv_bot")
    logger.setLevel(level)
    logger.propagate = False

    # Close and clear any existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # File handler - dated log file
    log_file = LOG_DIR / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(file_handler)

    # Console handler - same look as uvicorn ("INFO:     ..."), colour on a TTY
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(DefaultFormatter(
        "%(levelprefix)s %(name)s | %(message)s",
        use_colors=sys.stderr is not None and sys.stderr.isatty(),
    ))
    logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger


# Global logger instance
logger = setup_logging()
