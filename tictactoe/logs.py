import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "tictactoe"
LOG_DIR = os.getenv("TICTACTOE_LOG_DIR", os.path.join("data", "logs"))
LOG_FILE_NAME = "app.log"
LOG_MAX_BYTES = 200_000
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def init_logger(log_dir: Optional[str] = None, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a rotating file handler to the package logger, replacing any from an earlier init."""
    log_dir = log_dir or LOG_DIR
    os.makedirs(log_dir, exist_ok=True)
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    # Closed handlers from a previous init can block writes.
    shutdown_logger()
    handler = RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
        delay=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def shutdown_logger() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
