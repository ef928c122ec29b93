"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_FILE_PREFIX, LOG_LEVEL, LOG_RETENTION

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def log_file_pattern(log_dir: Path, prefix: str) -> Path:
    """Daily log file path template, e.g. logs/items_2024-01-31.log."""
    return log_dir / f"{prefix}_{{time:YYYY-MM-DD}}.log"


def setup_logging(
    level: str = LOG_LEVEL,
    to_file: bool = True,
    log_dir: Path | str = LOG_DIR,
    prefix: str = LOG_FILE_PREFIX,
    retention: str = LOG_RETENTION,
):
    """Configure stderr logging at `level` and, optionally, a daily DEBUG file.

    Store failures and cache invalidations go to both sinks; per-request cache
    hits only reach the file.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file_pattern(log_dir, prefix),
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention=retention,
            compression="gz",
        )
        logger.info("Logging to {} ({}_*.log)", log_dir, prefix)

    return logger
