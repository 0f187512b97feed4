"""
Logging setup for the credaudit CLI.

Library modules only create module loggers; handlers are installed here,
once, by the command-line entry point.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[Path] = None,
                      debug: bool = False) -> logging.Logger:
    """
    Configure the credaudit logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file to append log records to.
        debug: Force DEBUG regardless of level.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("credaudit")

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    # Reconfiguring replaces handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Cannot open log file {log_file}: {e}")

    return logger
