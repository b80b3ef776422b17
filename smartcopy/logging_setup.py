"""Logging setup for smartcopy."""

import logging

from smartcopy.config import LOG_FILE, LOG_LEVEL

logger = logging.getLogger("smartcopy")


def setup_logging() -> logging.Logger:
    """Set up logging for smartcopy."""
    level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    if logger.handlers:
        logger.setLevel(level)
        return logger

    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(file_handler)
    except OSError as e:
        logger.debug("File logging disabled: %s", e)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))

    logger.setLevel(level)
    logger.addHandler(console_handler)
    return logger
