"""
Logging configuration for querysense.
Sets up console and optional file logging with appropriate formatting.
"""
import logging
from pathlib import Path

LOGGER_NAME = "querysense"


def setup_logger(level: str | int = logging.INFO, log_file: Path | None = None) -> logging.Logger:
    """Configure the package logger; calling it again replaces earlier handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
