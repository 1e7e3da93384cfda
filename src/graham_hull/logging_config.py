"""
Logging Configuration
Sets up the package logger for command-line runs.
"""
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    datefmt: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configures the 'graham_hull' logger with a stdout handler.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        fmt: Record format string.
        datefmt: Timestamp format, None for the logging default.
        log_file: Optional path to also write records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("graham_hull")
    logger.setLevel(level)

    # Avoid duplicate records when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt, datefmt=datefmt)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
