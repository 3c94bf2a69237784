"""Logging setup for the ``phylotext`` namespace.

Records go to stderr so they never interleave with a grid written to
stdout. A log file, when given, gets the same records with timestamps.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "phylotext"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: int = logging.WARNING, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Configure the ``phylotext`` logger and return it.

    Calling it again replaces the handlers of the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    return logger
