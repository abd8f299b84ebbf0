import logging
import sys
from typing import Optional, Union

from recordquery.config import settings

def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Sets up a pipeline logger with a standard format and console handler.

    Args:
        name (str): The name of the logger (usually __name__).
        level (int | str | None): Logging level or level name. Falls back to
            settings.LOG_LEVEL when omitted.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Reuse handlers across repeated imports
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
