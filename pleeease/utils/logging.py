"""Logging utility for Pleeease."""

import logging
import os
from typing import Optional, Union

from .config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: Union[int, str] = LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Level name or number
        log_file: Optional file receiving a copy of the log
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file, delay=True))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )


# Exported functions
__all__ = ['setup_logging', 'LOG_FORMAT']
