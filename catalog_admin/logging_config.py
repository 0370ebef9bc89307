"""
Logging setup for the Catalog Admin client.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level (str): Log level name
        log_file (str, optional): Path of a rotating log file

    Returns:
        logging.Logger: The configured package logger
    """
    logger = logging.getLogger("catalog_admin")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Replace handlers so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1000000, backupCount=3)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
