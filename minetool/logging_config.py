"""Logging configuration for minetool.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up under the ``minetool`` logger configured here.
"""

import logging

LOGGER_NAME = "minetool"


def setup_logging(verbose: bool = True) -> logging.Logger:
    """Attach a console handler to the package logger. Safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # Console handler (INFO when verbose, warnings only otherwise)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_format = logging.Formatter(
        '%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
