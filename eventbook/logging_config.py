"""Logger setup for the service."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logger(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the ``eventbook`` logger once and set its level."""
    logger = logging.getLogger("eventbook")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
