from __future__ import annotations

import logging


def null_logger(name: str) -> logging.Logger:
    """Create and return a logger with a NullHandler.

    The library never configures output itself; applications attach handlers
    to the ``typedcollections`` logger when they want the debug records.
    """
    logger = logging.getLogger(name)
    logger.addHandler(logging.NullHandler())
    return logger
