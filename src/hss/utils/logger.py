"""Minimal logging utilities for hss.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from hss.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Transpiling styles.hss")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hss." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'hss.mymodule'
    """
    # Ensure hss prefix for consistent namespacing
    if not (name == "hss" or name.startswith("hss.")):
        name = f"hss.{name}"
    return logging.getLogger(name)
