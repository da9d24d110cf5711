"""Minimal logging utilities for Cortado.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in your application.

Example:
    >>> from cortado.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing input")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "cortado." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'cortado.mymodule'
    """
    if not (name == "cortado" or name.startswith("cortado.")):
        name = f"cortado.{name}"
    return logging.getLogger(name)
