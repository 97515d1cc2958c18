"""Minimal logging utilities for modlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from modlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing stylesheet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "modlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'modlex.mymodule'
    """
    if not (name == "modlex" or name.startswith("modlex.")):
        name = f"modlex.{name}"
    return logging.getLogger(name)
