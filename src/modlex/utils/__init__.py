"""Utility modules for modlex.

Provides:
- logger: get_logger for logging
"""

from modlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
