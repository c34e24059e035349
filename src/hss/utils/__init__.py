"""Utility modules for hss.

Provides:
- logger: get_logger for logging
"""

from hss.utils.logger import get_logger

__all__ = [
    "get_logger",
]
