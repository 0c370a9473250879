"""Utility modules for marklex.

Provides:
- logger: get_logger for logging
"""

from marklex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
