"""Utility modules for catlexer.

Provides:
- logger: get_logger for logging
"""

from catlexer.utils.logger import get_logger

__all__ = [
    "get_logger",
]
