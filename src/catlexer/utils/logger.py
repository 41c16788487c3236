"""Minimal logging utilities for catlexer.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> import logging
    >>> logging.getLogger("catlexer").setLevel(logging.DEBUG)
    >>> from catlexer import Scanner
    >>> Scanner("<!-- open").next()  # logs "Unterminated comment span starting at offset 0"
    Token(ILLEGAL, None)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "catlexer." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'catlexer.mymodule'
    """
    if not (name == "catlexer" or name.startswith("catlexer.")):
        name = f"catlexer.{name}"
    return logging.getLogger(name)
