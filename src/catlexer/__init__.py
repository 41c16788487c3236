"""
catlexer: component markup scanner

Splits HTML-like templates into plain content, component tags and
comments. Component tags are ``<cat-*>``, ``<document>``, ``<head>`` and
``<body>``; every other tag is left in the content. No tree is built and
nothing is decoded: concatenating the token values gives back the source.

Quick Start:
    >>> from catlexer import tokenize
    >>> [t.value for t in tokenize("<head>x</head>")]
    ['<head>', 'x', '</head>']

    >>> # Or drive a scanner by hand
    >>> from catlexer import Scanner
    >>> scanner = Scanner("<!-- hi -->")
    >>> scanner.next()
    Token(COMMENT, '<!-- hi -->')
    >>> scanner.next()
    Token(END, None)

Installation:
    pip install catlexer              # Zero runtime dependencies
"""

from __future__ import annotations

from collections.abc import Iterator

from catlexer.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from catlexer.errors import CatlexerError, IllegalInputError
from catlexer.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)
from catlexer.scanner import Scanner
from catlexer.states import STATES, State
from catlexer.tokens import Token
from catlexer.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    strict: bool | None = None,
    include_terminal: bool | None = None,
) -> Iterator[Token]:
    """Tokenize markup source in a fresh scanner session.

    Args:
        source: Markup source text
        source_file: Optional source file path for error messages
        strict: Raise IllegalInputError if the session ends in ILLEGAL
            (defaults to the active ScanConfig)
        include_terminal: Also yield the final END or ILLEGAL token
            (defaults to the active ScanConfig)

    Returns:
        Iterator of tokens in source order.

    Raises:
        IllegalInputError: In strict mode, when a component tag or comment
            is left unterminated. Tokens before it are still yielded.

    Example:
        >>> [t.state.name for t in tokenize("a<!--b-->")]
        ['CONTENT', 'COMMENT']

    """
    # Resolve options now: the generator body runs later, possibly in
    # another context
    config = get_scan_config()
    if strict is None:
        strict = config.strict
    if include_terminal is None:
        include_terminal = config.include_terminal

    return _tokenize(
        source,
        source_file=source_file,
        strict=strict,
        include_terminal=include_terminal,
        accumulator=get_scan_accumulator(),
    )


def _tokenize(
    source: str,
    *,
    source_file: str | None,
    strict: bool,
    include_terminal: bool,
    accumulator: ScanAccumulator | None,
) -> Iterator[Token]:
    scanner = Scanner(source)
    count = 0
    for token in scanner:
        count += 1
        yield token

    illegal = scanner.state is State.ILLEGAL
    if accumulator is not None:
        accumulator.record_scan(len(source), count, illegal=illegal)

    if illegal:
        error = IllegalInputError(scanner.span_state, scanner.span_start, source_file)
        if strict:
            raise error
        logger.warning("Tokenization stopped early: %s", error)

    if include_terminal:
        yield Token(scanner.state)


__all__ = [
    # Scanning
    "Scanner",
    "tokenize",
    # Tokens and states
    "STATES",
    "State",
    "Token",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "CatlexerError",
    "IllegalInputError",
    "__version__",
]
