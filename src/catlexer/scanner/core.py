"""Pull-based state-machine scanner with O(n) guaranteed performance.

Splits markup into CONTENT, COMPONENT and COMMENT spans. Each ``next()``
call consumes exactly one span; the cursor only moves forward and every
scan is bounded by the source length.

No regex in the hot path.

Thread Safety:
All state is instance-local; no shared mutable state.
One instance must not be driven from several threads at once, but
independent instances can run in parallel.

"""

from __future__ import annotations

from collections.abc import Iterator

from catlexer.scanner.classifiers import (
    ComponentClassifierMixin,
    InitialClassifierMixin,
)
from catlexer.scanner.scanners import (
    CommentScannerMixin,
    ComponentScannerMixin,
    ContentScannerMixin,
)
from catlexer.states import State
from catlexer.tokens import Token
from catlexer.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    # Classifiers (pure lookahead, no position mutation)
    InitialClassifierMixin,
    ComponentClassifierMixin,
    # Scanners (state-specific span consumption)
    ContentScannerMixin,
    ComponentScannerMixin,
    CommentScannerMixin,
):
    """Pull-based scanner for component markup.

    Usage:
            >>> scanner = Scanner("<head>x</head>")
            >>> scanner.next()
        Token(COMPONENT, '<head>')
            >>> scanner.next()
        Token(CONTENT, 'x')
            >>> scanner.next()
        Token(CONTENT, '</head>')
            >>> scanner.next()
        Token(END, None)

    Once END or ILLEGAL is reached the session is over: every further
    ``next()`` returns the same terminal token until ``reset_source``.
    A component tag or comment that runs off the end of the source is
    reported as ILLEGAL straight away; ``span_start`` then gives the
    offset where it began.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_state",
        "_span_start",  # Where the last scanned span began
        "_span_state",  # Kind of the last scanned span
    )

    def __init__(self, source: str = "") -> None:
        """Initialize scanner and start a session over source.

        Args:
            source: Markup text to scan
        """
        self._source = ""
        self._source_len = 0
        self._pos = 0
        self._state = State.INITIAL
        self._span_start = 0
        self._span_state = State.INITIAL
        self.reset_source(source)

    def reset_source(self, source: str) -> None:
        """Start a new session over source.

        Any text is accepted, including the empty string.

        Args:
            source: Markup text to scan
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._state = State.INITIAL
        self._span_start = 0
        self._span_state = State.INITIAL
        logger.debug("Scanner reset with %d characters", self._source_len)

    @property
    def source(self) -> str:
        """Source text of the current session."""
        return self._source

    @property
    def cursor(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    @property
    def state(self) -> State:
        """Current scanner state."""
        return self._state

    @property
    def span_start(self) -> int:
        """Offset where the most recently scanned span began."""
        return self._span_start

    @property
    def span_state(self) -> State:
        """Kind of the most recently scanned span (INITIAL before any)."""
        return self._span_state

    def next(self) -> Token:
        """Consume the next span.

        Returns:
            Token for the consumed span, or the terminal token
            (END or ILLEGAL with a None value) when the session is over.
        """
        if self._state is State.INITIAL:
            # Zero-consumption decision; never selects INITIAL again
            self._classify()

        state = self._state
        if state.is_terminal:
            return Token(state)

        start = self._pos
        self._span_start = start
        self._span_state = state
        if state is State.CONTENT:
            self._scan_content()
        elif state is State.COMPONENT:
            self._scan_component()
        else:
            self._scan_comment()

        if self._state is State.ILLEGAL:
            # A span that cannot be terminated is not emitted
            logger.debug(
                "Unterminated %s span starting at offset %d",
                state.name.lower(),
                start,
            )
            return Token(State.ILLEGAL)

        return Token(state, self._source[start : self._pos])

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the session reaches a terminal state.

        The terminal token itself is not yielded; check ``state`` after
        iteration to tell END from ILLEGAL.
        """
        while True:
            token = self.next()
            if token.is_terminal:
                return
            yield token
