"""Exception classes for catlexer.

The scanner itself never raises on malformed input; it moves to the
terminal ILLEGAL state instead. These exceptions are raised by the
strict convenience API only.
"""

from __future__ import annotations

from catlexer.states import State


class CatlexerError(Exception):
    """Base exception for all catlexer errors.

    Subclass this for specific error categories.
    """

    pass


class IllegalInputError(CatlexerError):
    """Input ended inside a span that needs a terminator.

    Raised in strict mode when the scanner reaches ILLEGAL, i.e. an
    unterminated component tag or comment.
    """

    def __init__(
        self,
        state: State,
        offset: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize illegal input error.

        Args:
            state: The span kind that could not be terminated
                (COMPONENT or COMMENT)
            offset: Offset where the unterminated span began
            source_file: Path to source file (optional)
        """
        self.state = state
        self.offset = offset
        self.source_file = source_file

        if state is State.COMPONENT:
            message = "unterminated component tag"
        elif state is State.COMMENT:
            message = "unterminated comment"
        else:
            message = f"illegal input in {state.name.lower()} span"

        location = f"{source_file}:{offset}" if source_file else f"offset {offset}"
        super().__init__(f"{location}: {message}")
