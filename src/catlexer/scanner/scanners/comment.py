"""Comment state scanner mixin."""

from __future__ import annotations

from catlexer.states import COMMENT_OPENER_LENGTH, State


class CommentScannerMixin:
    """Mixin providing HTML comment scanning.

    Scans from ``<!--`` through the first ``-->``.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _state: State

    def _scan_comment(self) -> None:
        """Consume a comment through its ``-->`` terminator.

        Any ``-`` with fewer than three characters left from it ends the
        scan as ILLEGAL right away, even when it is not the start of an
        attempted terminator.
        """
        source = self._source
        source_len = self._source_len
        pos = min(self._pos + COMMENT_OPENER_LENGTH, source_len)

        while True:
            idx = source.find("-", pos)
            if idx == -1:
                self._pos = source_len
                self._state = State.ILLEGAL
                return

            if idx + 2 >= source_len:
                self._pos = idx
                self._state = State.ILLEGAL
                return

            if source[idx + 1] == "-" and source[idx + 2] == ">":
                self._pos = idx + 3
                self._state = State.INITIAL
                return

            pos = idx + 1
