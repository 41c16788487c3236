"""Content state scanner mixin."""

from __future__ import annotations

from catlexer.states import State


class ContentScannerMixin:
    """Mixin providing content scanning.

    Content runs up to, but not including, the next ``<``.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _state: State

    def _scan_content(self) -> None:
        """Consume a run of plain text.

        The first character is always consumed, even if it is ``<``: the
        classifier only sends a ``<`` here when it opens nothing we know,
        so it belongs to the text.
        """
        # Uses str.find for O(n) with low constant factor (C implementation)
        idx = self._source.find("<", self._pos + 1)
        if idx == -1:
            self._pos = self._source_len
            self._state = State.END
        else:
            self._pos = idx
            self._state = State.INITIAL
