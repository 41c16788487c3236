"""Initial-state classifier mixin."""

from __future__ import annotations

from collections.abc import Callable

from catlexer.states import State


class InitialClassifierMixin:
    """Mixin deciding which span starts at the cursor.

    Classification never consumes input; it only sets the next state.
    A ``<`` alone does not start a non-content span: only a confirmed
    comment opener or component name does. Anything else, including
    malformed tag-like text, is scanned as content.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _state: State
    _is_component_opener: Callable[[], bool]

    def _classify(self) -> None:
        """Set the state for the span starting at the cursor.

        Sets one of CONTENT, COMPONENT, COMMENT or END. Never sets INITIAL,
        so a single classification is always enough before scanning.
        """
        pos = self._pos
        if pos >= self._source_len:
            self._state = State.END
            return

        source = self._source
        if source[pos] == "<":
            # "<!" is a comment only with "--" after it
            if source[pos + 1 : pos + 2] == "!":
                if source[pos + 2 : pos + 4] == "--":
                    self._state = State.COMMENT
                else:
                    self._state = State.CONTENT
                return

            if self._is_component_opener():
                self._state = State.COMPONENT
                return

        self._state = State.CONTENT
