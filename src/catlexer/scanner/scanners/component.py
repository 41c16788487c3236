"""Component state scanner mixin."""

from __future__ import annotations

from catlexer.states import COMPONENT_OPENER_LENGTH, State


class ComponentScannerMixin:
    """Mixin providing component tag scanning.

    Scans a component opening tag through its closing ``>``. Attribute
    quoting is not tracked, so a ``>`` inside a quoted value ends the tag.

    """

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int
    _state: State

    def _scan_component(self) -> None:
        """Consume a component opening tag.

        The opener was already confirmed by the classifier, so its first
        COMPONENT_OPENER_LENGTH characters are skipped unchecked. Reaching
        end of input without ``>`` is ILLEGAL.
        """
        start = min(self._pos + COMPONENT_OPENER_LENGTH, self._source_len)
        idx = self._source.find(">", start)
        if idx == -1:
            self._pos = self._source_len
            self._state = State.ILLEGAL
            return

        self._pos = idx + 1
        self._state = State.INITIAL
