"""Component name classifier mixin."""

from __future__ import annotations

from catlexer.states import COMPONENT_NAME_DELIMITERS, COMPONENT_NAME_MIN_LENGTH

# Bare names that must be followed by a delimiter
_BARE_COMPONENT_NAMES = ("document", "head", "body")

_CAT_PREFIX = "cat-"


class ComponentClassifierMixin:
    """Mixin providing component opener recognition.

    A component opener is ``<cat-`` or one of ``<document``, ``<head``,
    ``<body`` followed by a delimiter, matched case-insensitively.

    """

    # These will be set by the Scanner class
    _source: str
    _pos: int

    def _is_component_opener(self) -> bool:
        """Check if the text at the cursor opens a component tag.

        Only a fixed window of COMPONENT_NAME_MIN_LENGTH characters is
        inspected. Positions past the window (or past end of input)
        never match.

        Returns:
            True if a component opener starts at the cursor.
        """
        window = self._source[self._pos : self._pos + COMPONENT_NAME_MIN_LENGTH]
        if not window or window[0] != "<":
            return False

        name = window[1:]
        if name[: len(_CAT_PREFIX)].lower() == _CAT_PREFIX:
            return True

        for bare in _BARE_COMPONENT_NAMES:
            after = len(bare)
            if name[:after].lower() != bare:
                continue
            # Delimiter must fall inside the window
            if after < len(name) and name[after] in COMPONENT_NAME_DELIMITERS:
                return True

        return False
