"""Token definition for the catlexer scanner.

The scanner produces one Token per ``next()`` call. Each Token has a state
(the kind of span that was consumed) and the exact consumed text.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
State is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catlexer.states import COMPONENT_NAME_DELIMITERS, State


@dataclass(frozen=True, slots=True)
class Token:
    """A span produced by the scanner.

    Attributes:
        state: The state the scanner was in when it consumed the span.
            Never ``State.INITIAL``.
        value: The consumed substring of the source, or None for the
            terminal states END and ILLEGAL.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    state: State
    value: str | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if val is not None and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.state.name}, {val!r})"

    @property
    def is_terminal(self) -> bool:
        """True for END and ILLEGAL tokens."""
        return self.state.is_terminal

    @property
    def component_name(self) -> str | None:
        """Lower-cased tag name of a COMPONENT token.

        Reads from after ``<`` up to the first delimiter, e.g.
        ``'<cat-list id="x">'`` gives ``'cat-list'``.

        Returns:
            Tag name, or None when this is not a component token.
        """
        if self.state is not State.COMPONENT or not self.value:
            return None
        end = 1
        value_len = len(self.value)
        while end < value_len and self.value[end] not in COMPONENT_NAME_DELIMITERS:
            end += 1
        return self.value[1:end].lower()

    def to_dict(self) -> dict[str, Any]:
        """Encode with the stable integer state, e.g. ``{"state": 1, "value": "x"}``."""
        return {"state": self.state.value, "value": self.value}
