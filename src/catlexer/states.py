"""Scanner states and lookahead constants.

This module defines the finite state machine states for the scanner
and the fixed-width constants used when recognizing span openers.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class State(Enum):
    """Scanner states.

    The scanner moves between states as it consumes spans:
    - INITIAL: Between spans, deciding what starts at the cursor (never emitted)
    - CONTENT: Plain text up to the next ``<``
    - COMPONENT: A recognized component opening tag
    - COMMENT: An HTML comment ``<!-- ... -->``
    - END / ILLEGAL: Terminal states

    Values are the stable integer encoding used at the API boundary.

    """

    ILLEGAL = -1
    INITIAL = 0
    CONTENT = 1
    COMPONENT = 2
    COMMENT = 3
    END = 4

    @property
    def is_terminal(self) -> bool:
        """True once no further spans can be scanned in this session."""
        return self is State.END or self is State.ILLEGAL


# Named integer constants, as exposed to callers that speak integers
STATES = MappingProxyType({state.name: state.value for state in State})

# Characters inspected when deciding if "<" opens a component
COMPONENT_NAME_MIN_LENGTH = 10

# Shortest opener shared by every component prefix: "<cat-", "<head", ...
COMPONENT_OPENER_LENGTH = 5

# "<!--"
COMMENT_OPENER_LENGTH = 4

# Characters that may follow a bare component name
COMPONENT_NAME_DELIMITERS = frozenset(" \f\n\r\t\v/>")
