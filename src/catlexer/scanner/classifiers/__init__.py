"""Lookahead classifiers for the catlexer scanner.

Each classifier is a mixin that inspects the source at the cursor
without consuming it.
"""

from catlexer.scanner.classifiers.component import (
    ComponentClassifierMixin,
)
from catlexer.scanner.classifiers.initial import (
    InitialClassifierMixin,
)

__all__ = [
    "ComponentClassifierMixin",
    "InitialClassifierMixin",
]
