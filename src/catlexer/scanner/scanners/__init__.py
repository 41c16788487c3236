"""State-specific span scanners for the catlexer scanner.

Each scanner is a mixin that consumes one span for a specific scanner
state (CONTENT, COMPONENT, COMMENT) and sets the state that follows it.
"""

from __future__ import annotations

from catlexer.scanner.scanners.comment import CommentScannerMixin
from catlexer.scanner.scanners.component import ComponentScannerMixin
from catlexer.scanner.scanners.content import ContentScannerMixin

__all__ = [
    "CommentScannerMixin",
    "ComponentScannerMixin",
    "ContentScannerMixin",
]
