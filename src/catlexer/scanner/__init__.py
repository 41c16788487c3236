"""Modular state-machine scanner for catlexer.

This package provides a pull-based scanner with O(n) guaranteed performance.
Each ``next()`` call classifies the text at the cursor, then consumes
one span.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (mixin composition + dispatch)
├── classifiers/         # Zero-consumption lookahead mixins
│   ├── initial.py       # Decide the next span kind
│   └── component.py     # Component name test
└── scanners/            # State-specific span scanners
    ├── content.py       # Plain text up to "<"
    ├── component.py     # Component tag through ">"
    └── comment.py       # Comment through "-->"

Usage:
    >>> from catlexer.scanner import Scanner
    >>> scanner = Scanner("<cat-menu>hi")
    >>> for token in scanner:
    ...     print(token)
Token(COMPONENT, '<cat-menu>')
Token(CONTENT, 'hi')

"""

from catlexer.scanner.core import Scanner

__all__ = ["Scanner"]
