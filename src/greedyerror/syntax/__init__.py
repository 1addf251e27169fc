"""Span and position package.

Provides the immutable cursor the bundled parser engine uses as its span
type, and the offset-to-line/column helpers the renderer relies on.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .position import locate, split_lines

__all__ = [
    "Cursor",
    "ParseResult",
    "locate",
    "split_lines",
]
