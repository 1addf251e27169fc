"""Shared constants for greedyerror.

Placing constants here avoids circular imports between the diagnostics,
syntax and parser packages and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rendering
    "CARET_MARKER",
    "EMPTY_TEXT_MARKER",
    "LINE_DELIMITER",
    # Positions
    "DEFAULT_POSITION",
]

# ============================================================================
# RENDERING
# ============================================================================

# Marker placed under the failing column in a rendered trace.
CARET_MARKER: str = "^"

# Shown in place of the found character when a span has no text left.
EMPTY_TEXT_MARKER: str = "empty"

# Only LF splits lines. CRLF input works because the \n is still present;
# the \r stays part of the line text.
LINE_DELIMITER: str = "\n"

# ============================================================================
# POSITIONS
# ============================================================================

# Comparison position of an accumulator that carries no frames.
DEFAULT_POSITION: int = 0
