"""Error accumulation and diagnostic rendering.

Provides the error value a backtracking parser threads through a parse,
the merge policies applied at alternation points, and the renderer that
turns a finished chain into a line/column annotated trace.

Python 3.13+. Zero external dependencies.
"""

from .accumulator import (
    ErrorAccumulator,
    GreedyError,
    ParseErrorPolicy,
    VerboseError,
    deepest_position,
)
from .errors import GreedyParseError, ParseFailedError
from .formatter import DiagnosticFormatter, OutputFormat
from .frames import Context, ErrorFrame, ExpectedChar, FailureReason, Kind, Located
from .renderer import render
from .templates import ErrorTemplate

__all__ = [
    "Context",
    "DiagnosticFormatter",
    "ErrorAccumulator",
    "ErrorFrame",
    "ErrorTemplate",
    "ExpectedChar",
    "FailureReason",
    "GreedyError",
    "GreedyParseError",
    "Kind",
    "Located",
    "OutputFormat",
    "ParseErrorPolicy",
    "ParseFailedError",
    "VerboseError",
    "deepest_position",
    "render",
]
