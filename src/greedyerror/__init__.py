"""greedyerror - greedy error accumulation for backtracking parsers.

When a parser tries several alternatives at one position and all of them
fail, reporting the last alternative's error is often shallow. greedyerror
keeps the error chain of the alternative that got furthest into the input
and renders the chain as a line/column annotated trace.

Public API:
    GreedyError - Accumulator keeping the deepest alternative at merges
    VerboseError - Accumulator keeping the last alternative (naive policy)
    deepest_position - Offset of an accumulator's innermost failure
    render - Multi-frame trace of an accumulator against its source
    Cursor - Span type used by the bundled engine
    parse - Run a bundled-engine grammar over a complete input

Exceptions:
    GreedyParseError - Base exception class
    ParseFailedError - Grammar rejected the input

Submodules:
    greedyerror.diagnostics - Reasons, frames, accumulators, renderer, formatter
    greedyerror.syntax - Cursor and line/column helpers
    greedyerror.parser - Primitives and combinators of the bundled engine
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    Context,
    ExpectedChar,
    GreedyError,
    GreedyParseError,
    Kind,
    ParseFailedError,
    VerboseError,
    deepest_position,
    render,
)
from .enums import ErrorKind
from .parser import parse
from .syntax import Cursor

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("greedyerror")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Context",
    "Cursor",
    "ErrorKind",
    "ExpectedChar",
    "GreedyError",
    "GreedyParseError",
    "Kind",
    "ParseFailedError",
    "VerboseError",
    "__version__",
    "deepest_position",
    "parse",
    "render",
]
