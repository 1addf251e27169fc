"""Exception hierarchy for parse failures.

The accumulator and renderer never raise. Exceptions only appear at the
boundary where a caller asks the bundled engine for a value and the
grammar rejects the input.

Python 3.13+. Zero external dependencies.
"""

from greedyerror.syntax.position import locate, split_lines

from .accumulator import ErrorAccumulator, deepest_position
from .renderer import KindLabel, render
from .templates import ErrorTemplate

__all__ = ["GreedyParseError", "ParseFailedError"]


class GreedyParseError(Exception):
    """Base exception for all greedyerror errors."""


class ParseFailedError(GreedyParseError):
    """The grammar rejected the input.

    Attributes:
        source: The complete input that was parsed
        error: Accumulated frames, innermost failure first
        position: Offset of the innermost failure (None for an empty chain)

    Example:
        >>> try:
        ...     parse(digit1, "abc")
        ... except ParseFailedError as e:
        ...     print(e)
        parse failed at line 1, column 1
    """

    def __init__(self, source: str, error: ErrorAccumulator) -> None:
        """Initialize ParseFailedError.

        Args:
            source: The complete input that was parsed
            error: Finished accumulator returned by the grammar
        """
        self.source = source
        self.error = error
        self.position = deepest_position(error)

        lines = split_lines(source)
        if lines and self.position is not None:
            line, column = locate(lines, self.position)
        else:
            line, column = 0, 0
        self.line = line + 1
        self.column = column + 1

        super().__init__(ErrorTemplate.parse_failed(self.line, self.column))

    def format_trace(self, *, kind_label: KindLabel = str) -> str:
        """Render every accumulated frame against the source."""
        return render(self.source, self.error, kind_label=kind_label)
