"""Diagnostic formatting service.

Centralizes output formatting of accumulated errors with configurable
options. The TRACE format is exactly render(); SIMPLE and JSON are
condensed forms for log lines and tooling.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from greedyerror.syntax.position import locate, split_lines

from .accumulator import ErrorAccumulator
from .frames import Context, ErrorFrame, ExpectedChar, Kind
from .renderer import KindLabel, reason_message, render
from .templates import ErrorTemplate

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    TRACE = "trace"  # One block per frame with source line and caret (default)
    SIMPLE = "simple"  # Single line for the innermost frame
    JSON = "json"  # JSON array of frames for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (trace, simple, json)
        kind_label: Formats engine tags for display

    Example:
        >>> err = GreedyError.from_error_kind(Cursor("abc012:::", 6), ErrorKind.ALPHA)
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format("abc012:::", err)
        '1:7: in Alpha'

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        >>> print(formatter.format("abc012:::", err))
        [{"index": 0, "offset": 6, "line": 0, "column": 6, "reason": "kind", "label": "Alpha"}]
    """

    output_format: OutputFormat = OutputFormat.TRACE
    kind_label: KindLabel = str

    def format(self, source: str, error: ErrorAccumulator) -> str:
        """Format an accumulator against the source it was produced from.

        Args:
            source: The complete input that was parsed
            error: Finished accumulator

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.TRACE:
                return render(source, error, kind_label=self.kind_label)
            case OutputFormat.SIMPLE:
                return self._format_simple(source, error)
            case OutputFormat.JSON:
                return self._format_json(source, error)

    def _format_simple(self, source: str, error: ErrorAccumulator) -> str:
        """Format the innermost frame on one line.

        Example output:
            1:7: in Alpha
        """
        if not error.frames:
            return ""

        frame = error.frames[0]
        lines = split_lines(source)
        line, column = locate(lines, frame.position) if lines else (0, 0)
        return ErrorTemplate.simple(
            line + 1, column + 1, reason_message(frame.reason, self.kind_label)
        )

    def _format_json(self, source: str, error: ErrorAccumulator) -> str:
        """Format all frames as a JSON array.

        Line and column are 0-based, and null for empty input.
        """
        import json  # noqa: PLC0415

        lines = split_lines(source)
        records = [
            self._frame_record(lines, index, frame) for index, frame in enumerate(error.frames)
        ]
        return json.dumps(records, ensure_ascii=False)

    def _frame_record(
        self, lines: list[str], index: int, frame: ErrorFrame
    ) -> dict[str, str | int | None]:
        """Build the JSON object for one frame."""
        line: int | None = None
        column: int | None = None
        if lines:
            line, column = locate(lines, frame.position)

        data: dict[str, str | int | None] = {
            "index": index,
            "offset": frame.position,
            "line": line,
            "column": column,
        }

        match frame.reason:
            case ExpectedChar(char=char):
                data["reason"] = "expected_char"
                data["label"] = char
            case Context(label=label):
                data["reason"] = "context"
                data["label"] = label
            case Kind(tag=tag):
                data["reason"] = "kind"
                data["label"] = self.kind_label(tag)

        return data
