"""Error message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from greedyerror.constants import EMPTY_TEXT_MARKER

__all__ = ["ErrorTemplate"]


def _printable(char: str) -> str:
    """Escape a character that would break the one-line message layout."""
    if char.isprintable():
        return char
    return repr(char)[1:-1]


class ErrorTemplate:
    """Centralized message templates.

    All diagnostic wording is created here. NO f-strings in exception
    constructors or in the renderer body! This provides:
        - Testable messages
        - Consistent formatting across renderer, formatter and exceptions
        - Documentation of all message shapes
    """

    @staticmethod
    def unexpected_eof(position: int) -> str:
        """Cursor read past the end of input.

        Args:
            position: Offset where the read was attempted

        Returns:
            Message for EOFError
        """
        return f"Unexpected EOF at position {position}"

    @staticmethod
    def expected_char(expected: str) -> str:
        """Expected character, without the found part.

        Non-printable characters are shown escaped, e.g. ``\\n``.

        Example:
            >>> ErrorTemplate.expected_char(":")
            "expected ':'"
        """
        return f"expected '{_printable(expected)}'"

    @staticmethod
    def expected_found(expected: str, found: str | None) -> str:
        """Expected character versus the character actually present.

        Args:
            expected: Character the parser wanted
            found: First character of the failing span, None if the span is empty

        Returns:
            Body line of an expected-character frame

        Example:
            >>> ErrorTemplate.expected_found(":", "a")
            "expected ':', found a"
            >>> ErrorTemplate.expected_found(":", None)
            "expected ':', found empty"
            >>> ErrorTemplate.expected_found(";", "\\n")
            "expected ';', found \\\\n"
        """
        actual = EMPTY_TEXT_MARKER if found is None else _printable(found)
        return f"{ErrorTemplate.expected_char(expected)}, found {actual}"

    @staticmethod
    def in_label(label: str) -> str:
        """Named rule or engine tag a frame was recorded under."""
        return f"in {label}"

    @staticmethod
    def empty_input(index: int, message: str) -> str:
        """Degraded frame line used when the whole input is empty.

        Example:
            >>> ErrorTemplate.empty_input(0, "in Alpha")
            '0: in Alpha, got empty input'
        """
        return f"{index}: {message}, got empty input"

    @staticmethod
    def frame_header(index: int, line: int, label: str | None = None) -> str:
        """Header of one rendered frame block.

        Args:
            index: Frame index within the accumulator
            line: 0-based line index of the failure
            label: Context label or engine tag; None for expected-character frames

        Example:
            >>> ErrorTemplate.frame_header(0, 0, "Alpha")
            '0: at line 0, in Alpha:'
            >>> ErrorTemplate.frame_header(1, 2)
            '1: at line 2:'
        """
        if label is None:
            return f"{index}: at line {line}:"
        return f"{index}: at line {line}, {ErrorTemplate.in_label(label)}:"

    @staticmethod
    def parse_failed(line: int, column: int) -> str:
        """Summary line for ParseFailedError (1-based line and column)."""
        return f"parse failed at line {line}, column {column}"

    @staticmethod
    def simple(line: int, column: int, message: str) -> str:
        """Single-line diagnostic: ``line:col: message`` (1-based)."""
        return f"{line}:{column}: {message}"
