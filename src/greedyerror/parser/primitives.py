"""Primitive matchers for the bundled combinator engine.

Every parser takes the current cursor and the error class to report into,
and returns either a ParseResult or a freshly built error accumulator:

    def parser(cursor: Cursor, error_type: type[E]) -> ParseResult[T] | E

Primitive failures always start a new one-frame chain, at the cursor where
the match was attempted.
"""

from collections.abc import Callable

from greedyerror.diagnostics.accumulator import ErrorAccumulator
from greedyerror.enums import ErrorKind
from greedyerror.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ErrorType",
    "Outcome",
    "Parser",
    "alpha1",
    "alphanumeric1",
    "char",
    "digit1",
    "eof",
    "space0",
    "tag",
]

type ErrorType = type[ErrorAccumulator[Cursor]]
type Outcome[T] = ParseResult[T] | ErrorAccumulator[Cursor]
type Parser[T] = Callable[[Cursor, ErrorType], Outcome[T]]

# ASCII only, like nom's character parsers. str.isalpha()/str.isdigit()
# accept Unicode letters and digits such as ² or ³.
_ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_DIGITS: str = "0123456789"

# Inline whitespace: space and tab.
_SPACE_CHARS: str = " \t"


def _take1(
    cursor: Cursor,
    error_type: ErrorType,
    accepted: str,
    kind: ErrorKind,
) -> Outcome[str]:
    """Consume one or more characters from ``accepted``."""
    end = cursor.take_while(lambda ch: ch in accepted)
    if end.pos == cursor.pos:
        return error_type.from_error_kind(cursor, kind)
    return ParseResult(cursor.slice_to(end.pos), end)


def alpha1(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
    """Parse one or more ASCII letters.

    Fails with ErrorKind.ALPHA at the cursor if no letter is present.

    Example:
        >>> alpha1(Cursor("abc012", 0), GreedyError).value
        'abc'
    """
    return _take1(cursor, error_type, _ASCII_LETTERS, ErrorKind.ALPHA)


def digit1(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
    """Parse one or more ASCII digits (ErrorKind.DIGIT on failure)."""
    return _take1(cursor, error_type, _ASCII_DIGITS, ErrorKind.DIGIT)


def alphanumeric1(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
    """Parse one or more ASCII letters or digits (ErrorKind.ALPHANUMERIC on failure)."""
    return _take1(cursor, error_type, _ASCII_LETTERS + _ASCII_DIGITS, ErrorKind.ALPHANUMERIC)


def space0(cursor: Cursor, error_type: ErrorType) -> ParseResult[str]:
    """Skip zero or more spaces and tabs. Never fails."""
    end = cursor.take_while(lambda ch: ch in _SPACE_CHARS)
    return ParseResult(cursor.slice_to(end.pos), end)


def eof(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
    """Succeed only at end of input (ErrorKind.EOF otherwise)."""
    if cursor.is_eof:
        return ParseResult("", cursor)
    return error_type.from_error_kind(cursor, ErrorKind.EOF)


def char(expected: str) -> Parser[str]:
    """Build a parser for one literal character.

    Fails with an expected-character frame, so the rendered trace reports
    both the wanted and the found character.

    Args:
        expected: Single character to match

    Example:
        >>> result = char(":")(Cursor("abc", 0), GreedyError)
        >>> result.frames[0].reason
        ExpectedChar(char=':')
    """
    if len(expected) != 1:
        msg = "char() expects exactly one character"
        raise ValueError(msg)

    def parse_char(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
        if not cursor.is_eof and cursor.current == expected:
            return ParseResult(expected, cursor.advance())
        return error_type.from_char(cursor, expected)

    return parse_char


def tag(literal: str) -> Parser[str]:
    """Build a parser for a literal string (ErrorKind.TAG on mismatch).

    Example:
        >>> tag("let")(Cursor("let x", 0), GreedyError).cursor.pos
        3
    """

    def parse_tag(cursor: Cursor, error_type: ErrorType) -> Outcome[str]:
        if cursor.slice_ahead(len(literal)) == literal:
            return ParseResult(literal, cursor.advance(len(literal)))
        return error_type.from_error_kind(cursor, ErrorKind.TAG)

    return parse_tag
