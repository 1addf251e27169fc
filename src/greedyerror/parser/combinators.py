"""Combinators for the bundled parser engine.

Combinators build parsers out of parsers. On failure they either pass the
inner error through untouched (sequence), or add one outer frame to it
(alt, context, many1). Only alt combines errors from different branches,
through the error type's merge policy.
"""

import logging
from collections.abc import Callable

from greedyerror.diagnostics.frames import Kind
from greedyerror.enums import ErrorKind
from greedyerror.syntax.cursor import Cursor, ParseResult

from .primitives import ErrorType, Outcome, Parser

__all__ = [
    "alt",
    "context",
    "delimited",
    "many1",
    "map_value",
    "opt",
    "sequence",
]

logger = logging.getLogger(__name__)


def alt[T](*parsers: Parser[T]) -> Parser[T]:
    """Try each parser at the same position and return the first success.

    When every branch fails, the branch errors are folded left to right
    with ``previous.merge(new)``, then an ErrorKind.ALT frame is appended
    at the alternation's start. With GreedyError this keeps the branch that
    got furthest into the input; on a tie the earlier branch wins.

    Example:
        >>> grammar = alt(sequence(alpha1, digit1, alpha1), sequence(digit1, alpha1, digit1))
        >>> err = grammar(Cursor("abc012:::", 0), GreedyError)
        >>> [frame.position for frame in err.frames]
        [6, 0]
    """
    if not parsers:
        msg = "alt() requires at least one parser"
        raise ValueError(msg)

    def parse_alt(cursor: Cursor, error_type: ErrorType) -> Outcome[T]:
        error = None
        for branch in parsers:
            result = branch(cursor, error_type)
            if isinstance(result, ParseResult):
                return result
            error = result if error is None else error.merge(result)

        logger.debug(
            "All %d alternatives failed at offset %d (%s policy)",
            len(parsers),
            cursor.pos,
            error_type.__name__,
        )
        return error_type.append(cursor, Kind(ErrorKind.ALT), error)

    return parse_alt


def sequence(*parsers: Parser[object]) -> Parser[tuple[object, ...]]:
    """Run parsers one after another and collect their values in a tuple.

    The first failure is returned as-is; no frame is added.
    """

    def parse_sequence(cursor: Cursor, error_type: ErrorType) -> Outcome[tuple[object, ...]]:
        values: list[object] = []
        current = cursor
        for item in parsers:
            result = item(current, error_type)
            if not isinstance(result, ParseResult):
                return result
            values.append(result.value)
            current = result.cursor
        return ParseResult(tuple(values), current)

    return parse_sequence


def context[T](label: str, parser: Parser[T]) -> Parser[T]:
    """Annotate failures of ``parser`` with a named grammar rule.

    The context frame is recorded at the position where the rule started.

    Example:
        >>> identifier = context("identifier", alpha1)
        >>> identifier(Cursor("123", 0), GreedyError).frames[-1].reason
        Context(label='identifier')
    """

    def parse_context(cursor: Cursor, error_type: ErrorType) -> Outcome[T]:
        result = parser(cursor, error_type)
        if isinstance(result, ParseResult):
            return result
        return error_type.with_context(cursor, label, result)

    return parse_context


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Match ``parser`` one or more times.

    Fails with an ErrorKind.MANY1 frame appended when the first item does
    not match. Repetition stops at the first failure or when an item
    consumes no input.
    """

    def parse_many1(cursor: Cursor, error_type: ErrorType) -> Outcome[tuple[T, ...]]:
        first = parser(cursor, error_type)
        if not isinstance(first, ParseResult):
            return error_type.append(cursor, Kind(ErrorKind.MANY1), first)

        values = [first.value]
        current = first.cursor
        while True:
            result = parser(current, error_type)
            if not isinstance(result, ParseResult) or result.cursor.pos == current.pos:
                break
            values.append(result.value)
            current = result.cursor
        return ParseResult(tuple(values), current)

    return parse_many1


def opt[T](parser: Parser[T]) -> Parser[T | None]:
    """Make ``parser`` optional: None (and no input consumed) on failure."""

    def parse_opt(cursor: Cursor, error_type: ErrorType) -> Outcome[T | None]:
        result = parser(cursor, error_type)
        if isinstance(result, ParseResult):
            return result
        return ParseResult(None, cursor)

    return parse_opt


def map_value[T, U](parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse."""

    def parse_map(cursor: Cursor, error_type: ErrorType) -> Outcome[U]:
        result = parser(cursor, error_type)
        if isinstance(result, ParseResult):
            return ParseResult(func(result.value), result.cursor)
        return result

    return parse_map


def delimited[T](left: Parser[object], inner: Parser[T], right: Parser[object]) -> Parser[T]:
    """Match ``left inner right`` and keep only the inner value.

    Example:
        >>> group = delimited(char("("), alpha1, char(")"))
        >>> group(Cursor("(abc)", 0), GreedyError).value
        'abc'
    """
    return map_value(sequence(left, inner, right), lambda values: values[1])
