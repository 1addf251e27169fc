"""Entry point of the bundled parser engine.

Runs a grammar over a complete input and converts a failure into a
ParseFailedError carrying the accumulated frames.
"""

import logging

from greedyerror.diagnostics.accumulator import GreedyError, deepest_position
from greedyerror.diagnostics.errors import ParseFailedError
from greedyerror.syntax.cursor import Cursor, ParseResult

from .primitives import ErrorType, Outcome, Parser, eof

__all__ = ["parse", "parse_partial"]

logger = logging.getLogger(__name__)


def parse_partial[T](
    parser: Parser[T], source: str, *, error_type: ErrorType = GreedyError
) -> Outcome[T]:
    """Run ``parser`` from the start of ``source`` without raising.

    Trailing input is allowed.

    Returns:
        ParseResult on success, otherwise the error accumulator
    """
    return parser(Cursor(source, 0), error_type)


def parse[T](parser: Parser[T], source: str, *, error_type: ErrorType = GreedyError) -> T:
    """Parse the whole of ``source`` and return the parsed value.

    Args:
        parser: Grammar to run
        source: Complete input text
        error_type: Accumulator class (GreedyError or VerboseError)

    Returns:
        The value produced by ``parser``

    Raises:
        ParseFailedError: If the grammar fails or leaves input unconsumed

    Example:
        >>> parse(sequence(alpha1, digit1), "abc012")
        ('abc', '012')
    """
    result = parse_partial(parser, source, error_type=error_type)
    if isinstance(result, ParseResult):
        end = eof(result.cursor, error_type)
        if isinstance(end, ParseResult):
            return result.value
        result = end

    logger.debug(
        "Parse failed: %d frame(s), innermost failure at offset %s",
        len(result.frames),
        deepest_position(result),
    )
    raise ParseFailedError(source, result)
