"""Immutable cursor infrastructure for type-safe parsing.

The cursor is the span type the bundled parser engine hands to the error
accumulator. It satisfies the ``Located`` capability: ``position()`` is the
absolute offset into the original input and ``text()`` is the remaining
input from that offset.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column is not tracked; the renderer derives it from position()

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported

Pattern Reference:
    - Rust nom parser combinator library (LocatedSpan)
    - Haskell Parsec
"""

from collections.abc import Callable
from dataclasses import dataclass

from greedyerror.diagnostics.templates import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per recorded frame)
        3. Simple position - Just an integer offset into ``source``
        4. Borrows source - slicing happens only when text() is asked for

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    def position(self) -> int:
        """Absolute offset of this cursor within the original input."""
        return self.pos

    def text(self) -> str:
        """Remaining input from this cursor to the end of the source.

        Example:
            >>> Cursor("abc012:::", 6).text()
            ':::'
        """
        return self.source[self.pos :]

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos))
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(99).pos  # Clamped to end of input
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def take_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Advance past every consecutive character matching predicate.

        Returns:
            New cursor at the first non-matching character (or EOF)

        Example:
            >>> Cursor("abc012", 0).take_while(str.isalpha).pos
            3
        """
        pos = self.pos
        end = len(self.source)
        while pos < end and predicate(self.source[pos]):
            pos += 1
        return Cursor(self.source, pos)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor, error_type) -> ParseResult[Foo] | E

        A result that is not a ParseResult is the failure accumulator.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult('h', cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
