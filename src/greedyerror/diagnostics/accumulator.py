"""Error accumulators threaded through a backtracking parse.

An accumulator collects (span, reason) frames as a failure unwinds through
nested combinators. Index 0 is the innermost failure; later frames are
progressively outer context.

Two merge policies are provided for alternation points:

    GreedyError  - keep the chain whose innermost failure got furthest into
                   the input (ties keep the left operand)
    VerboseError - keep the chain of the last alternative tried

The greedy rule is a heuristic: the branch that consumed the most input
before failing is assumed to be the one the author meant. It is not a
correctness guarantee.

Python 3.13+. Zero external dependencies.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Protocol, Self, runtime_checkable

from greedyerror.constants import DEFAULT_POSITION

from .frames import Context, ErrorFrame, ExpectedChar, FailureReason, Kind, Located

__all__ = [
    "ErrorAccumulator",
    "GreedyError",
    "ParseErrorPolicy",
    "VerboseError",
    "deepest_position",
]


@runtime_checkable
class ParseErrorPolicy(Protocol):
    """Error contract the bundled parser engine is generic over.

    Mirrors what a combinator engine needs from its error type: build from
    an engine tag or an expected character, add outer context, combine two
    failed alternatives, and hand the frames to the renderer.
    """

    @property
    def frames(self) -> tuple[ErrorFrame[Any], ...]: ...

    @classmethod
    def from_error_kind(cls, span: Located, kind: object) -> Self: ...

    @classmethod
    def from_char(cls, span: Located, char: str) -> Self: ...

    @classmethod
    def append(cls, span: Located, reason: FailureReason, other: Self) -> Self: ...

    @classmethod
    def with_context(cls, span: Located, label: str, other: Self) -> Self: ...

    def merge(self, other: Self) -> Self: ...


@dataclass(frozen=True, slots=True)
class ErrorAccumulator[S: Located](ABC):
    """Immutable ordered chain of error frames.

    Abstract: concrete policies (GreedyError, VerboseError) supply merge().

    Every factory yields at least one frame. An empty chain can only be
    built by calling the constructor directly; it compares as position 0
    when merged and has no deepest position.

    Attributes:
        frames: Frames, innermost failure first
    """

    frames: tuple[ErrorFrame[S], ...]

    @classmethod
    def from_reason(cls, span: S, reason: FailureReason) -> Self:
        """Start a chain with exactly one frame.

        Example:
            >>> err = GreedyError.from_reason(Cursor("abc", 1), Context("word"))
            >>> len(err)
            1
        """
        return cls((ErrorFrame(span, reason),))

    @classmethod
    def from_error_kind(cls, span: S, kind: object) -> Self:
        """Start a chain from an engine failure tag."""
        return cls.from_reason(span, Kind(kind))

    @classmethod
    def from_char(cls, span: S, char: str) -> Self:
        """Start a chain from an expected-character mismatch."""
        return cls.from_reason(span, ExpectedChar(char))

    @classmethod
    def append(cls, span: S, reason: FailureReason, other: Self) -> Self:
        """Return ``other`` with one outer-context frame added at the end.

        Existing frames keep their order, so the deepest position is
        unchanged.
        """
        return cls((*other.frames, ErrorFrame(span, reason)))

    @classmethod
    def with_context(cls, span: S, label: str, other: Self) -> Self:
        """Append a named-rule frame."""
        return cls.append(span, Context(label), other)

    @abstractmethod
    def merge(self, other: Self) -> Self:
        """Combine two failed alternatives into one chain."""

    @property
    def first_position(self) -> int:
        """Offset of the innermost frame, 0 for an empty chain."""
        if not self.frames:
            return DEFAULT_POSITION
        return self.frames[0].position

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[ErrorFrame[S]]:
        return iter(self.frames)


@dataclass(frozen=True, slots=True)
class GreedyError[S: Located](ErrorAccumulator[S]):
    """Accumulator that reports the alternative which got furthest.

    Example:
        >>> a = GreedyError.from_error_kind(Cursor("abc012:::", 6), ErrorKind.ALPHA)
        >>> b = GreedyError.from_error_kind(Cursor("abc012:::", 0), ErrorKind.DIGIT)
        >>> a.merge(b) is a
        True
        >>> b.merge(a) is a
        True
    """

    def merge(self, other: Self) -> Self:
        """Keep whichever chain has the greater first-frame position.

        The winner is kept whole and the loser discarded. Equal positions
        keep ``self``.
        """
        if other.first_position > self.first_position:
            return other
        return self


@dataclass(frozen=True, slots=True)
class VerboseError[S: Located](ErrorAccumulator[S]):
    """Accumulator that reports the last alternative tried.

    This is the naive policy: at an alternation point the earlier branches'
    errors are dropped regardless of how far they got.
    """

    def merge(self, other: Self) -> Self:
        """Keep ``other``, the most recently tried alternative."""
        return other


def deepest_position(error: ErrorAccumulator) -> int | None:
    """Offset of the innermost recorded failure.

    Args:
        error: Finished accumulator

    Returns:
        Position of the first frame, or None if the chain is empty

    Example:
        >>> err = GreedyError.from_char(Cursor("abc", 2), ":")
        >>> deepest_position(GreedyError.with_context(Cursor("abc", 0), "rule", err))
        2
    """
    if not error.frames:
        return None
    return error.frames[0].position
