"""Failure reasons and error frames.

Defines the span capability the accumulator depends on, the tagged union
of failure reasons, and the (span, reason) frame pair.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Context",
    "ErrorFrame",
    "ExpectedChar",
    "FailureReason",
    "Kind",
    "Located",
]


@runtime_checkable
class Located(Protocol):
    """Capability required from a span by the accumulator and renderer.

    Any span or slice type can take part by providing these two methods;
    the accumulator is generic over this interface only.
    """

    def position(self) -> int:
        """Absolute offset of the span's first character in the original input."""
        ...

    def text(self) -> str:
        """Content of the span, from its start to the end of input."""
        ...


@dataclass(frozen=True, slots=True)
class Context:
    """Named grammar rule annotation attached while unwinding.

    Attributes:
        label: Rule name, e.g. "identifier"
    """

    label: str


@dataclass(frozen=True, slots=True)
class ExpectedChar:
    """A single expected literal character was not found.

    Attributes:
        char: The expected character
    """

    char: str


@dataclass(frozen=True, slots=True)
class Kind[T]:
    """Opaque classification value supplied by the host parsing engine.

    The tag is stored and printed, never inspected.

    Attributes:
        tag: Engine-owned failure classification
    """

    tag: T


type FailureReason = Context | ExpectedChar | Kind


@dataclass(frozen=True, slots=True)
class ErrorFrame[S: Located]:
    """One recorded failure: at this point in the input, this failure occurred.

    Attributes:
        span: Input position where the failure was recorded
        reason: What failed there
    """

    span: S
    reason: FailureReason

    @property
    def position(self) -> int:
        """Absolute offset of the frame's span."""
        return self.span.position()
