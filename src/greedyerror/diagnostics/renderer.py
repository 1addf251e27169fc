"""Trace rendering for accumulated error frames.

Turns a finished accumulator into a multi-paragraph trace, one paragraph
per frame, innermost failure first:

    0: at line 0, in Alpha:
    abc012:::
          ^

    1: at line 0, in Alt:
    abc012:::
    ^

Frames are rendered independently against the whole source; they are
never reordered or deduplicated.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from greedyerror.constants import CARET_MARKER
from greedyerror.syntax.position import locate, split_lines

from .accumulator import ErrorAccumulator
from .frames import Context, ErrorFrame, ExpectedChar, FailureReason, Kind
from .templates import ErrorTemplate

__all__ = ["KindLabel", "frame_label", "reason_message", "render"]

type KindLabel = Callable[[object], str]


def frame_label(reason: FailureReason, kind_label: KindLabel = str) -> str | None:
    """Label shown in a frame header, None for expected-character frames."""
    match reason:
        case Context(label=label):
            return label
        case Kind(tag=tag):
            return kind_label(tag)
        case ExpectedChar():
            return None


def reason_message(reason: FailureReason, kind_label: KindLabel = str) -> str:
    """Short description of a failure reason.

    Example:
        >>> reason_message(ExpectedChar(":"))
        "expected ':'"
        >>> reason_message(Context("identifier"))
        'in identifier'
    """
    match reason:
        case ExpectedChar(char=char):
            return ErrorTemplate.expected_char(char)
        case Context(label=label):
            return ErrorTemplate.in_label(label)
        case Kind(tag=tag):
            return ErrorTemplate.in_label(kind_label(tag))


def _render_frame(
    lines: list[str], index: int, frame: ErrorFrame, kind_label: KindLabel
) -> list[str]:
    """Render one frame block (without the trailing blank line)."""
    line, column = locate(lines, frame.position)
    reason = frame.reason

    block = [
        ErrorTemplate.frame_header(index, line, frame_label(reason, kind_label)),
        lines[line],
        " " * column + CARET_MARKER,
    ]

    if isinstance(reason, ExpectedChar):
        found = frame.span.text()[:1] or None
        block.append(ErrorTemplate.expected_found(reason.char, found))

    return block


def render(source: str, error: ErrorAccumulator, *, kind_label: KindLabel = str) -> str:
    """Render every frame of an accumulator against the original input.

    Args:
        source: The complete input the failing parse was run on
        error: Finished accumulator whose spans point into ``source``
        kind_label: Formats engine tags for display (default: str)

    Returns:
        One block per frame, each followed by a blank line. Empty input
        degrades every frame to a single descriptive line. An empty
        accumulator renders as the empty string.

    Note:
        Spans that do not come from ``source`` produce meaningless but
        non-crashing output: offsets are clamped to the source's lines.

    Example:
        >>> err = GreedyError.from_error_kind(Cursor("abc012:::", 6), ErrorKind.ALPHA)
        >>> print(render("abc012:::", err))
        0: at line 0, in Alpha:
        abc012:::
              ^
        <BLANKLINE>
        <BLANKLINE>
    """
    lines = split_lines(source)
    blocks: list[str] = []

    for index, frame in enumerate(error.frames):
        if not lines:
            message = reason_message(frame.reason, kind_label)
            blocks.append(ErrorTemplate.empty_input(index, message))
        else:
            blocks.append("\n".join(_render_frame(lines, index, frame, kind_label)))

    return "".join(block + "\n\n" for block in blocks)
