"""Hypothesis strategies for the diagnostics domain.

Provides reusable, event-emitting strategies for generating sources,
cursors into those sources, failure reasons and accumulators.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - diag_source_shape: Source classification (empty|single|multi|trailing_nl)
    - diag_reason: FailureReason variant (context|char|kind)
    - diag_chain_len: Accumulator length bucket (one|few|many)
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from greedyerror.diagnostics.accumulator import GreedyError
from greedyerror.diagnostics.frames import Context, ExpectedChar, FailureReason, Kind
from greedyerror.enums import ErrorKind
from greedyerror.syntax.cursor import Cursor

# Printable, no control characters, no newlines (lines are built explicitly).
_line_chars = st.characters(
    exclude_categories=["Cc", "Cs"], exclude_characters=["\n", "\r"]
)

source_lines = st.text(alphabet=_line_chars, min_size=0, max_size=30)


@st.composite
def sources(draw: st.DrawFn) -> str:
    """Generate input text with 0..6 lines.

    Events emitted:
    - diag_source_shape={empty|single|multi|trailing_nl}
    """
    lines = draw(st.lists(source_lines, min_size=0, max_size=6))
    trailing = draw(st.booleans())
    source = "\n".join(lines)
    if trailing and lines:
        source += "\n"

    if not source:
        event("diag_source_shape=empty")
    elif "\n" not in source:
        event("diag_source_shape=single")
    elif source.endswith("\n"):
        event("diag_source_shape=trailing_nl")
    else:
        event("diag_source_shape=multi")
    return source


@st.composite
def cursors_into(draw: st.DrawFn, source: str) -> Cursor:
    """Generate a cursor at any offset 0..len(source) of ``source``."""
    return Cursor(source, draw(st.integers(min_value=0, max_value=len(source))))


@st.composite
def failure_reasons(draw: st.DrawFn) -> FailureReason:
    """Generate any FailureReason variant.

    Events emitted:
    - diag_reason={context|char|kind}
    """
    variant = draw(st.sampled_from(["context", "char", "kind"]))
    event(f"diag_reason={variant}")
    match variant:
        case "context":
            return Context(draw(st.sampled_from(["identifier", "number", "group", "rule"])))
        case "char":
            return ExpectedChar(draw(st.characters(exclude_categories=["Cc", "Cs"])))
        case _:
            return Kind(draw(st.sampled_from(list(ErrorKind))))


@st.composite
def greedy_errors(draw: st.DrawFn, source: str | None = None) -> GreedyError[Cursor]:
    """Generate a non-empty GreedyError whose spans point into one source.

    Events emitted:
    - diag_chain_len={one|few|many}
    """
    if source is None:
        source = draw(sources())
    error = GreedyError.from_reason(draw(cursors_into(source)), draw(failure_reasons()))
    extra = draw(st.integers(min_value=0, max_value=8))
    for _ in range(extra):
        error = GreedyError.append(draw(cursors_into(source)), draw(failure_reasons()), error)

    length = len(error)
    event(f"diag_chain_len={'one' if length == 1 else 'few' if length <= 4 else 'many'}")
    return error
