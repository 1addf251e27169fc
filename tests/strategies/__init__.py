"""Hypothesis strategies for greedyerror property-based testing.

Usage:
    from tests.strategies import sources, greedy_errors
    from tests.strategies.diagnostics import cursors_into, failure_reasons
"""

from .diagnostics import (
    cursors_into,
    failure_reasons,
    greedy_errors,
    source_lines,
    sources,
)

__all__ = [
    "cursors_into",
    "failure_reasons",
    "greedy_errors",
    "source_lines",
    "sources",
]
