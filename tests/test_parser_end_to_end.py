"""End-to-end tests: grammars run through parse(), errors rendered.

The reference grammar accepts either letters-digits-letters or
digits-letters-digits. On "abc012:::" the first alternative matches
"abc012" before failing on ':', the second fails immediately. The greedy
policy reports the first; the last-wins policy reports the second.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from greedyerror import (
    GreedyError,
    ParseFailedError,
    VerboseError,
    deepest_position,
    parse,
    render,
)
from greedyerror.parser import (
    alpha1,
    alt,
    char,
    context,
    digit1,
    parse_partial,
    sequence,
)

GRAMMAR = alt(
    sequence(alpha1, digit1, alpha1),
    sequence(digit1, alpha1, digit1),
)

SOURCE = "abc012:::"


class TestReferenceScenario:
    """The alpha/digit alternation on 'abc012:::'."""

    def test_greedy_reports_deepest_branch(self) -> None:
        """GreedyError keeps the branch that failed at offset 6."""
        error = parse_partial(GRAMMAR, SOURCE, error_type=GreedyError)

        assert isinstance(error, GreedyError)
        assert deepest_position(error) == 6

    def test_verbose_reports_last_branch(self) -> None:
        """VerboseError keeps the last branch, which failed at offset 0."""
        error = parse_partial(GRAMMAR, SOURCE, error_type=VerboseError)

        assert isinstance(error, VerboseError)
        assert deepest_position(error) == 0

    def test_rendered_trace(self) -> None:
        """The accumulated frames render innermost first."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(GRAMMAR, SOURCE)

        assert exc_info.value.format_trace() == (
            "0: at line 0, in Alpha:\n"
            "abc012:::\n"
            "      ^\n"
            "\n"
            "1: at line 0, in Alt:\n"
            "abc012:::\n"
            "^\n"
            "\n"
        )
        assert str(exc_info.value) == "parse failed at line 1, column 7"

    def test_success(self) -> None:
        """Inputs matching either alternative parse to a tuple."""
        assert parse(GRAMMAR, "abc012def") == ("abc", "012", "def")
        assert parse(GRAMMAR, "12ab34") == ("12", "ab", "34")


class TestParseEntryPoint:
    """parse() requires complete input."""

    def test_trailing_input_fails_with_eof(self) -> None:
        """Leftover input raises at the first unconsumed character."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(alpha1, "abc1")

        assert exc_info.value.position == 3
        assert "in Eof" in exc_info.value.format_trace()

    def test_empty_input(self) -> None:
        """Failures on empty input render the degraded form."""
        with pytest.raises(ParseFailedError) as exc_info:
            parse(alpha1, "")

        assert exc_info.value.format_trace() == "0: in Alpha, got empty input\n\n"

    def test_parse_partial_allows_trailing_input(self) -> None:
        """parse_partial returns a result with the remaining cursor."""
        result = parse_partial(alpha1, "abc1")

        assert not isinstance(result, GreedyError)
        assert result.cursor.pos == 3

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """parse() logs the innermost failure at debug level."""
        with caplog.at_level(logging.DEBUG, logger="greedyerror.parser.core"):
            with pytest.raises(ParseFailedError):
                parse(GRAMMAR, SOURCE)

        assert "innermost failure at offset 6" in caplog.text


class TestMultiLineGrammar:
    """A line-oriented grammar with named rules."""

    def test_context_on_second_line(self) -> None:
        """Named rules and expected characters render against their own lines."""
        assignment = context("assignment", sequence(alpha1, char("="), digit1, char(";")))
        source = "x=1;\ny=2:"
        program = sequence(assignment, char("\n"), assignment)

        with pytest.raises(ParseFailedError) as exc_info:
            parse(program, source)

        assert exc_info.value.format_trace() == (
            "0: at line 1:\n"
            "y=2:\n"
            "   ^\n"
            "expected ';', found :\n"
            "\n"
            "1: at line 1, in assignment:\n"
            "y=2:\n"
            "^\n"
            "\n"
        )


class TestGreedyProperty:
    """Greedy never reports a shallower failure than last-wins."""

    @given(source=st.text(alphabet="ab12:", max_size=12))
    @settings(max_examples=200)
    def test_greedy_at_least_as_deep(self, source: str) -> None:
        """PROPERTY: greedy deepest position >= verbose deepest position."""
        greedy = parse_partial(GRAMMAR, source, error_type=GreedyError)
        verbose = parse_partial(GRAMMAR, source, error_type=VerboseError)

        if not isinstance(greedy, GreedyError):
            event("outcome=parsed")
            return
        assert isinstance(verbose, VerboseError)
        event(f"outcome={'deeper' if greedy.first_position > verbose.first_position else 'same'}")
        assert greedy.first_position >= verbose.first_position
        # Rendering any failure never raises.
        assert render(source, greedy).endswith("\n\n")
