"""Bundled combinator engine.

A small nom-style engine that reports into the accumulators from
:mod:`greedyerror.diagnostics`. Any other engine can use the accumulators
directly; this one exists so grammars can be written and run end to end.

Python 3.13+.
"""

from .combinators import alt, context, delimited, many1, map_value, opt, sequence
from .core import parse, parse_partial
from .primitives import (
    ErrorType,
    Outcome,
    Parser,
    alpha1,
    alphanumeric1,
    char,
    digit1,
    eof,
    space0,
    tag,
)

__all__ = [
    "ErrorType",
    "Outcome",
    "Parser",
    "alpha1",
    "alphanumeric1",
    "alt",
    "char",
    "context",
    "delimited",
    "digit1",
    "eof",
    "many1",
    "map_value",
    "opt",
    "parse",
    "parse_partial",
    "sequence",
    "space0",
    "tag",
]
