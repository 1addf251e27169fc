"""Enumerations for greedyerror type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a rendered trace shows
``in Alpha`` rather than ``in ErrorKind.ALPHA``.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["ErrorKind"]


class ErrorKind(StrEnum):
    """Failure classification reported by the bundled parser engine.

    The accumulator treats these as opaque tags: it stores and prints them,
    never inspects them. Other engines may use any comparable, printable
    value in their place.

    StrEnum provides automatic string conversion: str(ErrorKind.ALPHA) == "Alpha"
    """

    ALPHA = "Alpha"
    """alpha1 found no letter"""

    DIGIT = "Digit"
    """digit1 found no ASCII digit"""

    ALPHANUMERIC = "AlphaNumeric"
    """alphanumeric1 found no letter or digit"""

    TAG = "Tag"
    """tag() literal did not match"""

    ALT = "Alt"
    """Every branch of an alternation failed"""

    MANY1 = "Many1"
    """many1() could not match its first item"""

    EOF = "Eof"
    """Input remained where end of input was required"""
