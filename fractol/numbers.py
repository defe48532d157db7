"""Validation and parsing of the decimal numbers accepted on the command line."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]+)?)?")
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def is_number(text: str) -> bool:
    """Return True if *text* is an optionally signed decimal number.

    Digits are required before a decimal point and, if a point is
    present, at least one digit must follow it.  A lone sign is accepted.
    """
    if not text:
        return False
    return _NUMBER.fullmatch(text) is not None


def parse_float(text: str) -> float:
    """Parse the leading decimal number of *text*.

    Leading whitespace is skipped, an optional sign is read, then the
    integer digits and an optional fractional part.  Anything after that
    is ignored; text without digits yields zero.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    whole = 0.0
    position = 0
    for char in rest:
        if char not in _DIGITS:
            break
        whole = whole * 10.0 + int(char)
        position += 1
    rest = rest[position:]

    fraction = 0.0
    if rest[:1] == ".":
        power = 10.0
        for char in rest[1:]:
            if char not in _DIGITS:
                break
            fraction += int(char) / power
            power *= 10.0

    return sign * (whole + fraction)