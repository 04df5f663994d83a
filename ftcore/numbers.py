"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

from .chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the two's-complement 32-bit signed range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading ASCII whitespace is skipped, then one optional ``+`` or ``-``,
    then as many ASCII digits as follow. Anything after them is ignored, and
    text with no digits gives 0. Results outside the 32-bit signed range wrap
    around as two's-complement arithmetic does.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)