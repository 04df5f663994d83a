"""ASCII character classification and case conversion.

Every function accepts either a single-character string or an integer
character code. Predicates return ``bool``. Case converters return a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(
        f"expected a one-character string or an int, not {type(c).__name__}"
    )


def is_upper(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII uppercase letter."""
    return 0x41 <= _code(c) <= 0x5A


def is_lower(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII lowercase letter."""
    return 0x61 <= _code(c) <= 0x7A


def is_alpha(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII letter."""
    return is_upper(c) or is_lower(c)


def is_digit(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII decimal digit."""
    return 0x30 <= _code(c) <= 0x39


def is_alnum(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return whether ``c`` lies in the 7-bit ASCII range."""
    return 0x00 <= _code(c) <= 0x7F


def is_punct(c: CharLike) -> bool:
    """Return whether ``c`` is a printable, non-space, non-alphanumeric ASCII character."""
    return 0x21 <= _code(c) <= 0x7E and not is_alnum(c)


def is_print(c: CharLike) -> bool:
    """Return whether ``c`` is a printable ASCII character, space included."""
    return is_alnum(c) or _code(c) == 0x20 or is_punct(c)


def is_space(c: CharLike) -> bool:
    """Return whether ``c`` is ASCII whitespace: tab, newline, vertical tab,
    form feed, carriage return or space."""
    code = _code(c)
    return 0x09 <= code <= 0x0D or code == 0x20


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Return the lowercase form of an ASCII uppercase letter; other input unchanged."""
    code = _code(c)
    if is_upper(code):
        return _convert(c, code + 0x20)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Return the uppercase form of an ASCII lowercase letter; other input unchanged."""
    code = _code(c)
    if is_lower(code):
        return _convert(c, code - 0x20)
    return c