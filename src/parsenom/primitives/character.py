"""Unit predicates shared by text and binary mode.

Every predicate accepts either a one-character str (text mode) or an int
byte value (binary mode), so the same function can be passed to the
predicate-driven recognizers of both namespaces:

    >>> is_digit("7"), is_digit(ord("7"))
    (True, True)

All classes are ASCII-only. Non-ASCII characters are never alphabetic,
digits or whitespace here, whatever str.isalpha() would say.
"""

from parsenom.constants import (
    ALPHA_CHARS,
    ALPHANUMERIC_CHARS,
    BIN_DIGIT_CHARS,
    DIGIT_CHARS,
    HEX_DIGIT_CHARS,
    OCT_DIGIT_CHARS,
    SPACE_CHARS,
)
from parsenom.core.cursor import Unit

__all__ = [
    "is_alphabetic",
    "is_alphanumeric",
    "is_bin_digit",
    "is_digit",
    "is_hex_digit",
    "is_newline",
    "is_oct_digit",
    "is_space",
    "unit_set",
]


def unit_set(chars: str | bytes, *, text: bool) -> frozenset[Unit]:
    """Build a membership set of units for the given mode.

    Args:
        chars: Characters (str) or byte values (bytes)
        text: True for one-character str units, False for int byte units

    Returns:
        Frozen set usable with ``unit in result``
    """
    if text:
        if isinstance(chars, bytes):
            chars = chars.decode("latin-1")
        return frozenset(chars)
    if isinstance(chars, str):
        chars = chars.encode("latin-1")
    return frozenset(chars)


_TEXT_CLASSES = {
    name: unit_set(chars, text=True)
    for name, chars in (
        ("alpha", ALPHA_CHARS),
        ("alphanumeric", ALPHANUMERIC_CHARS),
        ("digit", DIGIT_CHARS),
        ("hex", HEX_DIGIT_CHARS),
        ("oct", OCT_DIGIT_CHARS),
        ("bin", BIN_DIGIT_CHARS),
        ("space", SPACE_CHARS),
    )
}
_BYTE_CLASSES = {name: frozenset(ord(ch) for ch in units) for name, units in _TEXT_CLASSES.items()}


def _member(unit: Unit, name: str) -> bool:
    if isinstance(unit, int):
        return unit in _BYTE_CLASSES[name]
    return unit in _TEXT_CLASSES[name]


def is_alphabetic(unit: Unit) -> bool:
    """ASCII letter (A-Z, a-z)."""
    return _member(unit, "alpha")


def is_alphanumeric(unit: Unit) -> bool:
    """ASCII letter or digit."""
    return _member(unit, "alphanumeric")


def is_digit(unit: Unit) -> bool:
    """ASCII decimal digit (0-9)."""
    return _member(unit, "digit")


def is_hex_digit(unit: Unit) -> bool:
    """ASCII hexadecimal digit (0-9, a-f, A-F)."""
    return _member(unit, "hex")


def is_oct_digit(unit: Unit) -> bool:
    """ASCII octal digit (0-7)."""
    return _member(unit, "oct")


def is_bin_digit(unit: Unit) -> bool:
    """ASCII binary digit (0 or 1)."""
    return _member(unit, "bin")


def is_space(unit: Unit) -> bool:
    """Space or horizontal tab."""
    return _member(unit, "space")


def is_newline(unit: Unit) -> bool:
    """Line feed."""
    return unit in ("\n", 10)
