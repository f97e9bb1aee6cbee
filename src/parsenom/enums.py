"""Enumerations for parsenom type-safe constants.

Uses StrEnum for automatic string conversion, so every member compares
equal to its plain string tag (``ErrorKind.DIGIT == "digit"``).

Python 3.13+.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification tag carried by every failure outcome.

    The set is closed: each recognizer and combinator documents which kind
    it reports. StrEnum provides automatic string conversion:
    str(ErrorKind.TAG) == "tag"
    """

    # Literals and character classes
    TAG = "tag"
    """Literal (or case-insensitive literal) did not match."""

    ALPHA = "alpha"
    """Expected at least one ASCII letter."""

    ALPHANUMERIC = "alphanumeric"
    """Expected at least one ASCII letter or digit."""

    DIGIT = "digit"
    """Expected at least one ASCII decimal digit."""

    HEX_DIGIT = "hex_digit"
    """Expected at least one ASCII hexadecimal digit."""

    OCT_DIGIT = "oct_digit"
    """Expected at least one ASCII octal digit."""

    SPACE = "space"
    """Expected at least one space or tab."""

    MULTISPACE = "multispace"
    """Expected at least one space, tab, carriage return or line feed."""

    # Single units
    CHAR = "char"
    """Expected one specific unit."""

    ANYCHAR = "anychar"
    """Expected any unit, found end of input."""

    SATISFY = "satisfy"
    """Unit did not satisfy the predicate."""

    ONE_OF = "one_of"
    """Unit is not a member of the allowed set."""

    NONE_OF = "none_of"
    """Unit is a member of the forbidden set."""

    NEWLINE = "newline"
    """Expected a line feed."""

    CRLF = "crlf"
    """Expected a carriage return followed by a line feed."""

    CR_LF = "cr_lf"
    """Expected a line ending (LF or CRLF)."""

    # Slicing and searching
    EOF = "eof"
    """Not enough input for a fixed-size read, or input not at end."""

    TAKE_WHILE1 = "take_while1"
    """Predicate run was empty."""

    TAKE_WHILE_M_N = "take_while_m_n"
    """Predicate run was shorter than the minimum."""

    TAKE_TILL1 = "take_till1"
    """Run before the terminator was empty."""

    TAKE_UNTIL = "take_until"
    """Pattern not found (or found at the start for the non-empty variant)."""

    IS_A = "is_a"
    """No unit from the allowed set at the start of input."""

    IS_NOT = "is_not"
    """Unit from the forbidden set at the start of input."""

    ESCAPED = "escaped"
    """Control unit without a valid escape, or nothing consumed."""

    # Combinators
    ALT = "alt"
    """Alternative over an empty collection."""

    NOT = "not"
    """Negative lookahead saw its sub-parser succeed."""

    VERIFY = "verify"
    """Predicate rejected a successfully parsed value."""

    MAP_RES = "map_res"
    """Fallible value conversion raised ValueError."""

    ALL_CONSUMING = "all_consuming"
    """Input left over after a parser that must consume everything."""

    COMPLETE = "complete"
    """Incomplete outcome converted into an ordinary failure."""

    FAIL = "fail"
    """Unconditional failure."""

    # Repetition
    MANY = "many"
    """Repeated parser matched without consuming input."""

    MANY1 = "many1"
    """Fold expected at least one element."""

    MANY_M_N = "many_m_n"
    """Fewer repetitions than the minimum."""

    FOLD_MANY = "fold_many"
    """Folded parser matched without consuming input."""

    MANY_TILL = "many_till"
    """Element parser matched without consuming input before the terminator."""

    SEPARATED_LIST = "separated_list"
    """Separator and element matched without consuming input."""

    LENGTH_COUNT = "length_count"
    """Length parser produced something other than a non-negative integer."""

    LENGTH_DATA = "length_data"
    """Length prefix unusable, or the slice does not fall on a unit boundary."""

    # Numbers
    FLOAT = "float"
    """Expected a textual floating point number."""


class Endianness(StrEnum):
    """Byte order for fixed-width binary numerics.

    Member values match the ``byteorder`` argument of ``int.from_bytes``.
    """

    BIG = "big"
    """Most significant byte first (network order)."""

    LITTLE = "little"
    """Least significant byte first."""


class SliceUnit(StrEnum):
    """Unit in which a length prefix is counted by ``length_data``.

    StrEnum provides automatic string conversion: str(SliceUnit.BYTE) == "byte"
    """

    UNIT = "unit"
    """Native buffer unit: code points for str, bytes for bytes."""

    BYTE = "byte"
    """Bytes. For str buffers, counted in the UTF-8 encoding."""

    UTF8 = "utf8"
    """Unicode scalar values. For bytes buffers, decoded as UTF-8."""


__all__ = [
    "Endianness",
    "ErrorKind",
    "SliceUnit",
]
