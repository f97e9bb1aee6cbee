"""Shared constants for parsenom.

Centralizes character classes, numeric widths and diagnostic rendering
limits used across the primitives and diagnostics packages. Placing them
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Character classes: ASCII unit sets behind the class recognizers
- Line endings: units recognized by the line helpers
- Numeric limits: widths and digit caps for numeric decoders
- Diagnostic rendering: excerpt and truncation sizes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "ALPHA_CHARS",
    "DIGIT_CHARS",
    "ALPHANUMERIC_CHARS",
    "HEX_DIGIT_CHARS",
    "OCT_DIGIT_CHARS",
    "BIN_DIGIT_CHARS",
    "SPACE_CHARS",
    "MULTISPACE_CHARS",
    # Line endings
    "CR",
    "LF",
    "CRLF",
    "TAB",
    # Numeric limits
    "HEX_U32_MAX_DIGITS",
    # Diagnostic rendering
    "CONTEXT_WINDOW",
    "HEX_DUMP_WIDTH",
    "MAX_CONTENT_LENGTH",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================
#
# All class recognizers are ASCII-only in both text and binary mode.
# Text mode tests membership of one-character strings, binary mode tests
# membership of the corresponding byte values (see primitives/character.py).

ALPHA_CHARS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS: str = "0123456789"
ALPHANUMERIC_CHARS: str = ALPHA_CHARS + DIGIT_CHARS
HEX_DIGIT_CHARS: str = "0123456789abcdefABCDEF"
OCT_DIGIT_CHARS: str = "01234567"
BIN_DIGIT_CHARS: str = "01"

# Inline whitespace: space and horizontal tab
SPACE_CHARS: str = " \t"

# Any ASCII whitespace the multispace recognizers accept
MULTISPACE_CHARS: str = " \t\r\n"

# ============================================================================
# LINE ENDINGS
# ============================================================================

CR: str = "\r"
LF: str = "\n"
CRLF: str = "\r\n"
TAB: str = "\t"

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# hex_u32 reads at most 8 hex digits (32 bits)
HEX_U32_MAX_DIGITS: int = 8


# ============================================================================
# DIAGNOSTIC RENDERING
# ============================================================================

# Units shown on each side of the failure position in text excerpts
CONTEXT_WINDOW: int = 40

# Bytes per row in binary hex-dump excerpts
HEX_DUMP_WIDTH: int = 16

# Truncation length for sanitized diagnostic content
MAX_CONTENT_LENGTH: int = 100
