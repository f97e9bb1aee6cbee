"""Tests for core.cursor: Cursor and as_cursor.

Validates the immutable cursor over str and bytes sources, unit access,
slicing, and line/column computation.
"""

from __future__ import annotations

import pytest

from parsenom.core.cursor import Cursor, as_cursor

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestCursorConstruction:
    """Test cursor creation and validation."""

    def test_create_text_cursor(self) -> None:
        """Text cursor defaults to offset 0."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert cursor.is_text

    def test_create_binary_cursor(self) -> None:
        """Bytes source gives a binary cursor."""
        cursor = Cursor(b"\x00\x01", 1)

        assert not cursor.is_text
        assert cursor.pos == 1

    def test_rejects_non_buffer_source(self) -> None:
        """Only str and bytes are accepted as sources."""
        with pytest.raises(TypeError, match="str or bytes"):
            Cursor([1, 2, 3])  # type: ignore[arg-type]

    @pytest.mark.parametrize("pos", [-1, 6])
    def test_rejects_out_of_range_pos(self, pos: int) -> None:
        """Offset must lie within 0..len(source)."""
        with pytest.raises(ValueError, match="Cursor.pos"):
            Cursor("hello", pos)

    def test_cursor_is_immutable(self) -> None:
        """Cursor is a frozen dataclass."""
        cursor = Cursor("hello")

        with pytest.raises(AttributeError):
            cursor.pos = 3  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        """Cursors with equal source and offset compare equal."""
        assert Cursor("abc", 1) == Cursor("abc", 1)
        assert Cursor("abc", 1) != Cursor("abc", 2)
        assert Cursor("abc") != Cursor(b"abc")

    def test_repr_shows_offset_and_rest(self) -> None:
        """repr is compact and shows what is left."""
        assert repr(Cursor("hello", 2)) == "Cursor(pos=2, rest='llo')"

    def test_repr_truncates_long_rest(self) -> None:
        """Long remainders are cut at 20 units."""
        text = repr(Cursor("x" * 50))

        assert text.endswith("...)")
        assert "x" * 21 not in text


# ============================================================================
# UNIT ACCESS
# ============================================================================


class TestCursorUnits:
    """Test current, peek and EOF behaviour."""

    def test_text_current_is_one_char_string(self) -> None:
        """Text units are single characters."""
        assert Cursor("hé", 1).current == "é"

    def test_binary_current_is_int(self) -> None:
        """Binary units are ints, like bytes indexing."""
        assert Cursor(b"\xff\x00").current == 255

    def test_current_at_eof_raises(self) -> None:
        """current at EOF raises EOFError."""
        with pytest.raises(EOFError):
            _ = Cursor("ab", 2).current

    def test_peek_within_and_beyond(self) -> None:
        """peek returns the unit or None past the end."""
        cursor = Cursor("abc", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) == "c"
        assert cursor.peek(2) is None

    def test_is_eof(self) -> None:
        """is_eof is true only at the end."""
        assert Cursor("", 0).is_eof
        assert Cursor("ab", 2).is_eof
        assert not Cursor("ab", 1).is_eof

    def test_empty_matches_source_type(self) -> None:
        """empty is "" for text and b"" for binary."""
        assert Cursor("abc").empty == ""
        assert Cursor(b"abc").empty == b""


# ============================================================================
# NAVIGATION AND SLICING
# ============================================================================


class TestCursorNavigation:
    """Test advance, jump and slicing."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance leaves the original untouched."""
        cursor = Cursor("hello")
        advanced = cursor.advance(2)

        assert cursor.pos == 0
        assert advanced.pos == 2
        assert advanced.source is cursor.source

    def test_advance_clamps_at_eof(self) -> None:
        """Advancing beyond the end stops at the end."""
        assert Cursor("hello").advance(10).pos == 5

    def test_jump_to_absolute_offset(self) -> None:
        """jump moves to an absolute offset."""
        assert Cursor("hello", 1).jump(4).rest == "o"

    def test_rest_and_rest_len(self) -> None:
        """rest is the unconsumed suffix."""
        cursor = Cursor(b"\x01\x02\x03", 1)

        assert cursor.rest == b"\x02\x03"
        assert cursor.rest_len == 2

    def test_slice_to(self) -> None:
        """slice_to extracts from the cursor to an absolute end."""
        start = Cursor("hello world")

        assert start.slice_to(start.advance(5).pos) == "hello"

    def test_slice_ahead_is_bounded(self) -> None:
        """slice_ahead never reads past the end."""
        assert Cursor("abc", 1).slice_ahead(10) == "bc"


# ============================================================================
# LINE AND COLUMN
# ============================================================================


class TestLineColumn:
    """Test line/column computation for diagnostics."""

    def test_first_line(self) -> None:
        """Offsets on the first line are 1-indexed columns."""
        assert Cursor("hello", 0).compute_line_col() == (1, 1)
        assert Cursor("hello", 4).compute_line_col() == (1, 5)

    def test_after_newline(self) -> None:
        """Columns restart after each line feed."""
        assert Cursor("line1\nline2", 8).compute_line_col() == (2, 3)

    def test_crlf_counts_lf(self) -> None:
        """CRLF input counts one line per LF."""
        assert Cursor("a\r\nb", 3).compute_line_col() == (2, 1)

    def test_binary_lines(self) -> None:
        """Binary buffers use the 0x0a byte as line delimiter."""
        assert Cursor(b"ab\ncd", 4).compute_line_col() == (2, 2)


# ============================================================================
# AS_CURSOR
# ============================================================================


class TestAsCursor:
    """Test raw input conversion."""

    def test_wraps_str_and_bytes(self) -> None:
        """Raw buffers start at offset 0."""
        assert as_cursor("abc") == Cursor("abc", 0)
        assert as_cursor(b"abc") == Cursor(b"abc", 0)

    def test_passes_cursor_through(self) -> None:
        """Existing cursors are returned unchanged."""
        cursor = Cursor("abc", 2)

        assert as_cursor(cursor) is cursor

    def test_converts_bytearray(self) -> None:
        """bytearray and memoryview become immutable bytes."""
        assert as_cursor(bytearray(b"ab")).source == b"ab"
        assert as_cursor(memoryview(b"ab")).source == b"ab"

    def test_rejects_other_types(self) -> None:
        """Anything else is a TypeError."""
        with pytest.raises(TypeError):
            as_cursor(42)  # type: ignore[arg-type]
