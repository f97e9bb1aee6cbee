"""Immutable cursor infrastructure for parser combinators.

Implements the input buffer every parser consumes: a source plus an offset.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Zero-copy: advancing produces a new offset over the SAME source
    - Two modes share one type: str (text) and bytes (binary)
    - EOF is a state (is_eof), not a return value
    - Line:column computed on-demand (O(n) only for errors)

Units:
    Text mode indexes Unicode code points, so a slice can never split an
    encoded scalar value. Binary mode indexes raw bytes; indexing yields
    ``int`` values, exactly as ``bytes.__getitem__`` does.

Line Ending Support:
    compute_line_col() uses LF as the line delimiter in both modes. CRLF
    input works because the LF is still present.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "Source", "Unit", "as_cursor"]

type Source = str | bytes
type Unit = str | int


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view into the unconsumed suffix of a buffer.

    Equality is structural: two cursors are equal when they share an equal
    source and the same offset. Failure outcomes carry the cursor at which
    they happened, so a caller can always retry from there.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.rest
        'hello'
        >>> advanced = cursor.advance(2)
        >>> advanced.rest
        'llo'
        >>> cursor.pos  # Original unchanged
        0
        >>> Cursor(b"\\x01\\x02").current  # Binary units are ints
        1
    """

    source: Source
    pos: int = 0

    def __post_init__(self) -> None:
        """Validate the source type and offset.

        Raises:
            TypeError: If source is neither str nor bytes
            ValueError: If pos lies outside 0..len(source)
        """
        if not isinstance(self.source, (str, bytes)):
            msg = f"Cursor source must be str or bytes, got {type(self.source).__name__}"
            raise TypeError(msg)
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor.pos must be within 0..{len(self.source)}, got {self.pos}"
            raise ValueError(msg)

    def __repr__(self) -> str:
        rest = self.rest
        if len(rest) > 20:
            rest = rest[:20]
            return f"Cursor(pos={self.pos}, rest={rest!r}...)"
        return f"Cursor(pos={self.pos}, rest={rest!r})"

    @property
    def is_text(self) -> bool:
        """True for str sources, False for bytes sources."""
        return isinstance(self.source, str)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def rest(self) -> Source:
        """Unconsumed suffix (a copy, for inspection and final results)."""
        return self.source[self.pos :]

    @property
    def rest_len(self) -> int:
        """Number of unconsumed units."""
        return len(self.source) - self.pos

    @property
    def empty(self) -> Source:
        """Empty value of the source's type ("" or b"")."""
        return self.source[:0]

    @property
    def current(self) -> Unit:
        """Get the current unit.

        Returns:
            One-character str in text mode, int in binary mode

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> Unit | None:
        """Peek at the unit ``offset`` positions ahead without advancing.

        Returns:
            The unit, or None when peeking beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count units, clamped at EOF.

        Example:
            >>> cursor = Cursor("hello")
            >>> cursor.advance(10).is_eof
            True
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def jump(self, pos: int) -> "Cursor":
        """Return a cursor over the same source at an absolute offset."""
        return Cursor(self.source, pos)

    def slice_to(self, end_pos: int) -> Source:
        """Extract the source slice from the current position to end_pos.

        Used to build the value of a match once its end is known:

            >>> start = Cursor("hello world")
            >>> end = start.advance(5)
            >>> start.slice_to(end.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> Source:
        """Get up to the next n units without advancing."""
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for the current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors). Columns
            count code points in text mode and bytes in binary mode.

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        newline = "\n" if isinstance(self.source, str) else b"\n"
        line = self.source.count(newline, 0, self.pos) + 1  # type: ignore[arg-type]
        last_newline = self.source.rfind(newline, 0, self.pos)  # type: ignore[arg-type]
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


def as_cursor(data: Source | Cursor) -> Cursor:
    """Wrap raw input in a cursor at offset 0; cursors pass through.

    Raises:
        TypeError: If data is not str, bytes or Cursor
    """
    if isinstance(data, Cursor):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return Cursor(bytes(data))
    return Cursor(data)
