"""Binary Format Example - Decoding a PNG-style Chunk Stream.

Demonstrates binary-mode parsing:

1. Match a magic signature with binary.tag()
2. Decode big-endian length prefixes and build the chunk body with flat_map()
3. Read a fixed header inside a chunk with length_value()
4. Handle truncated input with length_data(): Incomplete and complete()
5. Inspect a failure with a hex-dump excerpt

Python 3.13+.
"""

from __future__ import annotations

import struct
import zlib

SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data)
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def build_sample() -> bytes:
    """Build a tiny image stream: IHDR, a text chunk and IEND."""
    header = struct.pack(">IIBBBBB", 16, 9, 8, 6, 0, 0, 0)
    return (
        SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"tEXt", b"Comment\x00made by hand")
        + _chunk(b"IEND", b"")
    )


def chunk_parser():
    """Parser for one chunk as (type, data, crc)."""
    from parsenom.combinators import flat_map, map, pair, sequence
    from parsenom.primitives import binary, number

    # The length prefix comes before the type, so the body is built from both.
    header = pair(number.be_u32(), binary.take(4))

    def body(fields):  # type: ignore[no-untyped-def]
        size, chunk_type = fields
        rest = sequence((binary.take(size), number.be_u32()))
        return map(rest, lambda parts: (chunk_type, *parts))

    return flat_map(header, body)


def example_1_signature() -> None:
    """Match the magic signature."""
    from parsenom import Matched, run
    from parsenom.primitives import binary

    print("=" * 60)
    print("Example 1: Signature")
    print("=" * 60)

    outcome = run(binary.tag(SIGNATURE), build_sample())
    if isinstance(outcome, Matched):
        print(f"Signature ok, {outcome.remaining.rest_len} bytes of chunks follow")
    print()


def example_2_chunks() -> None:
    """Decode every chunk up to the end of input."""
    from parsenom import finish
    from parsenom.combinators import many0, preceded
    from parsenom.primitives import binary

    print("=" * 60)
    print("Example 2: Chunk stream")
    print("=" * 60)

    stream = preceded(binary.tag(SIGNATURE), many0(chunk_parser()))
    for chunk_type, data, crc in finish(stream, build_sample()):
        valid = zlib.crc32(chunk_type + data) == crc
        print(f"  {chunk_type.decode('ascii')}: {len(data):3d} bytes, crc ok={valid}")
    print()


def example_3_header_fields() -> None:
    """Decode a length-prefixed header with length_value()."""
    from parsenom import run
    from parsenom.combinators import length_value, sequence
    from parsenom.primitives import number

    print("=" * 60)
    print("Example 3: Length-prefixed header")
    print("=" * 60)

    fields = sequence((number.be_u32(), number.be_u32(), number.u8(), number.u8()))
    header = length_value(number.u8(), fields)

    data = bytes([10]) + struct.pack(">IIBB", 640, 480, 8, 2)
    width, height, depth, color = run(header, data).value  # type: ignore[union-attr]
    print(f"  {width}x{height}, depth {depth}, color type {color}")
    print()


def example_4_truncation() -> None:
    """Short input reports how much more is needed."""
    from parsenom import run
    from parsenom.combinators import complete, length_data
    from parsenom.primitives import number

    print("=" * 60)
    print("Example 4: Truncated input")
    print("=" * 60)

    text_field = length_data(number.be_u16())
    truncated = b"\x00\x10only part"

    print(f"  streaming: {run(text_field, truncated)}")
    print(f"  complete(): {run(complete(text_field), truncated)}")
    print()


def example_5_hex_excerpt() -> None:
    """Render a failure in a binary buffer."""
    from parsenom import ParseFailedError, finish
    from parsenom.diagnostics import DiagnosticFormatter
    from parsenom.primitives import binary

    print("=" * 60)
    print("Example 5: Hex excerpt")
    print("=" * 60)

    corrupted = b"\x89PNX\r\n\x1a\n"
    try:
        finish(binary.tag(SIGNATURE), corrupted)
    except ParseFailedError as error:
        assert error.diagnostic is not None
        print(DiagnosticFormatter().format_with_context(error.diagnostic, corrupted))
    print()


def main() -> None:
    """Run all binary examples."""
    print()
    print("parsenom Binary Examples")
    print()

    example_1_signature()
    example_2_chunks()
    example_3_header_fields()
    example_4_truncation()
    example_5_hex_excerpt()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
