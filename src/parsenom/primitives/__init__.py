"""Primitive recognizers.

Pick one primitive namespace per parser tree:

    text      str buffers; units are code points
    binary    bytes buffers; units are raw bytes
    number    fixed-width binary numerics and textual numbers
    character unit predicates accepted by both modes

The namespaces deliberately share names (text.tag, binary.tag), so they are
imported as modules rather than re-exported here.
"""

from . import binary, character, number, text

__all__ = ["binary", "character", "number", "text"]
