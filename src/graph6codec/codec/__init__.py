"""graph6/digraph6 codec.

This module provides encoding and decoding between graph6/digraph6 strings
and Graph objects, plus the size, bit-packing and triangle primitives they
are built from.
"""

from __future__ import annotations

from .bitpack import SixBitPacker, SixBitUnpacker, pack_bits, unpack_bits
from .decoder import decode, decode_directed, decode_undirected
from .encoder import encode, encode_directed, encode_undirected
from .size import decode_size, encode_size
from .triangle import collapse, expand

__all__ = [
    "encode",
    "encode_directed",
    "encode_undirected",
    "decode",
    "decode_directed",
    "decode_undirected",
    "decode_size",
    "encode_size",
    "pack_bits",
    "unpack_bits",
    "SixBitPacker",
    "SixBitUnpacker",
    "expand",
    "collapse",
]
