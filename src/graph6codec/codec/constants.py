"""Constants of the graph6/digraph6 text format."""

from __future__ import annotations

# Every encoded character is a 6-bit value shifted into the printable range
CHAR_OFFSET = 63
BITS_PER_CHAR = 6
MAX_DATA_CHAR = CHAR_OFFSET + (1 << BITS_PER_CHAR) - 1  # 126

# Size prefix
EXTENDED_SIZE_MARKER = 126
MAX_VERTICES = EXTENDED_SIZE_MARKER - CHAR_OFFSET - 1  # 62

# Headers
DIGRAPH_PREFIX = "&"
GRAPH6_HEADER = ">>graph6<<"
DIGRAPH6_HEADER = ">>digraph6<<"
