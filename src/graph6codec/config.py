"""Configuration for the graph6 codec.

This module provides the options dataclass shared by the decoder, the encoder
and the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec.constants import MAX_VERTICES


@dataclass(frozen=True)
class CodecConfig:
    """Options controlling how graph6/digraph6 strings are read and written.

    Attributes:
        strict: Reject non-canonical input (default False). When enabled the
            decoder raises NonCanonicalEncodingError for nonzero padding bits
            in the last data character and for characters after the data.
            Lenient decoding discards both, so such input decodes but does
            not re-encode byte-for-byte.

        write_header: Prepend the optional file header (``>>graph6<<`` or
            ``>>digraph6<<``) when encoding (default False).

        max_vertices: Largest vertex count the decoder accepts (default 62,
            the most a single size character can express). Lower it to refuse
            larger graphs early.

    Examples:
        ```python
        from graph6codec import CodecConfig, decode

        decode("A`")                                  # lenient: padding ignored
        decode("A`", config=CodecConfig(strict=True))  # raises NonCanonicalEncodingError
        ```
    """

    strict: bool = False
    write_header: bool = False
    max_vertices: int = MAX_VERTICES

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.max_vertices <= MAX_VERTICES:
            raise ValueError(
                f"max_vertices must be 0-{MAX_VERTICES}, got {self.max_vertices}"
            )


DEFAULT_CONFIG = CodecConfig()
