"""Utility functions for graph6codec.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import data_bits, data_chars, encoded_bits, encoded_size, padding_bits, prefix_length

__all__ = [
    "data_bits",
    "data_chars",
    "encoded_bits",
    "encoded_size",
    "padding_bits",
    "prefix_length",
]
