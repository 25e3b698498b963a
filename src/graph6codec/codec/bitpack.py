"""Six-bit packing and unpacking utilities.

graph6 stores bits in groups of six, most significant bit first, each group
shifted by 63 into a printable ASCII character. This module converts between
such characters and flat sequences of 0/1 bits.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import (
    InvalidCharacterError,
    NonCanonicalEncodingError,
    UnexpectedEndOfInputError,
)
from .constants import BITS_PER_CHAR, CHAR_OFFSET, MAX_DATA_CHAR


class SixBitPacker:
    """Packs bits into graph6 data characters.

    Example:
        >>> packer = SixBitPacker()
        >>> packer.write_bit(1)
        >>> packer.to_str()
        '_'
    """

    def __init__(self) -> None:
        """Initialize an empty packer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write_bit(self, bit: int) -> None:
        """Write a single bit.

        Args:
            bit: 0 or 1 (booleans are accepted)

        Raises:
            ValueError: If bit is not 0 or 1
        """
        if bit not in (0, 1):
            raise ValueError(f"Bit must be 0 or 1, got {bit!r}")
        self._bits.append(int(bit))

    def write_bits(self, bits: Iterable[int]) -> None:
        """Write a sequence of bits in order."""
        for bit in bits:
            self.write_bit(bit)

    def bit_length(self) -> int:
        """Return the number of bits written so far."""
        return len(self._bits)

    def to_str(self) -> str:
        """Convert the bit buffer to data characters.

        If the number of bits is not a multiple of 6, the last group is padded
        with zeros on the right (LSB side).

        Returns:
            Packed characters, one per group of six bits
        """
        if not self._bits:
            return ""

        padded_bits = self._bits + [0] * ((-len(self._bits)) % BITS_PER_CHAR)

        chars = []
        for i in range(0, len(padded_bits), BITS_PER_CHAR):
            value = 0
            for j in range(BITS_PER_CHAR):
                value = (value << 1) | padded_bits[i + j]
            chars.append(chr(value + CHAR_OFFSET))

        return "".join(chars)


class SixBitUnpacker:
    """Unpacks bits from graph6 data characters.

    Example:
        >>> unpacker = SixBitUnpacker(b"_")
        >>> unpacker.read_bit()
        1
        >>> unpacker.bits_remaining()
        5
    """

    def __init__(self, data: bytes) -> None:
        """Initialize an unpacker over the given data characters.

        Args:
            data: Encoded data bytes, each in the range [63, 126]

        Raises:
            InvalidCharacterError: If a byte is outside the data range
        """
        self._bits: list[int] = []
        for offset, byte in enumerate(data):
            if byte < CHAR_OFFSET or byte > MAX_DATA_CHAR:
                raise InvalidCharacterError(
                    f"Invalid data character {byte!r} at data offset {offset}: "
                    f"expected a value in [{CHAR_OFFSET}, {MAX_DATA_CHAR}]"
                )
            value = byte - CHAR_OFFSET
            for i in range(BITS_PER_CHAR - 1, -1, -1):
                self._bits.append((value >> i) & 1)
        self._position = 0

    def read_bit(self) -> int:
        """Read a single bit.

        Raises:
            IndexError: If no more bits are available
        """
        if self._position >= len(self._bits):
            raise IndexError("Attempted to read past end of bit buffer")

        bit = self._bits[self._position]
        self._position += 1
        return bit

    def read_bits(self, count: int) -> tuple[int, ...]:
        """Read the next ``count`` bits.

        Args:
            count: Number of bits to read

        Returns:
            Tuple of 0/1 values

        Raises:
            ValueError: If count is negative
            IndexError: If not enough bits are available
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        if self._position + count > len(self._bits):
            raise IndexError(
                f"Not enough bits: need {count}, have {len(self._bits) - self._position}"
            )

        bits = tuple(self._bits[self._position : self._position + count])
        self._position += count
        return bits

    def bits_remaining(self) -> int:
        """Return the number of unread bits."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Return the current bit position."""
        return self._position


def chars_for_bits(length: int) -> int:
    """Return the number of data characters needed to hold ``length`` bits."""
    return -(-length // BITS_PER_CHAR)


def pack_bits(bits: Iterable[int]) -> str:
    """Pack a bit sequence into graph6 data characters.

    Args:
        bits: Sequence of 0/1 values of any length

    Returns:
        Data characters, zero-padded to a whole number of six-bit groups

    Example:
        >>> pack_bits([0, 0, 1, 0])
        'G'
    """
    packer = SixBitPacker()
    packer.write_bits(bits)
    return packer.to_str()


def unpack_bits(data: bytes, length: int, *, strict: bool = False) -> tuple[int, ...]:
    """Unpack exactly ``length`` bits from graph6 data characters.

    Only the first ``ceil(length / 6)`` bytes are consumed; anything after
    them is not examined.

    Args:
        data: Encoded data bytes
        length: Number of bits to extract
        strict: If True, reject nonzero padding bits in the last character

    Returns:
        Tuple of ``length`` bits

    Raises:
        UnexpectedEndOfInputError: If data holds fewer characters than required
        InvalidCharacterError: If a consumed byte is outside [63, 126]
        NonCanonicalEncodingError: If strict and a padding bit is set

    Example:
        >>> unpack_bits(b"G", 4)
        (0, 0, 1, 0)
    """
    needed = chars_for_bits(length)
    if len(data) < needed:
        raise UnexpectedEndOfInputError(
            f"Expected {needed} data character(s) for {length} bits, got {len(data)}"
        )

    unpacker = SixBitUnpacker(data[:needed])
    try:
        bits = unpacker.read_bits(length)
    except IndexError as e:
        raise UnexpectedEndOfInputError(f"Truncated data: {e}") from e

    if strict:
        padding = unpacker.read_bits(unpacker.bits_remaining())
        if any(padding):
            raise NonCanonicalEncodingError(
                f"Nonzero padding bits {''.join(map(str, padding))} after {length} data bits"
            )

    return bits
