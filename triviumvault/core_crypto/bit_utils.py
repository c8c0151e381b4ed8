"""
Bit and Byte Helpers for Trivium

Shared by the bit-array cipher and its wide-integer twin.

Components:
- Byte Normalizer: coerces key/IV buffers to the fixed 80-bit width
- Bit Accessor: reads single bits out of a byte buffer
- Bit packing: turns 8 successive keystream bits into one byte

Conventions:
    Bits are read LSB-first per byte unless MSB order is requested:
    bit index i lives in byte i >> 3, at position (i & 7).
"""

from enum import Enum
from typing import Iterable, Optional


# Trivium key and IV are both 80 bits
KEY_BYTES = 10
IV_BYTES = 10
KEY_BITS = KEY_BYTES * 8
IV_BITS = IV_BYTES * 8


class BitOrder(Enum):
    """Order in which bits are read from (or packed into) a byte."""

    LSB = "lsb"
    MSB = "msb"

    @classmethod
    def parse(cls, value: Optional[str], default: Optional['BitOrder'] = None) -> 'BitOrder':
        """
        Parse a user-supplied bit order name.

        Accepts "lsb", "lsb-first", "lsb_first" and the MSB equivalents,
        ignoring case and surrounding whitespace.

        Args:
            value: Name to parse, or None for the default
            default: Order returned for None (LSB if not given)

        Returns:
            Matching BitOrder

        Raises:
            ValueError: If the name is not recognized
        """
        if value is None:
            return default if default is not None else cls.LSB
        if isinstance(value, cls):
            return value

        name = value.strip().lower()
        for suffix in ("-first", "_first"):
            if name.endswith(suffix):
                name = name[:-len(suffix)]
                break

        for order in cls:
            if order.value == name:
                return order

        raise ValueError(f"Unsupported bit order: {value} (expected 'msb' or 'lsb')")


def normalize_to_fixed(data: bytes, target_len: int) -> bytes:
    """
    Coerce a byte buffer to exactly target_len bytes.

    Shorter input is zero-filled at the end, longer input is truncated to
    its first target_len bytes. Never raises on length.

    Args:
        data: Input buffer of any length (may be empty)
        target_len: Required output length

    Returns:
        Buffer of exactly target_len bytes
    """
    data = bytes(data)
    if len(data) == target_len:
        return data
    head = data[:target_len]
    return head + bytes(target_len - len(head))


def get_bit(data: bytes, index: int, order: BitOrder = BitOrder.LSB) -> int:
    """
    Read one bit from a byte buffer.

    Args:
        data: Source buffer
        index: Zero-based bit index
        order: LSB-first (default) or MSB-first within each byte

    Returns:
        0 or 1; indices outside the buffer read as 0
    """
    byte_index = index >> 3
    if index < 0 or byte_index >= len(data):
        return 0

    offset = index & 7
    if order is BitOrder.MSB:
        offset = 7 - offset
    return (data[byte_index] >> offset) & 1


def pack_bits(bits: Iterable[int], order: BitOrder = BitOrder.LSB) -> int:
    """
    Pack 8 bits into a byte.

    With LSB order the j-th bit lands at bit position j, with MSB order
    at position 7 - j.
    """
    value = 0
    for j, bit in enumerate(bits):
        shift = j if order is BitOrder.LSB else 7 - j
        value |= (bit & 1) << shift
    return value
