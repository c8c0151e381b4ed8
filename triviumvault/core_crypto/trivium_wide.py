"""
Trivium with Integer Registers

A second, independently structured Trivium that keeps each register in a
single Python int instead of a list of bits. It exists to cross-check the
reference implementation in trivium.py: both must produce identical
keystreams for every key, IV and length.

Representation:
    Bit k of a register is (register >> k) & 1.
    A shift is ((register << 1) & mask) | new_bit, where mask has exactly
    `width` low bits set, so no bit above the width is ever set.
"""

from .bit_utils import (
    BitOrder, KEY_BYTES, IV_BYTES, KEY_BITS, IV_BITS,
    normalize_to_fixed, get_bit,
)
from .trivium import A_BITS, B_BITS, C_BITS, WARMUP_CYCLES, check_length


def width_mask(width: int) -> int:
    """Mask with the low `width` bits set."""
    return (1 << width) - 1


def _bit(register: int, index: int) -> int:
    return (register >> index) & 1


class WideTriviumState:
    """Trivium state held as three masked integers."""

    def __init__(self, r1: int, r2: int, r3: int):
        self.m1 = width_mask(A_BITS)
        self.m2 = width_mask(B_BITS)
        self.m3 = width_mask(C_BITS)
        self.r1 = r1 & self.m1
        self.r2 = r2 & self.m2
        self.r3 = r3 & self.m3

    @classmethod
    def from_key_iv(cls, key: bytes, iv: bytes,
                    bit_order: BitOrder = BitOrder.LSB) -> 'WideTriviumState':
        """Load normalized key/IV bits and the three constant ones."""
        key_bytes = normalize_to_fixed(key, KEY_BYTES)
        iv_bytes = normalize_to_fixed(iv, IV_BYTES)

        r1 = 0
        for i in range(KEY_BITS):
            r1 |= get_bit(key_bytes, i, bit_order) << i

        r2 = 0
        for i in range(IV_BITS):
            r2 |= get_bit(iv_bytes, i, bit_order) << i

        r3 = (1 << 108) | (1 << 109) | (1 << 110)

        return cls(r1, r2, r3)

    def step(self) -> int:
        """Clock once and return the output bit."""
        r1, r2, r3 = self.r1, self.r2, self.r3

        t1 = _bit(r1, 65) ^ _bit(r1, 92)
        t2 = _bit(r2, 68) ^ _bit(r2, 83)
        t3 = _bit(r3, 65) ^ _bit(r3, 110)
        z = t1 ^ t2 ^ t3

        t1 ^= (_bit(r1, 90) & _bit(r1, 91)) ^ _bit(r2, 77)
        t2 ^= (_bit(r2, 81) & _bit(r2, 82)) ^ _bit(r3, 86)
        t3 ^= (_bit(r3, 108) & _bit(r3, 109)) ^ _bit(r1, 68)

        self.r1 = ((r1 << 1) & self.m1) | t3
        self.r2 = ((r2 << 1) & self.m2) | t1
        self.r3 = ((r3 << 1) & self.m3) | t2

        return z

    def warm_up(self, cycles: int = WARMUP_CYCLES):
        for _ in range(cycles):
            self.step()

    def next_byte(self, pack_order: BitOrder = BitOrder.LSB) -> int:
        value = 0
        for j in range(8):
            shift = j if pack_order is BitOrder.LSB else 7 - j
            value |= self.step() << shift
        return value


def generate_keystream_wide(key: bytes, iv: bytes, length_bytes: int,
                            bit_order: BitOrder = BitOrder.LSB,
                            pack_order: BitOrder = BitOrder.LSB) -> bytes:
    """Integer-register counterpart of trivium.generate_keystream."""
    length_bytes = check_length(length_bytes)

    state = WideTriviumState.from_key_iv(key, iv, bit_order)
    state.warm_up()

    out = bytearray(length_bytes)
    for i in range(length_bytes):
        out[i] = state.next_byte(pack_order)
    return bytes(out)


def xor_transform_wide(key: bytes, iv: bytes, data: bytes,
                       bit_order: BitOrder = BitOrder.LSB,
                       pack_order: BitOrder = BitOrder.LSB) -> bytes:
    """Integer-register counterpart of trivium.xor_transform."""
    data = bytes(data)
    keystream = generate_keystream_wide(key, iv, len(data), bit_order, pack_order)
    return bytes(d ^ k for d, k in zip(data, keystream))
