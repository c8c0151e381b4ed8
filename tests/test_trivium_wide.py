"""
Cross-check tests: bit-array Trivium vs integer-register Trivium.

Both implementations must agree bit for bit on every key, IV and length.
"""

import random

import pytest
from triviumvault.core_crypto.bit_utils import BitOrder
from triviumvault.core_crypto.trivium import (
    TriviumState, InvalidArgument, generate_keystream, xor_transform
)
from triviumvault.core_crypto.trivium_wide import (
    WideTriviumState, generate_keystream_wide, xor_transform_wide, width_mask
)


LENGTHS = [0, 1, 2, 3, 7, 8, 15, 32, 64, 128]


def random_bytes(rng: random.Random, length: int) -> bytes:
    return bytes(rng.getrandbits(8) for _ in range(length))


def as_int(bits) -> int:
    """Pack a register list into an int, index 0 as the low bit."""
    return sum(bit << i for i, bit in enumerate(bits))


class TestKnownAnswers:
    """Fixed keystream vectors, checked against both implementations."""

    VECTORS = [
        (bytes(10), bytes(10),
         "fbe0bf265859051b517a2e4e239fc97f563203161907cf2de7a8790fa1b2e9cd"),
        (bytes([1, 2, 3, 4, 5, 0, 0, 0, 0, 0, 9, 9]), bytes([7, 7, 7]),
         "3065d1540192abe3078dc2bde78ed5c3452e1dfb1af665b55006c63cfcdbbe90"),
    ]

    @pytest.mark.parametrize("key, iv, expected", VECTORS)
    def test_reference_keystream(self, key, iv, expected):
        """Bit-array implementation reproduces the vector."""
        assert generate_keystream(key, iv, 32).hex() == expected

    @pytest.mark.parametrize("key, iv, expected", VECTORS)
    def test_wide_keystream(self, key, iv, expected):
        """Integer-register implementation reproduces the vector."""
        assert generate_keystream_wide(key, iv, 32).hex() == expected


class TestWideState:
    """Unit tests for the integer register representation."""

    def test_width_mask(self):
        """Mask has exactly `width` low bits set."""
        assert width_mask(3) == 0b111
        assert width_mask(93).bit_length() == 93
        assert bin(width_mask(111)).count("1") == 111

    def test_initial_state_matches_reference(self):
        """Initial registers hold the same bits as the reference lists."""
        key = b"\x01\x23\x45\x67\x89\xab\xcd\xef\xfe\xdc"
        iv = b"\x10\x32\x54"
        ref = TriviumState.from_key_iv(key, iv)
        wide = WideTriviumState.from_key_iv(key, iv)
        assert wide.r1 == as_int(ref.a)
        assert wide.r2 == as_int(ref.b)
        assert wide.r3 == as_int(ref.c)

    def test_constant_bits(self):
        """Register C starts with bits 108..110 set."""
        wide = WideTriviumState.from_key_iv(b"", b"")
        assert wide.r3 == 0b111 << 108
        assert wide.r1 == 0
        assert wide.r2 == 0

    def test_registers_stay_within_width(self):
        """No bit above a register's width is ever set."""
        wide = WideTriviumState.from_key_iv(b"\xff" * 10, b"\xff" * 10)
        for _ in range(2000):
            wide.step()
            assert wide.r1 >> 93 == 0
            assert wide.r2 >> 84 == 0
            assert wide.r3 >> 111 == 0

    def test_step_by_step_agreement(self):
        """Each step yields the same bit and the same state."""
        ref = TriviumState.from_key_iv(b"step-key", b"step-iv")
        wide = WideTriviumState.from_key_iv(b"step-key", b"step-iv")
        for _ in range(300):
            assert ref.step() == wide.step()
        assert wide.r1 == as_int(ref.a)
        assert wide.r2 == as_int(ref.b)
        assert wide.r3 == as_int(ref.c)


class TestCrossImplementation:
    """Both implementations must produce identical keystreams."""

    @pytest.mark.parametrize("case", range(64))
    def test_randomized_keystreams(self, case):
        """Random key/IV lengths 0..20 across the standard lengths."""
        rng = random.Random(0x12345678 + case)
        key = random_bytes(rng, rng.randrange(21))
        iv = random_bytes(rng, rng.randrange(21))

        for n in LENGTHS:
            assert generate_keystream(key, iv, n) == generate_keystream_wide(key, iv, n)

    def test_zero_key_iv_100_bytes(self):
        """Zero key and IV, 100 bytes: same length and content."""
        a = generate_keystream(bytes(10), bytes(10), 100)
        b = generate_keystream_wide(bytes(10), bytes(10), 100)
        assert len(a) == 100
        assert a == b

    def test_zero_length(self):
        """Both give an empty buffer for length 0."""
        assert generate_keystream_wide(bytes(10), bytes(10), 0) == b""

    @pytest.mark.parametrize("bit_order", list(BitOrder))
    @pytest.mark.parametrize("pack_order", list(BitOrder))
    def test_orders_agree(self, bit_order, pack_order):
        """Agreement holds for every bit/pack order combination."""
        key = bytes([1, 2, 3, 4, 5, 0, 0, 0, 0, 0])
        iv = b"order-iv"
        a = generate_keystream(key, iv, 24, bit_order, pack_order)
        b = generate_keystream_wide(key, iv, 24, bit_order, pack_order)
        assert a == b

    def test_xor_transform_agrees(self):
        """Both XOR transforms give the same ciphertext."""
        key = bytes([1, 2, 3, 4, 5, 0, 0, 0, 0, 0])
        msg = b"Attack at dawn"
        assert xor_transform(key, key, msg) == xor_transform_wide(key, key, msg)

    def test_wide_negative_length_rejected(self):
        """The twin rejects negative lengths the same way."""
        with pytest.raises(InvalidArgument, match="length_bytes"):
            generate_keystream_wide(bytes(10), bytes(10), -1)
