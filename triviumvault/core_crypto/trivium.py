"""
Trivium Stream Cipher (80-bit key, 80-bit IV)

Reference implementation using one list of bits per shift register.

Components:
- TriviumState: three registers of 93, 84 and 111 bits
- Initialization from key/IV plus the fixed constant bits
- Step function: one keystream bit per call, nonlinear feedback
- Warm-up: 4 * 288 = 1152 discarded steps before any output
- Keystream generation and XOR-based encryption/decryption

Conventions:
    Register index 0 holds the most recently shifted-in bit.
    Key/IV bits are read LSB-first per byte; keystream bits are packed
    LSB-first into bytes (bit 0 of the first byte is the first output).
    Encryption and decryption are the same operation.
"""

import operator
from typing import Generator, Iterable, List

from .bit_utils import (
    BitOrder, KEY_BYTES, IV_BYTES, KEY_BITS, IV_BITS,
    normalize_to_fixed, get_bit, pack_bits,
)


# Register widths (93 + 84 + 111 = 288 state bits)
A_BITS = 93
B_BITS = 84
C_BITS = 111
STATE_BITS = A_BITS + B_BITS + C_BITS

# Initialization clocks with discarded output
WARMUP_CYCLES = 4 * STATE_BITS


class InvalidArgument(ValueError):
    """Raised when a caller passes an out-of-range argument."""

    def __init__(self, parameter: str, message: str):
        super().__init__(f"{parameter} {message}")
        self.parameter = parameter


def check_length(length_bytes: int) -> int:
    """
    Validate a requested keystream length.

    Integer-like values (anything with __index__) are accepted; bools are not.

    Returns:
        length_bytes as a plain int

    Raises:
        TypeError: If length_bytes is not an integer
        InvalidArgument: If length_bytes is negative
    """
    if isinstance(length_bytes, bool):
        raise TypeError("length_bytes must be an int, not bool")
    try:
        length_bytes = operator.index(length_bytes)
    except TypeError:
        raise TypeError(
            f"length_bytes must be an int, not {type(length_bytes).__name__}"
        ) from None
    if length_bytes < 0:
        raise InvalidArgument("length_bytes", f"must be >= 0 (got {length_bytes})")
    return length_bytes


# ============================================================================
# Cipher State
# ============================================================================

class TriviumState:
    """
    Working state of one Trivium instance.

    Created fresh for every keystream and never shared. Each register is a
    fixed-width list of 0/1 values; the widths never change.

    Example:
        >>> state = TriviumState.from_key_iv(bytes(10), bytes(10))
        >>> state.warm_up()
        >>> len(bytes(state.next_byte() for _ in range(4)))
        4
    """

    def __init__(self, a: List[int], b: List[int], c: List[int]):
        if len(a) != A_BITS or len(b) != B_BITS or len(c) != C_BITS:
            raise ValueError(
                f"Register widths must be {A_BITS}, {B_BITS} and {C_BITS}"
            )
        self.a = a
        self.b = b
        self.c = c

    @classmethod
    def from_key_iv(cls, key: bytes, iv: bytes,
                    bit_order: BitOrder = BitOrder.LSB) -> 'TriviumState':
        """
        Load key, IV and constant bits into fresh registers.

        Key and IV of any length are normalized to 10 bytes first.

        Layout:
            A[0..79] = key bits,  A[80..92] = 0
            B[0..79] = IV bits,   B[80..83] = 0
            C[0..107] = 0,        C[108..110] = 1

        Args:
            key: Key bytes (any length)
            iv: IV bytes (any length)
            bit_order: How bits are read within each key/IV byte

        Returns:
            Initialized state, not yet warmed up
        """
        key_bytes = normalize_to_fixed(key, KEY_BYTES)
        iv_bytes = normalize_to_fixed(iv, IV_BYTES)

        a = [get_bit(key_bytes, i, bit_order) for i in range(KEY_BITS)]
        a += [0] * (A_BITS - KEY_BITS)

        b = [get_bit(iv_bytes, i, bit_order) for i in range(IV_BITS)]
        b += [0] * (B_BITS - IV_BITS)

        c = [0] * (C_BITS - 3) + [1, 1, 1]

        return cls(a, b, c)

    def step(self) -> int:
        """
        Clock the cipher once.

        All taps are read before any register moves. Each register shifts
        toward higher indices and takes its new bit 0 from another
        register's feedback: A <- t3, B <- t1, C <- t2.

        Returns:
            Output bit z (0 or 1)
        """
        a, b, c = self.a, self.b, self.c

        t1 = a[65] ^ a[92]
        t2 = b[68] ^ b[83]
        t3 = c[65] ^ c[110]
        z = t1 ^ t2 ^ t3

        t1 ^= (a[90] & a[91]) ^ b[77]
        t2 ^= (b[81] & b[82]) ^ c[86]
        t3 ^= (c[108] & c[109]) ^ a[68]

        a[1:] = a[:-1]
        a[0] = t3
        b[1:] = b[:-1]
        b[0] = t1
        c[1:] = c[:-1]
        c[0] = t2

        return z

    def warm_up(self, cycles: int = WARMUP_CYCLES):
        """Run the initialization clocks, discarding their output."""
        for _ in range(cycles):
            self.step()

    def next_byte(self, pack_order: BitOrder = BitOrder.LSB) -> int:
        """Clock 8 times and pack the output bits into one byte."""
        return pack_bits((self.step() for _ in range(8)), pack_order)

    def __repr__(self) -> str:
        return f"TriviumState(a={A_BITS} bits, b={B_BITS} bits, c={C_BITS} bits)"


# ============================================================================
# Keystream and XOR Cipher
# ============================================================================

def generate_keystream(key: bytes, iv: bytes, length_bytes: int,
                       bit_order: BitOrder = BitOrder.LSB,
                       pack_order: BitOrder = BitOrder.LSB) -> bytes:
    """
    Generate Trivium keystream.

    Args:
        key: Key bytes (normalized to 80 bits)
        iv: IV bytes (normalized to 80 bits)
        length_bytes: Number of keystream bytes (>= 0)
        bit_order: How key/IV bits are read within each byte
        pack_order: How output bits are packed into bytes

    Returns:
        Exactly length_bytes bytes of keystream

    Raises:
        InvalidArgument: If length_bytes is negative
    """
    length_bytes = check_length(length_bytes)

    state = TriviumState.from_key_iv(key, iv, bit_order)
    state.warm_up()

    return bytes(state.next_byte(pack_order) for _ in range(length_bytes))


def xor_transform(key: bytes, iv: bytes, data: bytes,
                  bit_order: BitOrder = BitOrder.LSB,
                  pack_order: BitOrder = BitOrder.LSB) -> bytes:
    """
    Encrypt or decrypt data with Trivium.

    XORs data with a keystream of the same length. Applying it twice with
    the same key and IV returns the original data.

    Args:
        key: Key bytes
        iv: IV bytes
        data: Plaintext or ciphertext

    Returns:
        Transformed bytes, same length as data
    """
    data = bytes(data)
    keystream = generate_keystream(key, iv, len(data), bit_order, pack_order)
    return bytes(d ^ k for d, k in zip(data, keystream))


def keystream_stream(key: bytes, iv: bytes,
                     bit_order: BitOrder = BitOrder.LSB,
                     pack_order: BitOrder = BitOrder.LSB) -> Generator[int, None, None]:
    """
    Generator yielding keystream bytes without a fixed length.

    The first n bytes equal generate_keystream(key, iv, n). The stream
    cannot be rewound; start a new one for the same key and IV.

    Yields:
        Keystream bytes one at a time
    """
    state = TriviumState.from_key_iv(key, iv, bit_order)
    state.warm_up()
    while True:
        yield state.next_byte(pack_order)


def xor_stream(key: bytes, iv: bytes, chunks: Iterable[bytes],
               bit_order: BitOrder = BitOrder.LSB,
               pack_order: BitOrder = BitOrder.LSB) -> Generator[bytes, None, None]:
    """
    XOR a sequence of chunks against one continuous keystream.

    The joined output equals xor_transform of the joined input, however
    the input is split.

    Yields:
        Transformed chunks, each the same length as its input chunk
    """
    stream = keystream_stream(key, iv, bit_order, pack_order)
    for chunk in chunks:
        yield bytes(byte ^ next(stream) for byte in chunk)


# Self-test when run directly
if __name__ == "__main__":
    print("Trivium Stream Cipher Test")
    print("=" * 60)

    print("\n[Test 1] Keystream length")
    ks = generate_keystream(bytes(10), bytes(10), 32)
    print(f"  Keystream: {ks.hex()}")
    test1_pass = len(ks) == 32
    print(f"  Length 32: {test1_pass}")

    print("\n[Test 2] Encrypt/decrypt")
    key = bytes([1, 2, 3, 4, 5, 0, 0, 0, 0, 0])
    plaintext = b"Attack at dawn"
    ciphertext = xor_transform(key, key, plaintext)
    decrypted = xor_transform(key, key, ciphertext)
    print(f"  Plaintext:  {plaintext}")
    print(f"  Ciphertext: {ciphertext.hex()}")
    print(f"  Decrypted:  {decrypted}")
    test2_pass = decrypted == plaintext and ciphertext != plaintext
    print(f"  Match: {test2_pass}")

    print("\n[Test 3] Negative length")
    try:
        generate_keystream(key, key, -1)
        test3_pass = False
    except InvalidArgument as e:
        test3_pass = e.parameter == "length_bytes"
        print(f"  Rejected: {e}")

    all_passed = test1_pass and test2_pass and test3_pass
    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
