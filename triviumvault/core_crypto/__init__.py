# Core Cryptography Module
"""
Trivium stream cipher:
- Byte normalization and bit access helpers
- Bit-array reference implementation
- Integer-register twin used for cross-checking
- Passphrase key/IV derivation
"""

from .bit_utils import BitOrder, KEY_BYTES, IV_BYTES, normalize_to_fixed, get_bit
from .trivium import (
    InvalidArgument,
    TriviumState,
    WARMUP_CYCLES,
    generate_keystream,
    xor_transform,
    keystream_stream,
    xor_stream,
)
from .trivium_wide import WideTriviumState, generate_keystream_wide, xor_transform_wide

__all__ = [
    'BitOrder',
    'KEY_BYTES',
    'IV_BYTES',
    'normalize_to_fixed',
    'get_bit',
    'InvalidArgument',
    'TriviumState',
    'WARMUP_CYCLES',
    'generate_keystream',
    'xor_transform',
    'keystream_stream',
    'xor_stream',
    'WideTriviumState',
    'generate_keystream_wide',
    'xor_transform_wide',
]
