"""
TriviumVault - Trivium stream cipher for Python.

    >>> from triviumvault import generate_keystream, xor_transform
    >>> len(generate_keystream(b"key", b"iv", 16))
    16
"""

from .core_crypto.bit_utils import BitOrder
from .core_crypto.trivium import (
    InvalidArgument,
    generate_keystream,
    xor_transform,
    keystream_stream,
    xor_stream,
)

__version__ = "1.0.0"

__all__ = [
    'BitOrder',
    'InvalidArgument',
    'generate_keystream',
    'xor_transform',
    'keystream_stream',
    'xor_stream',
]
