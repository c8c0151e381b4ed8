# Codec Module
"""
Text marshaling for the cipher: UTF-8, hex and base64 conversions and
80-bit key/IV parsing.
"""

from .formats import (
    utf8_to_bytes,
    bytes_to_utf8,
    hex_to_bytes,
    bytes_to_hex,
    base64_to_bytes,
    bytes_to_base64,
    parse_key_iv,
    encode_output,
    decode_input,
)

__all__ = [
    'utf8_to_bytes',
    'bytes_to_utf8',
    'hex_to_bytes',
    'bytes_to_hex',
    'base64_to_bytes',
    'bytes_to_base64',
    'parse_key_iv',
    'encode_output',
    'decode_input',
]
