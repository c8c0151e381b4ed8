"""
Text Formats for Keys, IVs and Data

Marshaling between what a user types and the byte buffers the cipher
takes:
- UTF-8 text <-> bytes
- Hex <-> bytes (optional 0x prefix, whitespace ignored)
- Base64 <-> bytes
- Key/IV parsing to exactly 80 bits

Hex keys and IVs are read as big-endian 80-bit numbers, so their bytes
are reversed after normalization. Text keys are used byte for byte.
"""

import base64
import binascii
import re

from ..core_crypto.bit_utils import KEY_BYTES, normalize_to_fixed


VALUE_TYPES = ("text", "hex")
OUTPUT_FORMATS = ("hex", "base64")

_WHITESPACE = re.compile(r"\s+")
_HEX_PREFIX = re.compile(r"^0x", re.IGNORECASE)


def utf8_to_bytes(text: str) -> bytes:
    return text.encode('utf-8')


def bytes_to_utf8(data: bytes) -> str:
    """Decode UTF-8, replacing invalid sequences instead of failing."""
    return bytes(data).decode('utf-8', errors='replace')


def bytes_to_hex(data: bytes) -> str:
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """
    Parse a hex string.

    Args:
        text: Hex digits, optionally prefixed with 0x; whitespace is ignored

    Returns:
        Decoded bytes (empty for empty input)

    Raises:
        ValueError: On odd length or non-hex characters
    """
    clean = _WHITESPACE.sub("", _HEX_PREFIX.sub("", text.strip()))
    if not clean:
        return b""
    if len(clean) % 2 != 0:
        raise ValueError("Invalid hex length")
    try:
        return bytes.fromhex(clean)
    except ValueError:
        raise ValueError("Invalid hex") from None


def bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode('ascii')


def base64_to_bytes(text: str) -> bytes:
    """Parse base64, ignoring whitespace. Raises ValueError if malformed."""
    clean = _WHITESPACE.sub("", text)
    if not clean:
        return b""
    try:
        return base64.b64decode(clean, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64: {e}") from None


def parse_key_iv(value: str, value_type: str = "text") -> bytes:
    """
    Turn a user-entered key or IV into exactly 10 bytes.

    Args:
        value: Key/IV as typed
        value_type: "text" (UTF-8 bytes) or "hex" (big-endian number)

    Returns:
        10-byte buffer ready for the cipher

    Raises:
        ValueError: On an unknown value_type or malformed hex
    """
    kind = value_type.strip().lower()
    if kind not in VALUE_TYPES:
        raise ValueError(f"Unsupported key type: {value_type} (expected 'text' or 'hex')")

    if not value:
        return bytes(KEY_BYTES)

    raw = hex_to_bytes(value) if kind == "hex" else utf8_to_bytes(value)
    fixed = normalize_to_fixed(raw, KEY_BYTES)
    return fixed[::-1] if kind == "hex" else fixed


def _check_format(fmt: str) -> str:
    name = fmt.strip().lower()
    if name not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported format: {fmt} (expected 'hex' or 'base64')")
    return name


def encode_output(data: bytes, fmt: str = "hex") -> str:
    """Render cipher output as hex or base64."""
    if _check_format(fmt) == "hex":
        return bytes_to_hex(data)
    return bytes_to_base64(data)


def decode_input(text: str, fmt: str = "hex") -> bytes:
    """Parse hex or base64 cipher input."""
    if _check_format(fmt) == "hex":
        return hex_to_bytes(text)
    return base64_to_bytes(text)
