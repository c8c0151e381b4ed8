"""
Unit tests for the codec module.

Tests:
- Hex, base64 and UTF-8 conversions
- Key/IV parsing to 80 bits
- Output encoding selection
"""

import pytest
from triviumvault.codec.formats import (
    utf8_to_bytes, bytes_to_utf8, hex_to_bytes, bytes_to_hex,
    base64_to_bytes, bytes_to_base64, parse_key_iv,
    encode_output, decode_input,
)


class TestHex:
    """Tests for hex parsing."""

    def test_basic(self):
        """Plain hex decodes."""
        assert hex_to_bytes("00ff10") == b"\x00\xff\x10"

    def test_prefix_and_whitespace(self):
        """0x prefix and whitespace are ignored."""
        assert hex_to_bytes("  0xDE AD\nbe ef ") == b"\xde\xad\xbe\xef"

    def test_empty(self):
        """Empty or prefix-only input gives no bytes."""
        assert hex_to_bytes("") == b""
        assert hex_to_bytes("0x") == b""

    def test_odd_length_rejected(self):
        """Odd digit count is an error."""
        with pytest.raises(ValueError, match="length"):
            hex_to_bytes("abc")

    def test_non_hex_rejected(self):
        """Non-hex characters are an error."""
        with pytest.raises(ValueError, match="Invalid hex"):
            hex_to_bytes("zz")

    def test_encode_lowercase(self):
        """Encoding uses lowercase digits."""
        assert bytes_to_hex(b"\xab\x01") == "ab01"


class TestBase64AndText:
    """Tests for base64 and UTF-8 helpers."""

    def test_base64_roundtrip_value(self):
        """Known base64 value decodes and encodes."""
        assert bytes_to_base64(b"hello") == "aGVsbG8="
        assert base64_to_bytes("aGVs\nbG8=") == b"hello"

    def test_base64_empty(self):
        """Whitespace-only base64 gives no bytes."""
        assert base64_to_bytes("  ") == b""

    def test_base64_malformed(self):
        """Malformed base64 raises ValueError."""
        with pytest.raises(ValueError):
            base64_to_bytes("abc*")

    def test_utf8(self):
        """UTF-8 encodes multibyte characters."""
        assert utf8_to_bytes("é") == b"\xc3\xa9"

    def test_invalid_utf8_replaced(self):
        """Invalid UTF-8 decodes with replacement characters."""
        assert bytes_to_utf8(b"ok\xff") == "ok\ufffd"


class TestParseKeyIv:
    """Tests for key/IV parsing."""

    def test_text_padded(self):
        """Text keys are padded to 10 bytes."""
        assert parse_key_iv("abc", "text") == b"abc" + bytes(7)

    def test_text_truncated(self):
        """Long text keys keep the first 10 bytes."""
        assert parse_key_iv("0123456789abcdef") == b"0123456789"

    def test_hex_reversed(self):
        """Hex keys are normalized then byte-reversed."""
        assert parse_key_iv("0x0102", "hex") == bytes(8) + b"\x02\x01"

    def test_full_hex_key(self):
        """A full 80-bit hex key is reversed byte for byte."""
        key = parse_key_iv("00112233445566778899", "HEX")
        assert key == bytes.fromhex("99887766554433221100")

    def test_empty_is_zero(self):
        """Empty value gives 10 zero bytes."""
        assert parse_key_iv("", "hex") == bytes(10)

    def test_unknown_type(self):
        """Unknown key types are rejected."""
        with pytest.raises(ValueError, match="key type"):
            parse_key_iv("abc", "base64")

    def test_bad_hex(self):
        """Malformed hex keys are rejected."""
        with pytest.raises(ValueError):
            parse_key_iv("xyz1", "hex")


class TestOutputFormats:
    """Tests for output format selection."""

    def test_encode(self):
        """Hex and base64 outputs."""
        assert encode_output(b"\x01\x02", "hex") == "0102"
        assert encode_output(b"\x01\x02", "Base64") == "AQI="

    def test_decode(self):
        """Hex and base64 inputs."""
        assert decode_input("0102", "hex") == b"\x01\x02"
        assert decode_input("AQI=", "base64") == b"\x01\x02"

    def test_unknown_format(self):
        """Unknown formats are rejected."""
        with pytest.raises(ValueError, match="format"):
            encode_output(b"", "binary")
        with pytest.raises(ValueError, match="format"):
            decode_input("", "binary")
