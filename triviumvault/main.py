"""
TriviumVault - Command-Line Entry Point

Encrypt and decrypt text or files with the Trivium stream cipher, or dump
raw keystream.

Examples:
    triviumvault encrypt --key secret --iv nonce --text "Attack at dawn"
    triviumvault decrypt --key secret --iv nonce --text 3f9a...
    triviumvault keystream --key-type hex --key 0x0123 --length 16
    triviumvault encrypt --passphrase pw --salt 00ff --in-file a --out-file a.enc
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .codec.formats import (
    parse_key_iv, hex_to_bytes, utf8_to_bytes, bytes_to_utf8,
    encode_output, decode_input, VALUE_TYPES, OUTPUT_FORMATS,
)
from .core_crypto.bit_utils import BitOrder
from .core_crypto.key_derivation import derive_key_iv, PBKDF2_ITERATIONS
from .core_crypto.trivium import generate_keystream, xor_transform
from .files.file_crypto import xor_file


logger = logging.getLogger(__name__)

# Key/IV bits are read MSB-first on the command line unless told otherwise
DEFAULT_BIT_ORDER = "msb"


# ===============================
# Helpers
# ===============================

def resolve_key_iv(args: argparse.Namespace) -> Tuple[bytes, bytes]:
    """
    Work out key and IV bytes from the parsed arguments.

    Either --passphrase (with --salt) or --key/--iv may be given, not both.
    Missing key or IV defaults to all zero bytes.
    """
    if args.passphrase is not None:
        if args.key is not None or args.iv is not None:
            raise ValueError("Provide either --passphrase or --key/--iv, not both.")
        if not args.salt:
            raise ValueError("--salt (hex) is required with --passphrase.")
        salt = hex_to_bytes(args.salt)
        logger.debug("Deriving key/IV with PBKDF2 (%d iterations)", args.iterations)
        return derive_key_iv(args.passphrase, salt, args.iterations)

    key = parse_key_iv(args.key or "", args.key_type)
    iv = parse_key_iv(args.iv or "", args.iv_type)
    return key, iv


def read_bytes_from_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def write_bytes_to_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


# ===============================
# Commands
# ===============================

def cmd_keystream(args: argparse.Namespace, key: bytes, iv: bytes,
                  order: BitOrder) -> None:
    keystream = generate_keystream(key, iv, args.length, bit_order=order)
    logger.debug("Generated %d keystream bytes", len(keystream))
    print(encode_output(keystream, args.format))


def cmd_encrypt(args: argparse.Namespace, key: bytes, iv: bytes,
                order: BitOrder) -> None:
    if args.in_file and args.out_file:
        result = xor_file(args.in_file, args.out_file, key, iv, bit_order=order)
        print(f"Encrypted {result['input_size']} bytes -> {args.out_file}")
        return

    plaintext = read_bytes_from_file(args.in_file) if args.in_file else utf8_to_bytes(args.text)
    ciphertext = xor_transform(key, iv, plaintext, bit_order=order)
    logger.debug("Encrypted %d bytes", len(ciphertext))

    if args.out_file:
        write_bytes_to_file(args.out_file, ciphertext)
        print(f"Encrypted {len(ciphertext)} bytes -> {args.out_file}")
    else:
        print(encode_output(ciphertext, args.format))


def cmd_decrypt(args: argparse.Namespace, key: bytes, iv: bytes,
                order: BitOrder) -> None:
    if args.in_file and args.out_file:
        result = xor_file(args.in_file, args.out_file, key, iv, bit_order=order)
        print(f"Decrypted {result['input_size']} bytes -> {args.out_file}")
        return

    ciphertext = read_bytes_from_file(args.in_file) if args.in_file else decode_input(args.text, args.format)
    plaintext = xor_transform(key, iv, ciphertext, bit_order=order)
    logger.debug("Decrypted %d bytes", len(plaintext))

    if args.out_file:
        write_bytes_to_file(args.out_file, plaintext)
        print(f"Decrypted {len(plaintext)} bytes -> {args.out_file}")
    else:
        print(bytes_to_utf8(plaintext))


COMMANDS = {
    "keystream": cmd_keystream,
    "encrypt": cmd_encrypt,
    "decrypt": cmd_decrypt,
}


# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="triviumvault",
        description="Trivium stream cipher (80-bit key, 80-bit IV): keystream, encrypt, decrypt"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp):
        sp.add_argument("--key", help="Key (text or hex, see --key-type). Default: all zero.")
        sp.add_argument("--iv", help="IV (text or hex, see --iv-type). Default: all zero.")
        sp.add_argument("--key-type", choices=VALUE_TYPES, default="text",
                        help="How --key is read (default: text)")
        sp.add_argument("--iv-type", choices=VALUE_TYPES, default="text",
                        help="How --iv is read (default: text)")
        sp.add_argument("--bit-order", default=DEFAULT_BIT_ORDER,
                        help="Bit order for reading key/IV bytes: msb or lsb (default: msb)")
        sp.add_argument("--passphrase", help="Derive key and IV from a passphrase (needs --salt)")
        sp.add_argument("--salt", help="Salt (hex) for --passphrase")
        sp.add_argument("--iterations", type=int, default=PBKDF2_ITERATIONS,
                        help=f"PBKDF2 iterations (default: {PBKDF2_ITERATIONS})")
        sp.add_argument("--format", choices=OUTPUT_FORMATS, default="hex",
                        help="Encoding of ciphertext/keystream text (default: hex)")

    ks = sub.add_parser("keystream", help="Print raw keystream")
    add_common(ks)
    ks.add_argument("--length", type=int, required=True, help="Keystream length in bytes")

    enc = sub.add_parser("encrypt", help="Encrypt UTF-8 text or a file")
    add_common(enc)
    src = enc.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Plaintext (UTF-8)")
    src.add_argument("--in-file", help="Plaintext file (raw binary)")
    enc.add_argument("--out-file", help="Write ciphertext to file (raw binary)")

    dec = sub.add_parser("decrypt", help="Decrypt hex/base64 text or a file")
    add_common(dec)
    src = dec.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Ciphertext (hex or base64, see --format)")
    src.add_argument("--in-file", help="Ciphertext file (raw binary)")
    dec.add_argument("--out-file", help="Write plaintext to file (raw binary)")

    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        order = BitOrder.parse(args.bit_order)
        key, iv = resolve_key_iv(args)
        logger.debug("Running %s (bit order %s, format %s)",
                     args.cmd, order.value, args.format)
        COMMANDS[args.cmd](args, key, iv, order)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
