"""
File Encryption Module

Streams a file through the Trivium XOR transform chunk by chunk, so large
files are never loaded into RAM. Encryption and decryption are the same
operation: the output is the input XOR the keystream, byte for byte.

There is no header, padding or integrity tag. The output file has the
same size as the input, and the caller is responsible for keeping the
key and IV.
"""

import logging
import os
from typing import BinaryIO, Generator

from ..core_crypto.bit_utils import BitOrder
from ..core_crypto.trivium import xor_stream


logger = logging.getLogger(__name__)

# Chunk size for streaming (64 KB default)
DEFAULT_CHUNK_SIZE = 64 * 1024


def read_chunks(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Generator[bytes, None, None]:
    """Yield successive chunks from a binary stream until EOF."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield chunk


def xor_file(input_path: str, output_path: str, key: bytes, iv: bytes,
             chunk_size: int = DEFAULT_CHUNK_SIZE,
             bit_order: BitOrder = BitOrder.LSB) -> dict:
    """
    XOR a file with the Trivium keystream.

    Args:
        input_path: File to read
        output_path: File to write (overwritten)
        key: Key bytes (normalized to 80 bits)
        iv: IV bytes (normalized to 80 bits)
        chunk_size: Bytes read per chunk
        bit_order: How key/IV bits are read within each byte

    Returns:
        Dict with input_size, output_size and chunks

    Raises:
        ValueError: If chunk_size < 1, or input and output are the same file
    """
    if chunk_size < 1:
        raise ValueError("Chunk size must be at least 1")
    if os.path.exists(output_path) and os.path.samefile(input_path, output_path):
        raise ValueError("Input and output must be different files")

    input_size = 0
    output_size = 0
    chunks = 0

    with open(input_path, 'rb') as fin, open(output_path, 'wb') as fout:
        source = read_chunks(fin, chunk_size)
        for out in xor_stream(key, iv, source, bit_order):
            fout.write(out)
            input_size += len(out)
            output_size += len(out)
            chunks += 1

    logger.debug("Transformed %d bytes in %d chunks (%s -> %s)",
                 input_size, chunks, input_path, output_path)

    return {
        'input_size': input_size,
        'output_size': output_size,
        'chunks': chunks,
    }


def encrypt_file(input_path: str, output_path: str, key: bytes, iv: bytes,
                 **kwargs) -> dict:
    """Convenience function for file encryption."""
    return xor_file(input_path, output_path, key, iv, **kwargs)


def decrypt_file(input_path: str, output_path: str, key: bytes, iv: bytes,
                 **kwargs) -> dict:
    """Convenience function for file decryption."""
    return xor_file(input_path, output_path, key, iv, **kwargs)
