# File Encryption Module
"""
Streaming file encryption with the Trivium keystream:
- Chunked reads (doesn't load large files into RAM)
- Output size equals input size
- Same call encrypts and decrypts
"""

from .file_crypto import (
    xor_file,
    encrypt_file,
    decrypt_file,
    read_chunks,
    DEFAULT_CHUNK_SIZE,
)

__all__ = [
    'xor_file',
    'encrypt_file',
    'decrypt_file',
    'read_chunks',
    'DEFAULT_CHUNK_SIZE',
]
