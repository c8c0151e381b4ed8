"""
Key and IV Helpers

Conveniences for callers that hold a passphrase rather than raw key bytes.
The cipher itself never calls these; it only ever sees (key, IV) bytes.

- PBKDF2-HMAC-SHA256 derivation of a 10-byte key and 10-byte IV
- Random IV and salt generation
"""

import secrets
from typing import Tuple

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.backends import default_backend

from .bit_utils import KEY_BYTES, IV_BYTES


# PBKDF2 configuration
PBKDF2_ITERATIONS = 100_000
PBKDF2_ALGORITHM = hashes.SHA256()
SALT_SIZE = 16


def derive_key_iv(passphrase: str, salt: bytes,
                  iterations: int = PBKDF2_ITERATIONS) -> Tuple[bytes, bytes]:
    """
    Derive a Trivium key and IV from a passphrase using PBKDF2.

    Args:
        passphrase: User passphrase
        salt: Non-empty salt
        iterations: PBKDF2 iteration count

    Returns:
        (key, iv), 10 bytes each

    Raises:
        ValueError: If the salt is empty or iterations < 1
    """
    if not salt:
        raise ValueError("Salt must not be empty")
    if iterations < 1:
        raise ValueError("Iterations must be at least 1")

    kdf = PBKDF2HMAC(
        algorithm=PBKDF2_ALGORITHM,
        length=KEY_BYTES + IV_BYTES,
        salt=bytes(salt),
        iterations=iterations,
        backend=default_backend()
    )
    material = kdf.derive(passphrase.encode('utf-8'))
    return material[:KEY_BYTES], material[KEY_BYTES:]


def generate_iv() -> bytes:
    """Generate a random 80-bit IV."""
    return secrets.token_bytes(IV_BYTES)


def generate_salt() -> bytes:
    """Generate a random salt for derive_key_iv."""
    return secrets.token_bytes(SALT_SIZE)
