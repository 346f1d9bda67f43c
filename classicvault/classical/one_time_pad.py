"""
One-Time Pad

XOR-based cipher with a key exactly as long as the message. XOR is its own
inverse, so decryption is the same operation as encryption.

Security Note:
    The default key source is the system CSPRNG, but nothing here stops a
    pad from being reused. This module is for learning purposes only.
"""

import logging
import secrets
from random import Random
from typing import Optional, Tuple

from ..core_crypto.codec import BytesLike, to_bytes
from ..errors import InvalidParameterError, KeyLengthMismatchError

logger = logging.getLogger(__name__)


def _xor(data: BytesLike, key: BytesLike) -> bytes:
    data = to_bytes(data)
    key = to_bytes(key)
    if len(key) != len(data):
        raise KeyLengthMismatchError(len(key), len(data))
    return bytes(d ^ k for d, k in zip(data, key))


def encrypt(plaintext: BytesLike, key: BytesLike) -> bytes:
    """
    XOR `plaintext` with `key` byte by byte.

    Text arguments are UTF-8 encoded first.

    Raises:
        KeyLengthMismatchError: If the key and plaintext lengths differ
    """
    return _xor(plaintext, key)


def decrypt(ciphertext: BytesLike, key: BytesLike) -> bytes:
    """
    XOR `ciphertext` with `key` to recover the plaintext.

    Raises:
        KeyLengthMismatchError: If the key and ciphertext lengths differ
    """
    return _xor(ciphertext, key)


def generate_random_key(length: int, rng: Optional[Random] = None) -> bytes:
    """
    Draw `length` independent, uniform bytes.

    Args:
        length: Number of key bytes
        rng: Random source (defaults to the system CSPRNG); pass a seeded
             random.Random for reproducible keys

    Raises:
        InvalidParameterError: If length is negative
    """
    if length < 0:
        raise InvalidParameterError("Key length must be non-negative")
    if rng is None:
        rng = secrets.SystemRandom()

    key = bytes(rng.randrange(256) for _ in range(length))
    logger.debug("Generated %d-byte pad", length)
    return key


def encrypt_with_random_key(plaintext: BytesLike,
                            rng: Optional[Random] = None) -> Tuple[bytes, bytes]:
    """
    Encrypt under a freshly drawn pad.

    Returns:
        Tuple (ciphertext, key)
    """
    data = to_bytes(plaintext)
    key = generate_random_key(len(data), rng)
    return encrypt(data, key), key
