"""
Hybrid Scheme

Combines the toy asymmetric scheme with a one-byte XOR stream:
1. Pick a symmetric key byte k
2. Wrap k with the recipient's public key: token = k^e mod n
3. XOR every message byte with k

The recipient unwraps k with the private key and XORs again.

Security Note:
    A single repeating key byte is trivially broken by frequency analysis.
    This shows the shape of hybrid encryption, nothing more.
"""

import logging
import secrets
from dataclasses import dataclass
from random import Random
from typing import Optional

from ..asymmetric.toy_rsa import ModularKeyPair, encrypt_unit, decrypt_unit
from ..core_crypto.codec import BYTE_MAX, BytesLike, to_bytes
from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HybridCiphertext:
    """Wrapped key token plus the XOR-encrypted message."""
    wrapped_key: int
    ciphertext: bytes


def xor_stream(data: BytesLike, key_byte: int) -> bytes:
    """XOR every byte of `data` with the same `key_byte`."""
    if not 0 <= key_byte <= BYTE_MAX:
        raise InvalidParameterError(f"Key byte must be in [0, 255], got {key_byte}")
    return bytes(b ^ key_byte for b in to_bytes(data))


def encrypt(message: BytesLike, keypair: ModularKeyPair,
            key_byte: Optional[int] = None,
            rng: Optional[Random] = None) -> HybridCiphertext:
    """
    Encrypt `message` under a fresh (or given) key byte wrapped for `keypair`.

    Args:
        message: Bytes or text to encrypt
        keypair: Recipient key pair (only the public half is used)
        key_byte: Symmetric key byte; drawn from `rng` in [1, 255] if omitted
        rng: Random source (defaults to the system CSPRNG)

    Raises:
        InvalidParameterError: If the modulus is below 2, or the key byte is
                               not a byte or is not smaller than the modulus
                               (it would not unwrap)
    """
    e, n = keypair.public_key
    if n < 2:
        raise InvalidParameterError(f"Modulus {n} is too small to wrap a key byte")

    if key_byte is None:
        if rng is None:
            rng = secrets.SystemRandom()
        key_byte = rng.randrange(1, min(BYTE_MAX + 1, n))

    if not 0 <= key_byte <= BYTE_MAX:
        raise InvalidParameterError(f"Key byte must be in [0, 255], got {key_byte}")
    if key_byte >= n:
        raise InvalidParameterError(
            f"Key byte {key_byte} must be smaller than modulus {n}"
        )

    ciphertext = xor_stream(message, key_byte)
    wrapped = encrypt_unit(key_byte, e, n)
    logger.debug("Wrapped symmetric key for modulus %d", n)
    return HybridCiphertext(wrapped_key=wrapped, ciphertext=ciphertext)


def decrypt(payload: HybridCiphertext, keypair: ModularKeyPair) -> bytes:
    """
    Unwrap the key byte with the private key and XOR the message back.

    Raises:
        InvalidParameterError: If the unwrapped key is not a byte (the token
                               was not made for this key pair)
    """
    d, n = keypair.private_key
    key_byte = decrypt_unit(payload.wrapped_key, d, n)
    if key_byte > BYTE_MAX:
        raise InvalidParameterError("Wrapped key does not decrypt to a byte")
    return xor_stream(payload.ciphertext, key_byte)
