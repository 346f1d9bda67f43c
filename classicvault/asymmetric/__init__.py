# Asymmetric Module
"""
Toy RSA-style public key scheme:
- Key generation from two small primes (e = 17, fallback 65537)
- Unit-by-unit encryption with square-and-multiply
- Byte message helpers

Educational only: tiny primes, no padding.
"""

from .toy_rsa import (
    ModularKeyPair,
    generate_keys,
    generate_random_keys,
    demo_keys,
    encrypt_unit,
    decrypt_unit,
    encrypt_message,
    decrypt_message,
)

__all__ = [
    'ModularKeyPair',
    'generate_keys',
    'generate_random_keys',
    'demo_keys',
    'encrypt_unit',
    'decrypt_unit',
    'encrypt_message',
    'decrypt_message',
]
