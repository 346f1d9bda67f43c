# Hybrid Module
"""
Hybrid encryption: a one-byte XOR key wrapped with the toy asymmetric scheme.
"""

from .hybrid_scheme import (
    HybridCiphertext,
    xor_stream,
    encrypt,
    decrypt,
)

__all__ = [
    'HybridCiphertext',
    'xor_stream',
    'encrypt',
    'decrypt',
]
