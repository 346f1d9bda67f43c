# ClassicVault
"""
Educational cryptography toolkit:
- core_crypto: modular arithmetic and codecs
- classical:   Caesar, Vigenère, Rail Fence, Playfair, One-Time Pad
- asymmetric:  toy RSA-style key pairs
- hybrid:      XOR key byte wrapped with the asymmetric scheme
"""

from .errors import (
    CipherError,
    InvalidParameterError,
    KeyLengthMismatchError,
    KeyGenerationError,
    NoInverseError,
)

__version__ = "1.0.0"

__all__ = [
    'CipherError',
    'InvalidParameterError',
    'KeyLengthMismatchError',
    'KeyGenerationError',
    'NoInverseError',
]
