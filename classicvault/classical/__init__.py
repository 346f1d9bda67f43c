# Classical Ciphers Module
"""
Symmetric classical ciphers, one module each:
- Caesar (shift)
- Vigenère (polyalphabetic, running key)
- Rail Fence (zigzag transposition)
- Playfair (5x5 digraph substitution)
- One-Time Pad (byte-wise XOR)

Each module exposes encrypt() and decrypt(); import the module and call
them qualified, e.g. ``caesar.encrypt("HELLO", 3)``.
"""

from . import caesar, vigenere, rail_fence, playfair, one_time_pad
from .playfair import KeyMatrix, PlayfairCipher, build_key_matrix, prepare_text

__all__ = [
    'caesar',
    'vigenere',
    'rail_fence',
    'playfair',
    'one_time_pad',
    'KeyMatrix',
    'PlayfairCipher',
    'build_key_matrix',
    'prepare_text',
]
