"""
Caesar Cipher

Rotates every ASCII letter a fixed number of places within its own case
alphabet. Digits, punctuation and whitespace pass through unchanged.
"""

ALPHABET_SIZE = 26


def _rotate(ch: str, shift: int) -> str:
    if 'a' <= ch <= 'z':
        base = ord('a')
    elif 'A' <= ch <= 'Z':
        base = ord('A')
    else:
        return ch
    return chr((ord(ch) - base + shift) % ALPHABET_SIZE + base)


def encrypt(text: str, shift: int) -> str:
    """
    Encrypt `text` by rotating letters `shift` places.

    Any integer shift is accepted; it is normalized into [0, 26).

    >>> encrypt("HELLO", 3)
    'KHOOR'
    """
    shift = ((shift % ALPHABET_SIZE) + ALPHABET_SIZE) % ALPHABET_SIZE
    return ''.join(_rotate(ch, shift) for ch in text)


def decrypt(text: str, shift: int) -> str:
    """Undo encrypt() by rotating the other way."""
    return encrypt(text, ALPHABET_SIZE - (shift % ALPHABET_SIZE))
