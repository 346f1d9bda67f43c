"""
Vigenère Cipher

A polyalphabetic substitution: the key is repeated alongside the text
(the "running key") and each letter is shifted by the alphabet position
of the key character beside it.

The running key advances on every character of the text, including the
ones that are not shifted (spaces, digits, punctuation).

Key characters that are not letters still shift: their distance from
'A' is taken modulo 26, so any non-empty key round-trips.
"""

from typing import Callable

ALPHABET_SIZE = 26


def generate_running_key(text: str, key: str) -> str:
    """
    Cycle `key` until it is exactly as long as `text`.

    If either argument is empty the key is returned unchanged.

    >>> generate_running_key("HELLO", "KEY")
    'KEYKE'
    """
    if not text or not key:
        return key
    return ''.join(key[i % len(key)] for i in range(len(text)))


def _letter_base(ch: str) -> int:
    """Ordinal of 'a' or 'A' for an ASCII letter, -1 for anything else."""
    if 'a' <= ch <= 'z':
        return ord('a')
    if 'A' <= ch <= 'Z':
        return ord('A')
    return -1


def _key_shift(ch: str) -> int:
    base = _letter_base(ch)
    if base < 0:
        base = ord('A')
    return (ord(ch) - base) % ALPHABET_SIZE


def _transform(text: str, key: str, combine: Callable[[int, int], int]) -> str:
    if not text or not key:
        return text

    shifts = [_key_shift(ch) for ch in generate_running_key(text, key)]
    out = []
    for ch, shift in zip(text, shifts):
        base = _letter_base(ch)
        if base < 0:
            out.append(ch)
        else:
            out.append(chr(combine(ord(ch) - base, shift) % ALPHABET_SIZE + base))
    return ''.join(out)


def encrypt(text: str, key: str) -> str:
    """
    Encrypt `text` with the Vigenère key `key`.

    The shift comes from the key letter (either case); the output keeps
    the case of the plaintext letter.

    >>> encrypt("HELLO", "KEY")
    'RIJVS'
    """
    return _transform(text, key, lambda c, s: c + s)


def decrypt(text: str, key: str) -> str:
    """Invert encrypt() for the same key."""
    return _transform(text, key, lambda c, s: c - s + ALPHABET_SIZE)
