"""
Rail Fence Cipher

A transposition cipher. The plaintext is written in a zigzag across `key`
rails (rows), then read off rail by rail:

    key = 3, "WEAREDISCOVERED"

    W . . . E . . . C . . . R . .
    . E . R . D . S . O . E . E .
    . . A . . . I . . . V . . . D

Decryption reconstructs the zigzag: it first counts how many characters
each rail owns, cuts the ciphertext into rails of those lengths, then walks
the zigzag again taking the next character from whichever rail it is on.
"""

from enum import Enum
from typing import Iterator, List


class Direction(Enum):
    """Which way the zigzag is currently moving through the rails."""
    DESCENDING = 1
    ASCENDING = -1


def zigzag(length: int, key: int) -> Iterator[int]:
    """
    Yield the rail index for each of `length` positions.

    Starts at rail 0 descending and flips direction whenever it reaches
    the top (0) or bottom (key - 1) rail.

    >>> list(zigzag(6, 3))
    [0, 1, 2, 1, 0, 1]
    """
    row = 0
    direction = Direction.DESCENDING
    for _ in range(length):
        yield row
        row += direction.value
        if row == 0:
            direction = Direction.DESCENDING
        elif row == key - 1:
            direction = Direction.ASCENDING


def encrypt(text: str, key: int) -> str:
    """
    Encrypt `text` across `key` rails.

    key <= 1 (a single rail) and empty text are returned unchanged.

    >>> encrypt("WEAREDISCOVEREDFLEEATONCE", 3)
    'WECRLTEERDSOEEFEAOCAIVDEN'
    """
    if key <= 1 or not text:
        return text

    rails: List[List[str]] = [[] for _ in range(key)]
    for ch, row in zip(text, zigzag(len(text), key)):
        rails[row].append(ch)

    return ''.join(''.join(rail) for rail in rails)


def rail_lengths(length: int, key: int) -> List[int]:
    """Number of characters each rail holds for a text of `length`."""
    counts = [0] * key
    for row in zigzag(length, key):
        counts[row] += 1
    return counts


def decrypt(cipher: str, key: int) -> str:
    """
    Reverse encrypt() for the same number of rails.

    key <= 1 and empty ciphertext are returned unchanged.
    """
    if key <= 1 or not cipher:
        return cipher

    # Cut the ciphertext into rails
    rails: List[str] = []
    index = 0
    for count in rail_lengths(len(cipher), key):
        rails.append(cipher[index:index + count])
        index += count

    # Walk the zigzag again, taking the next unread character of each rail
    positions = [0] * key
    plaintext = []
    for row in zigzag(len(cipher), key):
        if positions[row] < len(rails[row]):
            plaintext.append(rails[row][positions[row]])
            positions[row] += 1

    return ''.join(plaintext)
