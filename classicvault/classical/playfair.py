"""
Playfair Cipher

A digraph substitution cipher over a 5x5 key matrix. I and J share a cell,
so the matrix holds the 25 letters A-Z without J.

Encryption rules for each pair of letters (a, b):
- Same row:     each letter is replaced by the one to its right (wrapping)
- Same column:  each letter is replaced by the one below it (wrapping)
- Rectangle:    each letter keeps its row and takes the other's column

Decryption uses the same rules moving left/up instead; the rectangle rule
is its own inverse.

Example:
    >>> matrix = build_key_matrix("MONARCHY")
    >>> encrypt("INSTRUMENTS", matrix)
    'GATLMZCLRQXA'
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

GRID_SIZE = 5
FILLER_LETTER = 'X'
MERGED_LETTER = 'J'    # folded into REPLACEMENT_LETTER
REPLACEMENT_LETTER = 'I'
MATRIX_ALPHABET = 'ABCDEFGHIKLMNOPQRSTUVWXYZ'


def _normalize_letters(text: str) -> List[str]:
    """Uppercase, keep ASCII letters only, fold J into I."""
    letters = []
    for ch in text.upper():
        if 'A' <= ch <= 'Z':
            letters.append(REPLACEMENT_LETTER if ch == MERGED_LETTER else ch)
    return letters


# ============================================================================
# Key Matrix
# ============================================================================

@dataclass(frozen=True)
class KeyMatrix:
    """
    Immutable 5x5 Playfair grid stored row-major in `cells`.

    Build one with build_key_matrix() (or KeyMatrix.from_key()); the
    constructor checks that `cells` holds each matrix letter exactly once.
    """
    cells: Tuple[str, ...]
    _positions: Dict[str, Tuple[int, int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if len(self.cells) != GRID_SIZE * GRID_SIZE or set(self.cells) != set(MATRIX_ALPHABET):
            raise InvalidParameterError(
                "Key matrix must contain each of A-Z except J exactly once"
            )
        positions = {
            letter: divmod(i, GRID_SIZE) for i, letter in enumerate(self.cells)
        }
        object.__setattr__(self, '_positions', positions)

    @classmethod
    def from_key(cls, key: str) -> 'KeyMatrix':
        """Build the matrix for a seed key (see build_key_matrix)."""
        return build_key_matrix(key)

    @property
    def rows(self) -> List[str]:
        """The grid as five 5-letter strings."""
        return [
            ''.join(self.cells[r * GRID_SIZE:(r + 1) * GRID_SIZE])
            for r in range(GRID_SIZE)
        ]

    def letter_at(self, row: int, col: int) -> str:
        """Letter at (row, col); both indices wrap modulo 5."""
        return self.cells[(row % GRID_SIZE) * GRID_SIZE + (col % GRID_SIZE)]

    def position(self, letter: str) -> Tuple[int, int]:
        """
        (row, col) of `letter`.

        Raises:
            InvalidParameterError: If the letter is not in the matrix
        """
        try:
            return self._positions[letter]
        except KeyError:
            raise InvalidParameterError(
                f"{letter!r} is not a Playfair matrix letter"
            ) from None

    def __contains__(self, letter: str) -> bool:
        return letter in self._positions

    def __str__(self) -> str:
        return '\n'.join(' '.join(row) for row in self.rows)


def build_key_matrix(key: str) -> KeyMatrix:
    """
    Build the Playfair key matrix for a seed key.

    The key's letters (uppercased, J as I, non-letters dropped) fill the grid
    left to right, top to bottom, skipping repeats. The rest of the alphabet
    follows in order.

    >>> build_key_matrix("MONARCHY").rows
    ['MONAR', 'CHYBD', 'EFGIK', 'LPQST', 'UVWXZ']
    """
    cells: List[str] = []
    seen = set()
    for letter in _normalize_letters(key) + list(MATRIX_ALPHABET):
        if letter not in seen:
            seen.add(letter)
            cells.append(letter)

    matrix = KeyMatrix(tuple(cells))
    logger.debug("Built Playfair key matrix:\n%s", matrix)
    return matrix


# ============================================================================
# Text Preparation
# ============================================================================

def prepare_text(text: str) -> str:
    """
    Turn arbitrary text into Playfair digraphs.

    Uppercases, drops non-letters and folds J into I. Then walks the letters
    a pair at a time: if both letters of a pair are equal, an X is inserted
    after the first and the second letter starts the next pair. Only the
    pair boundaries the walk lands on are checked. An odd-length result is
    padded with a trailing X.

    >>> prepare_text("balloon")
    'BALXLOON'
    >>> prepare_text("hello world")
    'HELXLOWORLDX'
    """
    letters = _normalize_letters(text)
    prepared: List[str] = []

    i = 0
    while i < len(letters):
        first = letters[i]
        if i + 1 < len(letters) and letters[i + 1] != first:
            prepared.extend((first, letters[i + 1]))
            i += 2
        elif i + 1 < len(letters):
            prepared.extend((first, FILLER_LETTER))
            i += 1
        else:
            prepared.append(first)
            i += 1

    if len(prepared) % 2 != 0:
        prepared.append(FILLER_LETTER)

    return ''.join(prepared)


# ============================================================================
# Encryption / Decryption
# ============================================================================

def _substitute_pairs(text: str, matrix: KeyMatrix, step: int) -> str:
    out = []
    for i in range(0, len(text), 2):
        r1, c1 = matrix.position(text[i])
        r2, c2 = matrix.position(text[i + 1])

        if r1 == r2:
            out.append(matrix.letter_at(r1, c1 + step))
            out.append(matrix.letter_at(r2, c2 + step))
        elif c1 == c2:
            out.append(matrix.letter_at(r1 + step, c1))
            out.append(matrix.letter_at(r2 + step, c2))
        else:
            out.append(matrix.letter_at(r1, c2))
            out.append(matrix.letter_at(r2, c1))
    return ''.join(out)


def encrypt(plaintext: str, matrix: KeyMatrix) -> str:
    """Prepare `plaintext` and encrypt it pair by pair."""
    return _substitute_pairs(prepare_text(plaintext), matrix, 1)


def decrypt(ciphertext: str, matrix: KeyMatrix) -> str:
    """
    Decrypt Playfair ciphertext.

    The input is used as-is: it must already be an even number of matrix
    letters. The result is the prepared text (fillers are not removed).

    Raises:
        InvalidParameterError: On odd length or a letter not in the matrix
    """
    if len(ciphertext) % 2 != 0:
        raise InvalidParameterError("Playfair ciphertext must have even length")
    return _substitute_pairs(ciphertext, matrix, -1)


class PlayfairCipher:
    """
    A Playfair session bound to one key matrix.

    Example:
        >>> cipher = PlayfairCipher("playfair example")
        >>> cipher.decrypt(cipher.encrypt("hide the gold"))
        'HIDETHEGOLDX'
    """

    def __init__(self, key: str):
        self._matrix = build_key_matrix(key)

    @property
    def matrix(self) -> KeyMatrix:
        """The session's key matrix."""
        return self._matrix

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._matrix)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._matrix)

    def __repr__(self) -> str:
        return f"PlayfairCipher(matrix={''.join(self._matrix.cells)!r})"
