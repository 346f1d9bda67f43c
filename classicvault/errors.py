"""
Error types shared by every ClassicVault cipher.

All errors derive from CipherError, which is a ValueError: every failure
in this package comes from bad input (wrong key length, unusable primes,
malformed ciphertext), never from a transient condition.
"""


class CipherError(ValueError):
    """Base class for all ClassicVault errors."""
    pass


class InvalidParameterError(CipherError):
    """Raised when a key or parameter is outside what an operation accepts."""
    pass


class KeyLengthMismatchError(CipherError):
    """Raised when a one-time pad key and its plaintext differ in length."""

    def __init__(self, key_length: int, data_length: int):
        super().__init__(
            f"Key length {key_length} does not match data length {data_length}"
        )
        self.key_length = key_length
        self.data_length = data_length


class KeyGenerationError(CipherError):
    """Raised when no usable public/private exponent pair exists."""
    pass


class NoInverseError(CipherError):
    """Raised when a modular inverse does not exist (gcd(a, m) != 1)."""

    def __init__(self, a: int, m: int, g: int):
        super().__init__(f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})")
        self.a = a
        self.m = m
        self.gcd = g
