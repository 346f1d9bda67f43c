"""
Modular Arithmetic Operations

Implements the number theory that backs the toy asymmetric scheme:
- Modular exponentiation (square-and-multiply algorithm)
- Greatest common divisor (Euclid and binary variants)
- Extended Euclidean Algorithm (iterative) for modular inverse
- Miller-Rabin primality testing
- Small prime generation

Note: This implementation avoids using Python's built-in pow(a, b, mod).
      All modular exponentiation uses the square-and-multiply algorithm.
"""

import logging
import secrets
from random import Random
from typing import Optional, Tuple

from ..errors import InvalidParameterError, NoInverseError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MILLER_RABIN_ROUNDS = 40
SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def fast_mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Computes (base^exponent) mod modulus efficiently without using
    Python's built-in pow(a, b, mod).

    Algorithm (right-to-left binary method):
    1. Start with result = 1
    2. For each bit of exponent (from LSB to MSB):
       - If bit is 1, multiply result by base (mod modulus)
       - Square the base (mod modulus)

    Time complexity: O(log exponent) multiplications

    Args:
        base: The base number (negative or oversized bases are reduced)
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus

    Raises:
        InvalidParameterError: If exponent < 0 or modulus <= 0
    """
    if exponent < 0:
        raise InvalidParameterError("Exponent must be non-negative")
    if modulus <= 0:
        raise InvalidParameterError("Modulus must be positive")
    if modulus == 1:
        return 0

    # Reduce base first
    base = base % modulus
    result = 1

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus

        base = (base * base) % modulus
        exponent >>= 1

    return result


def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using Euclidean algorithm.

    gcd(a, 0) == gcd(0, a) == |a|.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def binary_gcd(a: int, b: int) -> int:
    """
    Binary (Stein's) GCD: strips common factors of two, then subtracts.

    Produces the same result as gcd() for every input.
    """
    a, b = abs(a), abs(b)
    if a == 0:
        return b
    if b == 0:
        return a

    # Count common factors of 2
    shift = 0
    while ((a | b) & 1) == 0:
        a >>= 1
        b >>= 1
        shift += 1

    while (a & 1) == 0:
        a >>= 1

    while b != 0:
        while (b & 1) == 0:
            b >>= 1
        if a > b:
            a, b = b, a
        b -= a

    return a << shift


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm (iterative).

    Finds integers x, y such that: a*x + b*y = gcd(a, b)

    Carries the Bezout coefficients forward in a loop instead of
    recursing, so the depth does not grow with the input size.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (gcd, x, y) where a*x + b*y = gcd.
        For a == 0 this is (b, 0, 1).
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds x in [0, m) such that (a * x) mod m = 1

    Args:
        a: The number to find inverse of
        m: The modulus (must be positive)

    Returns:
        Modular inverse of a mod m

    Raises:
        InvalidParameterError: If m <= 0
        NoInverseError: If inverse doesn't exist (gcd(a, m) != 1)
    """
    if m <= 0:
        raise InvalidParameterError("Modulus must be positive")

    g, x, _ = extended_gcd(a % m, m)

    if g != 1:
        raise NoInverseError(a, m, g)

    return x % m


def is_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS,
                      rng: Optional[Random] = None) -> bool:
    """
    Miller-Rabin primality test.

    A probabilistic test that determines if n is probably prime.
    Probability of false positive: at most (1/4)^rounds

    Algorithm:
    1. Write n-1 as 2^r * d (factor out powers of 2)
    2. For each random witness a:
       - Compute x = a^d mod n
       - If x = 1 or x = n-1, continue
       - Square x up to r-1 times, looking for n-1
       - If never found, n is composite

    Args:
        n: Number to test for primality
        rounds: Number of witnesses to test
        rng: Source of witnesses (defaults to the system CSPRNG)

    Returns:
        True if n is probably prime, False if definitely composite
    """
    if n < 2:
        return False

    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    if rng is None:
        rng = secrets.SystemRandom()

    # Write n-1 as 2^r * d
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for _ in range(rounds):
        a = rng.randrange(2, n - 1)
        x = fast_mod_pow(a, d, n)

        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = fast_mod_pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True


def generate_prime(bits: int, rng: Optional[Random] = None) -> int:
    """
    Generate a random prime number of specified bit length.

    Args:
        bits: Desired bit length of the prime
        rng: Random source (defaults to the system CSPRNG)

    Returns:
        A prime number of exactly `bits` bits

    Raises:
        InvalidParameterError: If bits < 2
    """
    if bits < 2:
        raise InvalidParameterError("Bit length must be at least 2")
    if rng is None:
        rng = secrets.SystemRandom()

    while True:
        # Set MSB for the bit length, LSB to make it odd
        candidate = rng.getrandbits(bits)
        candidate |= (1 << (bits - 1))
        candidate |= 1

        if is_probable_prime(candidate, rng=rng):
            logger.debug("Found %d-bit prime", bits)
            return candidate
