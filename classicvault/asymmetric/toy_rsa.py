"""
Toy RSA-style Asymmetric Scheme

Key generation and per-unit encryption built on the modular arithmetic
in core_crypto:
- n = p * q, phi(n) = (p - 1)(q - 1)
- public exponent e = 17, or 65537 if 17 shares a factor with phi(n)
- private exponent d = e^(-1) mod phi(n)
- encrypt: c = m^e mod n, decrypt: m = c^d mod n

Messages are encrypted one byte ("unit") at a time with no padding. A unit
only round-trips when it is smaller than n; nothing here splits or pads
larger values.

Security Note:
    Primes are tiny and there is no padding scheme. This is NOT RSA as
    used in practice and must not protect real data.
"""

import logging
from dataclasses import dataclass
from random import Random
from typing import Iterable, List, Optional, Tuple

from ..core_crypto.codec import BytesLike, bytes_to_units, units_to_bytes
from ..core_crypto.modular_math import (
    fast_mod_pow, gcd, mod_inverse, is_probable_prime, generate_prime
)
from ..errors import InvalidParameterError, KeyGenerationError, NoInverseError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

PRIMARY_PUBLIC_EXPONENT = 17
FALLBACK_PUBLIC_EXPONENT = 65537
DEFAULT_PRIME_BITS = 16

# Primes used by the fixed demonstration key pair (n = 3233, e = 17, d = 2753)
DEMO_PRIME_P = 61
DEMO_PRIME_Q = 53


# ============================================================================
# Key Pair
# ============================================================================

@dataclass(frozen=True)
class ModularKeyPair:
    """
    Immutable key pair {n, e, d} with d * e = 1 (mod phi(n)).

    Example:
        >>> keypair = generate_keys(61, 53)
        >>> keypair.encrypt(65)
        2790
        >>> keypair.decrypt(2790)
        65
    """
    n: int
    e: int
    d: int

    @property
    def public_key(self) -> Tuple[int, int]:
        """Public key (e, n)."""
        return self.e, self.n

    @property
    def private_key(self) -> Tuple[int, int]:
        """Private key (d, n)."""
        return self.d, self.n

    @property
    def key_size(self) -> int:
        """Key size in bits."""
        return self.n.bit_length()

    def encrypt(self, unit: int) -> int:
        """Encrypt one unit with the public exponent."""
        return encrypt_unit(unit, self.e, self.n)

    def decrypt(self, unit: int) -> int:
        """Decrypt one unit with the private exponent."""
        return decrypt_unit(unit, self.d, self.n)

    def __repr__(self) -> str:
        return f"ModularKeyPair(n={self.n}, e={self.e})"


def generate_keys(p: int, q: int) -> ModularKeyPair:
    """
    Derive a key pair from two distinct primes.

    Args:
        p: First prime
        q: Second prime

    Returns:
        ModularKeyPair with n = p*q

    Raises:
        InvalidParameterError: If p or q is not prime, or p == q
        KeyGenerationError: If neither candidate public exponent has an
                            inverse modulo phi(n)
    """
    for value in (p, q):
        if not is_probable_prime(value):
            raise InvalidParameterError(f"{value} is not prime")
    if p == q:
        raise InvalidParameterError("p and q must be distinct primes")

    n = p * q
    phi_n = (p - 1) * (q - 1)

    e = PRIMARY_PUBLIC_EXPONENT
    if gcd(e, phi_n) != 1:
        e = FALLBACK_PUBLIC_EXPONENT

    try:
        d = mod_inverse(e, phi_n)
    except NoInverseError as exc:
        raise KeyGenerationError(
            f"Cannot generate valid keys with primes {p} and {q}"
        ) from exc

    logger.debug("Generated key pair n=%d e=%d", n, e)
    return ModularKeyPair(n=n, e=e, d=d)


def generate_random_keys(bits: int = DEFAULT_PRIME_BITS,
                         rng: Optional[Random] = None) -> ModularKeyPair:
    """
    Generate a key pair from two random distinct `bits`-bit primes.

    Prime pairs for which no exponent works are discarded and redrawn.
    """
    while True:
        p = generate_prime(bits, rng)
        q = generate_prime(bits, rng)
        if p == q:
            continue
        try:
            return generate_keys(p, q)
        except KeyGenerationError:
            logger.debug("Discarding unusable prime pair")


def demo_keys() -> ModularKeyPair:
    """The fixed demonstration key pair built from 61 and 53."""
    return generate_keys(DEMO_PRIME_P, DEMO_PRIME_Q)


# ============================================================================
# Encryption / Decryption
# ============================================================================

def encrypt_unit(m: int, e: int, n: int) -> int:
    """c = m^e mod n. The caller keeps m < n for it to round-trip."""
    return fast_mod_pow(m, e, n)


def decrypt_unit(c: int, d: int, n: int) -> int:
    """m = c^d mod n."""
    return fast_mod_pow(c, d, n)


def encrypt_message(message: BytesLike, keypair: ModularKeyPair) -> List[int]:
    """Encrypt every byte of `message` as its own unit."""
    e, n = keypair.public_key
    return [encrypt_unit(unit, e, n) for unit in bytes_to_units(message)]


def decrypt_message(units: Iterable[int], keypair: ModularKeyPair,
                    strict: bool = False) -> bytes:
    """
    Decrypt a list of units back into bytes.

    Decrypted values outside [0, 255] are dropped (or rejected if strict).
    """
    d, n = keypair.private_key
    return units_to_bytes((decrypt_unit(c, d, n) for c in units), strict=strict)
