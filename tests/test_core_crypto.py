"""
Unit tests for Core Crypto modules.

Tests:
- Modular arithmetic (mod pow, GCD, extended GCD, inverse, primality)
- Codec helpers
"""

import random

import pytest
from classicvault.core_crypto.modular_math import (
    fast_mod_pow, gcd, binary_gcd, extended_gcd, mod_inverse,
    is_probable_prime, generate_prime
)
from classicvault.core_crypto.codec import (
    to_bytes, bytes_to_units, units_to_bytes, bytes_to_int, int_to_bytes
)
from classicvault.errors import InvalidParameterError, NoInverseError


class TestFastModPow:
    """Unit tests for square-and-multiply exponentiation."""

    def test_known_values(self):
        """Test hand-checked values."""
        assert fast_mod_pow(2, 10, 1000) == 24
        assert fast_mod_pow(3, 7, 13) == 3
        assert fast_mod_pow(5, 117, 19) == 1
        assert fast_mod_pow(0, 5, 13) == 0

    def test_zero_exponent(self):
        """Anything to the 0th power is 1."""
        assert fast_mod_pow(7, 0, 13) == 1
        assert fast_mod_pow(0, 0, 13) == 1

    def test_modulus_one(self):
        """Everything is 0 modulo 1."""
        assert fast_mod_pow(5, 3, 1) == 0
        assert fast_mod_pow(5, 0, 1) == 0

    def test_negative_base_reduced(self):
        """Negative bases are reduced into range first."""
        # (-2)^3 = -8 = 2 (mod 5)
        assert fast_mod_pow(-2, 3, 5) == 2

    def test_oversized_base_reduced(self):
        """Bases larger than the modulus are reduced first."""
        assert fast_mod_pow(1003, 2, 1000) == 9

    def test_fermat(self):
        """Fermat's little theorem: a^(p-1) = 1 (mod p)."""
        p = 101
        assert fast_mod_pow(2, p - 1, p) == 1

    def test_agrees_with_builtin(self):
        """Results match Python's three-argument pow."""
        rng = random.Random(1234)
        for _ in range(200):
            base = rng.randrange(-10 ** 6, 10 ** 6)
            exponent = rng.randrange(0, 10 ** 4)
            modulus = rng.randrange(1, 10 ** 5)
            assert fast_mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)

    def test_invalid_modulus(self):
        """Non-positive modulus is rejected."""
        with pytest.raises(InvalidParameterError):
            fast_mod_pow(2, 3, 0)
        with pytest.raises(InvalidParameterError):
            fast_mod_pow(2, 3, -7)

    def test_negative_exponent(self):
        """Negative exponent is rejected."""
        with pytest.raises(InvalidParameterError):
            fast_mod_pow(2, -1, 7)


class TestGCD:
    """Unit tests for Euclid and binary GCD."""

    def test_gcd(self):
        """Test GCD calculation."""
        assert gcd(48, 18) == 6
        assert gcd(17, 13) == 1

    def test_gcd_with_zero(self):
        """Zero acts as the identity."""
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5
        assert gcd(0, 0) == 0

    def test_binary_gcd_matches_euclid(self):
        """Binary GCD agrees with Euclid on all small non-negative pairs."""
        for a in range(0, 80):
            for b in range(0, 80):
                assert binary_gcd(a, b) == gcd(a, b), f"gcd({a}, {b})"

    def test_binary_gcd_large(self):
        """Binary GCD on larger values with shared powers of two."""
        a = 2 ** 20 * 3 ** 5 * 7
        b = 2 ** 12 * 3 ** 2 * 11
        assert binary_gcd(a, b) == gcd(a, b) == 2 ** 12 * 9


class TestExtendedGCD:
    """Unit tests for the iterative extended Euclidean algorithm."""

    def test_bezout_identity(self):
        """a*x + b*y == gcd(a, b)."""
        for a, b in [(240, 46), (17, 3120), (99, 78), (1, 1), (12, 18)]:
            g, x, y = extended_gcd(a, b)
            assert g == gcd(a, b)
            assert a * x + b * y == g

    def test_a_zero(self):
        """Terminal case a == 0 gives (b, 0, 1)."""
        assert extended_gcd(0, 7) == (7, 0, 1)

    def test_b_zero(self):
        """b == 0 gives (a, 1, 0)."""
        assert extended_gcd(7, 0) == (7, 1, 0)

    def test_deep_input_no_recursion_limit(self):
        """Consecutive Fibonacci numbers (worst case) far beyond recursion depth."""
        a, b = 1, 1
        for _ in range(3000):
            a, b = b, a + b
        g, x, y = extended_gcd(b, a)
        assert g == 1
        assert b * x + a * y == 1


class TestModInverse:
    """Unit tests for modular inverse."""

    def test_mod_inverse(self):
        """Test modular inverse."""
        # 3 * 7 = 1 (mod 10) -> inverse of 3 mod 10 is 7
        assert mod_inverse(3, 10) == 7
        assert mod_inverse(17, 43) == 38
        assert mod_inverse(17, 3120) == 2753

    def test_result_in_range(self):
        """Result is normalized into [0, m)."""
        for a in range(1, 50):
            if gcd(a, 51) == 1:
                inv = mod_inverse(a, 51)
                assert 0 <= inv < 51
                assert (a * inv) % 51 == 1

    def test_negative_a(self):
        """Negative a is handled through reduction."""
        inv = mod_inverse(-3, 10)
        assert (-3 * inv) % 10 == 1

    def test_no_inverse(self):
        """Non-coprime inputs raise NoInverseError."""
        with pytest.raises(NoInverseError) as exc_info:
            mod_inverse(6, 9)
        assert exc_info.value.gcd == 3

    def test_invalid_modulus(self):
        """Non-positive modulus is rejected."""
        with pytest.raises(InvalidParameterError):
            mod_inverse(3, 0)


class TestPrimality:
    """Unit tests for Miller-Rabin and prime generation."""

    def test_miller_rabin_primes(self):
        """Miller-Rabin should identify primes."""
        rng = random.Random(0)
        for p in [2, 3, 5, 7, 11, 13, 17, 19, 23, 53, 61, 97, 101, 7919, 104729]:
            assert is_probable_prime(p, rng=rng), f"{p} should be prime"

    def test_miller_rabin_composites(self):
        """Miller-Rabin should reject composites."""
        rng = random.Random(0)
        for c in [0, 1, 4, 6, 8, 9, 10, 15, 21, 100, 561, 3233, 104730]:
            assert not is_probable_prime(c, rng=rng), f"{c} should not be prime"

    def test_generate_prime(self):
        """Generated primes have the requested bit length."""
        rng = random.Random(42)
        for bits in (2, 8, 16, 24):
            p = generate_prime(bits, rng)
            assert p.bit_length() == bits
            assert is_probable_prime(p)

    def test_generate_prime_deterministic_with_seed(self):
        """The same seed yields the same prime."""
        assert generate_prime(16, random.Random(7)) == generate_prime(16, random.Random(7))

    def test_generate_prime_invalid_bits(self):
        """Fewer than 2 bits is rejected."""
        with pytest.raises(InvalidParameterError):
            generate_prime(1)


class TestCodec:
    """Unit tests for byte/unit/integer conversion."""

    def test_to_bytes(self):
        """Text is UTF-8 encoded, bytes pass through."""
        assert to_bytes("Hi") == b"Hi"
        assert to_bytes(b"Hi") == b"Hi"
        assert to_bytes(bytearray(b"Hi")) == b"Hi"

    def test_bytes_to_units(self):
        """Each byte becomes its unsigned value."""
        assert bytes_to_units(b"Hi") == [72, 105]
        assert bytes_to_units(b"\xff\x00") == [255, 0]
        assert bytes_to_units("é") == [195, 169]
        assert bytes_to_units(b"") == []

    def test_units_to_bytes(self):
        """Units map back to bytes."""
        assert units_to_bytes([72, 105]) == b"Hi"

    def test_units_out_of_range_discarded(self):
        """Units outside [0, 255] are dropped."""
        assert units_to_bytes([72, 300, -1, 105]) == b"Hi"

    def test_units_out_of_range_strict(self):
        """Strict mode rejects units outside [0, 255]."""
        with pytest.raises(InvalidParameterError):
            units_to_bytes([72, 256], strict=True)

    def test_int_conversions(self):
        """Big-endian integer conversion."""
        assert bytes_to_int(b"\x01\x00") == 256
        assert int_to_bytes(256) == b"\x01\x00"
        assert int_to_bytes(0) == b"\x00"
        assert int_to_bytes(1, length=4) == b"\x00\x00\x00\x01"
        assert int_to_bytes(bytes_to_int(b"hello")) == b"hello"

    def test_int_to_bytes_negative(self):
        """Negative integers cannot be encoded."""
        with pytest.raises(InvalidParameterError):
            int_to_bytes(-1)
