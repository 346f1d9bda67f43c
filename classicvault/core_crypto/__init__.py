# Core Cryptography Module
"""
Number theory and encoding primitives including:
- Modular exponentiation, GCD, extended Euclid, modular inverse
- Miller-Rabin primality test and small prime generation
- Byte/unit/integer conversions
"""
