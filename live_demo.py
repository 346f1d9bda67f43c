#!/usr/bin/env python
"""
CLASSICVAULT LIVE DEMO

Walks through every ClassicVault cipher with fixed example inputs:
- Caesar, Vigenère, Rail Fence and Playfair on text
- One-Time Pad with a freshly drawn pad
- Toy asymmetric key generation and unit-by-unit encryption
- Hybrid encryption (XOR key byte wrapped with the public key)

Run with --auto to skip the presenter pauses.
"""

import logging
import sys

from classicvault.classical import caesar, vigenere, rail_fence, playfair, one_time_pad
from classicvault.asymmetric import generate_keys, encrypt_message, decrypt_message
from classicvault.hybrid import hybrid_scheme
from classicvault.errors import CipherError

AUTO = "--auto" in sys.argv


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if AUTO:
        return
    print(f"\n  [PAUSE] {message}")
    input()


def demo_symmetric():
    print_header("PART 1: CLASSICAL SYMMETRIC CIPHERS")

    print_step("1.1", "Caesar Cipher (shift 3)")
    ciphertext = caesar.encrypt("HELLO", 3)
    print(f"  Plaintext:  HELLO")
    print(f"  Encrypted:  {ciphertext}")
    print(f"  Decrypted:  {caesar.decrypt(ciphertext, 3)}")
    pause()

    print_step("1.2", "Vigenère Cipher (key 'KEY')")
    ciphertext = vigenere.encrypt("HELLO", "KEY")
    print(f"  Plaintext:  HELLO")
    print(f"  Encrypted:  {ciphertext}")
    print(f"  Decrypted:  {vigenere.decrypt(ciphertext, 'KEY')}")
    pause()

    print_step("1.3", "Rail Fence Cipher (3 rails)")
    message = "WEAREDISCOVEREDFLEEATONCE"
    ciphertext = rail_fence.encrypt(message, 3)
    print(f"  Plaintext:  {message}")
    print(f"  Encrypted:  {ciphertext}")
    print(f"  Decrypted:  {rail_fence.decrypt(ciphertext, 3)}")
    pause()

    print_step("1.4", "Playfair Cipher (key 'MONARCHY')")
    matrix = playfair.build_key_matrix("MONARCHY")
    print("  Key matrix:")
    for row in matrix.rows:
        print(f"    {' '.join(row)}")
    ciphertext = playfair.encrypt("INSTRUMENTS", matrix)
    print(f"  Plaintext:  INSTRUMENTS")
    print(f"  Prepared:   {playfair.prepare_text('INSTRUMENTS')}")
    print(f"  Encrypted:  {ciphertext}")
    print(f"  Decrypted:  {playfair.decrypt(ciphertext, matrix)}")
    pause()

    print_step("1.5", "One-Time Pad")
    ciphertext, key = one_time_pad.encrypt_with_random_key("ATTACK AT DAWN")
    print(f"  Plaintext:  ATTACK AT DAWN")
    print(f"  Pad (hex):  {key.hex()}")
    print(f"  Encrypted:  {ciphertext.hex()}")
    print(f"  Decrypted:  {one_time_pad.decrypt(ciphertext, key).decode()}")

    print_step("1.6", "One-Time Pad with a short key")
    try:
        one_time_pad.encrypt("AB", "XYZ")
    except CipherError as exc:
        print(f"  [X] Rejected: {exc}")
    pause()


def demo_asymmetric():
    print_header("PART 2: TOY ASYMMETRIC SCHEME")

    print_step("2.1", "Key generation from p = 61, q = 53")
    keypair = generate_keys(61, 53)
    print(f"  Public Key (n, e):  ({keypair.n}, {keypair.e})")
    print(f"  Private Key (n, d): ({keypair.n}, {keypair.d})")
    pause()

    print_step("2.2", "Encrypting a message byte by byte")
    message = "Hi RSA"
    units = encrypt_message(message, keypair)
    print(f"  Original Message:  {message}")
    print(f"  Encrypted (ints):  {' '.join(str(u) for u in units)}")
    print(f"  Decrypted Message: {decrypt_message(units, keypair).decode()}")

    print_step("2.3", "Key generation with p == q")
    try:
        generate_keys(61, 61)
    except CipherError as exc:
        print(f"  [X] Rejected: {exc}")
    pause()
    return keypair


def demo_hybrid(keypair):
    print_header("PART 3: HYBRID ENCRYPTION")

    message = "Meet me at noon"
    payload = hybrid_scheme.encrypt(message, keypair, key_byte=ord('K'))
    print(f"  Message:                 {message}")
    print(f"  Encrypted Symmetric Key: {payload.wrapped_key}")
    print(f"  Encrypted Data (hex):    {payload.ciphertext.hex()}")
    print(f"  Decrypted Data:          {hybrid_scheme.decrypt(payload, keypair).decode()}")


def main():
    logging.basicConfig(level=logging.INFO)

    print("\n" + "╔" + "═" * 68 + "╗")
    print("║" + "CLASSICVAULT - CLASSICAL & TOY ASYMMETRIC CIPHERS".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    demo_symmetric()
    keypair = demo_asymmetric()
    demo_hybrid(keypair)

    print("\n  Demo complete.\n")


if __name__ == "__main__":
    main()
