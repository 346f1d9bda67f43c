"""
ClassicVault - Main Entry Point
An educational classical cryptography toolkit.
"""

import logging


def main():
    """Main entry point for ClassicVault."""
    logging.basicConfig(level=logging.INFO)

    print("=" * 50)
    print("Welcome to ClassicVault")
    print("=" * 50)
    print("\nAvailable modules:")
    print("  - Core Crypto (modular arithmetic, codecs)")
    print("  - Classical (Caesar, Vigenère, Rail Fence, Playfair, One-Time Pad)")
    print("  - Asymmetric (toy RSA-style key pairs)")
    print("  - Hybrid (XOR key byte wrapped with the asymmetric scheme)")
    print("\nRun live_demo.py for a walkthrough.")
    print("\n")

if __name__ == "__main__":
    main()
