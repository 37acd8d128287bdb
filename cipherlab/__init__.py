"""Classical ciphers, toy block-cipher constructions, modes and number-theoretic schemes for learning cryptography."""

__version__ = "0.1.0"