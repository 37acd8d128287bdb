"""Textbook RSA applied letter by letter to upper-case messages."""

from __future__ import annotations

import string
from collections.abc import Iterable

DEFAULT_EXPONENT = 65537
DEFAULT_MODULUS = 9973 * 9857


def encrypt_letters(
    message: str, e: int = DEFAULT_EXPONENT, n: int = DEFAULT_MODULUS
) -> list[int]:
    """Encrypt each letter A..Z as its index 0..25 raised to ``e`` modulo ``n``."""
    if n <= 1:
        raise ValueError(f"modulus must be greater than 1, got {n}")
    bad = next((ch for ch in message if ch not in string.ascii_uppercase), None)
    if bad is not None:
        raise ValueError(f"only upper-case letters can be encrypted, got {bad!r}")
    return [pow(ord(ch) - ord("A"), e, n) for ch in message]


def decrypt_letters(values: Iterable[int], d: int, n: int = DEFAULT_MODULUS) -> str:
    """Decrypt each value with ``d`` and turn the index 0..25 back into a letter."""
    if n <= 1:
        raise ValueError(f"modulus must be greater than 1, got {n}")
    letters = []
    for value in values:
        index = pow(value, d, n)
        if not 0 <= index < len(string.ascii_uppercase):
            raise ValueError(f"{value} does not decrypt to a letter")
        letters.append(string.ascii_uppercase[index])
    return "".join(letters)