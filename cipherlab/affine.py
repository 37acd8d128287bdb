"""Affine cipher: encryption, decryption and exhaustive key search."""

from __future__ import annotations

import math
import string
from collections.abc import Iterator

ALPHABET_SIZE = 26
VALID_MULTIPLIERS = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)


def mod_inverse(a: int, m: int) -> int:
    """Smallest positive x with a*x = 1 (mod m); ValueError if none exists."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    raise ValueError(f"no modular inverse for {a} modulo {m}")


def _require_coprime(a: int) -> None:
    if math.gcd(a, ALPHABET_SIZE) != 1:
        raise ValueError(f"a = {a} is not coprime with {ALPHABET_SIZE}")


def affine_encrypt(text: str, a: int, b: int) -> str:
    """Encrypt letters as (a*p + b) mod 26 in upper case; other characters pass through."""
    _require_coprime(a)
    out = []
    for ch in text:
        if ch in string.ascii_letters:
            p = ord(ch.upper()) - ord("A")
            out.append(chr((a * p + b) % ALPHABET_SIZE + ord("A")))
        else:
            out.append(ch)
    return "".join(out)


def affine_decrypt(text: str, a: int, b: int) -> str:
    """Decrypt letters as a^-1 * (c - b) mod 26 in upper case; other characters pass through."""
    a_inv = mod_inverse(a, ALPHABET_SIZE)
    out = []
    for ch in text:
        if ch in string.ascii_letters:
            c = ord(ch.upper()) - ord("A")
            out.append(chr((a_inv * (c - b)) % ALPHABET_SIZE + ord("A")))
        else:
            out.append(ch)
    return "".join(out)


def brute_force(ciphertext: str) -> Iterator[tuple[int, int, str]]:
    """Yield (a, b, plaintext) for every valid multiplier and every offset."""
    for a in VALID_MULTIPLIERS:
        for b in range(ALPHABET_SIZE):
            yield a, b, affine_decrypt(ciphertext, a, b)