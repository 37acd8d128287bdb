"""Vigenère cipher with a keyword and with an explicit list of shifts."""

from __future__ import annotations

import random
import string
from collections.abc import Sequence

ALPHABET_SIZE = 26


def _shift_letter(ch: str, shift: int) -> str:
    if ch in string.ascii_uppercase:
        base = ord("A")
    elif ch in string.ascii_lowercase:
        base = ord("a")
    else:
        return ch
    return chr((ord(ch) - base + shift) % ALPHABET_SIZE + base)


def vigenere_encrypt(plaintext: str, key: str) -> str:
    """Encrypt with a keyword; the key advances only on letters, case is kept."""
    if not key:
        raise ValueError("key must not be empty")
    if any(ch not in string.ascii_letters for ch in key):
        raise ValueError("key must consist of letters only")
    shifts = [ord(ch.lower()) - ord("a") for ch in key]
    out = []
    position = 0
    for ch in plaintext:
        if ch in string.ascii_letters:
            out.append(_shift_letter(ch, shifts[position % len(shifts)]))
            position += 1
        else:
            out.append(ch)
    return "".join(out)


def _check_length(text: str, shifts: Sequence[int]) -> None:
    if len(shifts) < len(text):
        raise ValueError(
            f"need at least {len(text)} shifts, got {len(shifts)}"
        )


def encrypt_with_shifts(text: str, shifts: Sequence[int]) -> str:
    """Shift the letter at each position forward by the shift at that position."""
    _check_length(text, shifts)
    return "".join(_shift_letter(ch, shift) for ch, shift in zip(text, shifts))


def decrypt_with_shifts(text: str, shifts: Sequence[int]) -> str:
    """Undo :func:`encrypt_with_shifts`."""
    _check_length(text, shifts)
    return "".join(_shift_letter(ch, -shift) for ch, shift in zip(text, shifts))


def random_key_stream(length: int, rng: random.Random | None = None) -> list[int]:
    """A list of ``length`` random shifts in 0..25."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(ALPHABET_SIZE) for _ in range(length)]