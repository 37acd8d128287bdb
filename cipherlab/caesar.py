"""Shift ciphers and recovery of the shift from letter frequencies."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

ALPHABET_SIZE = 26
MONOALPHABETIC_SHIFT = 3

ENGLISH_FREQUENCIES: tuple[float, ...] = (
    0.0817, 0.0149, 0.0278, 0.0425, 0.1270, 0.0223, 0.0202, 0.0609,
    0.0697, 0.0015, 0.0077, 0.0403, 0.0241, 0.0675, 0.0751, 0.0193,
    0.0010, 0.0599, 0.0633, 0.0906, 0.0276, 0.0098, 0.0236, 0.0015,
    0.0197, 0.0007,
)


@dataclass(frozen=True)
class ShiftCandidate:
    """One trial decryption: the shift used, its result and its English score."""

    shift: int
    plaintext: str
    score: float


def _shift_letter(ch: str, shift: int) -> str:
    if ch in string.ascii_uppercase:
        base = ord("A")
    elif ch in string.ascii_lowercase:
        base = ord("a")
    else:
        return ch
    return chr((ord(ch) - base + shift) % ALPHABET_SIZE + base)


def _require_lowercase(text: str) -> None:
    bad = next((ch for ch in text if ch not in string.ascii_lowercase), None)
    if bad is not None:
        raise ValueError(f"only lowercase letters can be encrypted, got {bad!r}")


def caesar_encrypt(text: str, key: int) -> str:
    """Shift every lowercase letter of ``text`` forward by ``key``."""
    _require_lowercase(text)
    return "".join(_shift_letter(ch, key) for ch in text)


def caesar_decrypt(text: str, shift: int) -> str:
    """Shift letters back by ``shift``, keeping case and leaving other characters."""
    return "".join(_shift_letter(ch, -shift) for ch in text)


def monoalphabetic_encrypt(text: str) -> str:
    """Substitute each distinct lowercase letter by the letter three places on."""
    _require_lowercase(text)
    table = {ch: _shift_letter(ch, MONOALPHABETIC_SHIFT) for ch in set(text)}
    return "".join(table[ch] for ch in text)


def _letter_counts(text: str) -> list[int]:
    counter = Counter(ch.lower() for ch in text if ch in string.ascii_letters)
    return [counter[letter] for letter in string.ascii_lowercase]


def letter_frequencies(text: str) -> list[float]:
    """Relative frequency of each letter a..z; all zeros when there are no letters."""
    counts = _letter_counts(text)
    total = sum(counts)
    if not total:
        return [0.0] * ALPHABET_SIZE
    return [count / total for count in counts]


def english_score(frequencies: Sequence[float]) -> float:
    """Dot product of the given letter frequencies with English letter frequencies."""
    if len(frequencies) != ALPHABET_SIZE:
        raise ValueError(f"expected {ALPHABET_SIZE} frequencies, got {len(frequencies)}")
    return sum(f * e for f, e in zip(frequencies, ENGLISH_FREQUENCIES))


def guess_shift(text: str) -> int:
    """Shift guessed from the most frequent letter of ``text``."""
    counts = _letter_counts(text)
    most_common = max(range(ALPHABET_SIZE), key=counts.__getitem__)
    return (ALPHABET_SIZE - most_common) % ALPHABET_SIZE


def repeated_decryptions(text: str, count: int = 10) -> list[str]:
    """Apply the guessed shift again and again, collecting each successive result."""
    shift = guess_shift(text)
    results = []
    current = text
    for _ in range(count):
        current = caesar_decrypt(current, shift)
        results.append(current)
    return results


def rank_shifts(ciphertext: str) -> list[ShiftCandidate]:
    """Decrypt with every shift 0..25 and score each result, in shift order."""
    candidates = []
    for shift in range(ALPHABET_SIZE):
        plaintext = caesar_decrypt(ciphertext, shift)
        score = english_score(letter_frequencies(plaintext))
        candidates.append(ShiftCandidate(shift, plaintext, score))
    return candidates