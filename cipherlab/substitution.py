"""Monoalphabetic substitution by fixed mapping and by letter-frequency ranking."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence

ALPHABET_SIZE = 26
DEFAULT_MAPPING = "etaoinshrdlucmfwypvbgkjqxz"
ENGLISH_ORDER = "ETAOINSHRDLCUMWFGYPBVKJXQZ"


def substitute(ciphertext: str, mapping: str = DEFAULT_MAPPING) -> str:
    """Replace each letter by the mapping entry for its alphabet position."""
    if len(mapping) != ALPHABET_SIZE:
        raise ValueError(f"mapping must have {ALPHABET_SIZE} entries, got {len(mapping)}")
    return "".join(
        mapping[ord(ch.lower()) - ord("a")] if ch in string.ascii_letters else ch
        for ch in ciphertext
    )


def letter_counts(text: str) -> list[int]:
    """Occurrences of each letter A..Z, ignoring case."""
    counter = Counter(ch.upper() for ch in text if ch in string.ascii_letters)
    return [counter[letter] for letter in string.ascii_uppercase]


def rank_letters(counts: Sequence[int]) -> str:
    """Letters ordered by descending count; ties keep alphabetical order."""
    if len(counts) != ALPHABET_SIZE:
        raise ValueError(f"expected {ALPHABET_SIZE} counts, got {len(counts)}")
    order = sorted(range(ALPHABET_SIZE), key=lambda i: -counts[i])
    return "".join(string.ascii_uppercase[i] for i in order)


def frequency_substitute(ciphertext: str, ranked_cipher: str, ranked_english: str) -> str:
    """Map the n-th ranked cipher letter to the n-th ranked English letter, keeping case."""
    positions = {letter: index for index, letter in enumerate(ranked_cipher)}
    out = []
    for ch in ciphertext:
        if ch not in string.ascii_letters:
            out.append(ch)
            continue
        index = positions.get(ch.upper())
        if index is None:
            raise ValueError(f"letter {ch!r} is missing from the cipher ranking")
        replacement = ranked_english[index]
        out.append(replacement if ch.isupper() else replacement.lower())
    return "".join(out)


def top_plaintexts(ciphertext: str, count: int = 10) -> list[str]:
    """Candidate plaintexts, rotating the English ranking one step for each."""
    ranked = rank_letters(letter_counts(ciphertext))
    return [
        frequency_substitute(ciphertext, ranked, ENGLISH_ORDER[i:] + ENGLISH_ORDER[:i])
        for i in range(min(count, ALPHABET_SIZE))
    ]