"""Simplified DES building blocks: bit permutations, a toy round and key schedule."""

from __future__ import annotations

from collections.abc import Sequence

WORD_BITS = 64
MASK64 = (1 << WORD_BITS) - 1
HALF_KEY_BITS = 28
SUBKEY_COUNT = 16

IP: tuple[int, ...] = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV: tuple[int, ...] = (4, 1, 3, 5, 7, 2, 8, 6)
PC1: tuple[int, ...] = (2, 4, 1, 6, 3, 9, 0, 8, 5, 7)
PC2: tuple[int, ...] = (5, 2, 6, 3, 7, 4, 9, 8)


def permute(value: int, table: Sequence[int], size: int) -> int:
    """Gather bits of a 64-bit ``value`` into a ``size``-bit result.

    Table entries count bit positions from 1 at the most significant bit;
    entry ``i`` lands at bit ``size - 1 - i`` of the result. Position 0
    selects nothing and yields a zero bit.
    """
    if not 0 <= size <= WORD_BITS:
        raise ValueError(f"size must be between 0 and {WORD_BITS}, got {size}")
    if len(table) > size:
        raise ValueError(f"table has {len(table)} entries but the result has {size} bits")
    value &= MASK64
    result = 0
    for index, position in enumerate(table):
        if not 0 <= position <= WORD_BITS:
            raise ValueError(f"bit position {position} is outside 0..{WORD_BITS}")
        bit = (value >> (WORD_BITS - position)) & 1
        result |= bit << (size - 1 - index)
    return result


def toy_des_decrypt(ciphertext: int, key: int) -> int:
    """Initial permutation, XOR with the key, then the inverse permutation."""
    mixed = permute(ciphertext, IP, WORD_BITS) ^ (key & MASK64)
    return permute(mixed, IP_INV, WORD_BITS)


def _rotate(key: int, amount: int) -> int:
    return ((key << amount) | (key >> (HALF_KEY_BITS - amount))) & MASK64


def generate_subkeys(key: int) -> list[int]:
    """Sixteen 48-bit round keys from the toy PC-1/PC-2 tables."""
    reduced = permute(key, PC1, 56)
    return [permute(_rotate(reduced, i), PC2, 48) for i in range(SUBKEY_COUNT)]


def xor_des_encrypt(plaintext: int, key: int) -> int:
    """Stand-in for a DES block encryption: the 64-bit XOR of plaintext and key."""
    return (plaintext ^ key) & MASK64