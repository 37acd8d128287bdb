"""Hill cipher: matrix encryption and decryption modulo 26."""

from __future__ import annotations

import string
from collections.abc import Sequence

from cipherlab.affine import mod_inverse

MODULUS = 26
PADDING_LETTER = "X"

Matrix = Sequence[Sequence[int]]


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("key must be a non-empty square matrix")
    return size


def _to_numbers(text: str) -> list[int]:
    bad = next((ch for ch in text if ch not in string.ascii_letters), None)
    if bad is not None:
        raise ValueError(f"only letters can be processed, got {bad!r}")
    return [ord(ch.upper()) - ord("A") for ch in text]


def _apply(matrix: Matrix, numbers: list[int]) -> str:
    size = len(matrix)
    out = []
    for start in range(0, len(numbers), size):
        block = numbers[start:start + size]
        for row in matrix:
            value = sum(k * p for k, p in zip(row, block)) % MODULUS
            out.append(chr(value + ord("A")))
    return "".join(out)


def pad_text(text: str, size: int) -> str:
    """Extend ``text`` with X until its length is a multiple of ``size``."""
    if size <= 0:
        raise ValueError(f"block size must be positive, got {size}")
    return text + PADDING_LETTER * (-len(text) % size)


def hill_encrypt(text: str, key: Matrix) -> str:
    """Pad the letters of ``text`` and multiply each block by ``key`` modulo 26."""
    size = _check_square(key)
    return _apply(key, _to_numbers(pad_text(text, size)))


def _minor(matrix: Matrix, row: int, col: int) -> list[list[int]]:
    return [
        [value for c, value in enumerate(line) if c != col]
        for r, line in enumerate(matrix)
        if r != row
    ]


def _determinant(matrix: Matrix) -> int:
    if len(matrix) == 1:
        return matrix[0][0]
    return sum(
        (-1) ** col * value * _determinant(_minor(matrix, 0, col))
        for col, value in enumerate(matrix[0])
    )


def determinant_mod26(matrix: Matrix) -> int:
    """Determinant of a square matrix, reduced into 0..25."""
    _check_square(matrix)
    return _determinant(matrix) % MODULUS


def inverse_matrix_mod26(matrix: Matrix) -> list[list[int]]:
    """Inverse of ``matrix`` modulo 26; ValueError if the determinant is not invertible."""
    size = _check_square(matrix)
    inv_det = mod_inverse(determinant_mod26(matrix), MODULUS)
    if size == 1:
        return [[inv_det]]
    cofactors = [
        [(-1) ** (r + c) * _determinant(_minor(matrix, r, c)) for c in range(size)]
        for r in range(size)
    ]
    return [
        [(cofactors[c][r] * inv_det) % MODULUS for c in range(size)]
        for r in range(size)
    ]


def hill_decrypt(text: str, key: Matrix) -> str:
    """Multiply each block of ``text`` by the inverse of ``key`` modulo 26."""
    size = _check_square(key)
    numbers = _to_numbers(text)
    if len(numbers) % size:
        raise ValueError(f"ciphertext length must be a multiple of {size}")
    return _apply(inverse_matrix_mod26(key), numbers)