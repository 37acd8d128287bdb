"""Playfair digraph cipher over a 5x5 letter square."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field

SIZE = 5
PADDING_LETTER = "X"
DEFAULT_ROWS: tuple[str, ...] = ("MFHIK", "UNOPQ", "ZVWXY", "ELARG", "DSTBC")
_SQUARE_ALPHABET = string.ascii_uppercase.replace("J", "")


def _letters(text: str) -> str:
    """Upper-case letters of ``text`` with J folded into I; other characters dropped."""
    return "".join(
        "I" if ch.upper() == "J" else ch.upper()
        for ch in text
        if ch in string.ascii_letters
    )


@dataclass(frozen=True)
class PlayfairMatrix:
    """A 5x5 Playfair key square, given as five rows of five letters."""

    rows: tuple[str, ...] = DEFAULT_ROWS
    _positions: dict[str, tuple[int, int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        rows = tuple(row.upper() for row in self.rows)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"a Playfair square needs {SIZE} rows of {SIZE} letters")
        positions = {
            ch: (r, c) for r, row in enumerate(rows) for c, ch in enumerate(row)
        }
        if len(positions) != SIZE * SIZE:
            raise ValueError("letters of a Playfair square must all be distinct")
        if any(ch not in string.ascii_uppercase for ch in positions):
            raise ValueError("a Playfair square may hold letters only")
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "_positions", positions)

    @classmethod
    def from_key(cls, key: str) -> PlayfairMatrix:
        """Square filled with the key's distinct letters, then the rest of A..Z without J."""
        seen: dict[str, None] = {}
        for ch in _letters(key) + _SQUARE_ALPHABET:
            seen.setdefault(ch, None)
        letters = "".join(seen)
        return cls(tuple(letters[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)))

    def position(self, ch: str) -> tuple[int, int]:
        """Row and column of ``ch`` in the square."""
        try:
            return self._positions[ch.upper()]
        except KeyError:
            raise ValueError(f"letter {ch!r} is not in the Playfair square") from None

    def _transform(self, text: str, step: int) -> str:
        out = []
        for first, second in zip(text[0::2], text[1::2]):
            row1, col1 = self.position(first)
            row2, col2 = self.position(second)
            if row1 == row2:
                out.append(self.rows[row1][(col1 + step) % SIZE])
                out.append(self.rows[row2][(col2 + step) % SIZE])
            elif col1 == col2:
                out.append(self.rows[(row1 + step) % SIZE][col1])
                out.append(self.rows[(row2 + step) % SIZE][col2])
            else:
                out.append(self.rows[row1][col2])
                out.append(self.rows[row2][col1])
        return "".join(out)

    def encrypt(self, text: str) -> str:
        """Encrypt the letters of ``text`` pair by pair, padding an odd length with X."""
        letters = _letters(text)
        if len(letters) % 2:
            letters += PADDING_LETTER
        return self._transform(letters, 1)

    def decrypt(self, text: str) -> str:
        """Decrypt the letters of ``text`` pair by pair; non-letters are ignored."""
        letters = _letters(text)
        if len(letters) % 2:
            raise ValueError("Playfair ciphertext must hold an even number of letters")
        return self._transform(letters, -1)


def count_keys() -> tuple[int, int]:
    """Number of 5x5 squares (25!) and half of it as a rough count of distinct keys."""
    total = math.factorial(SIZE * SIZE)
    return total, total // 2