"""Block cipher modes over an identity block function, and a toy counter mode."""

from __future__ import annotations

BLOCK_SIZE = 16
SEGMENT_SIZE = 8
PADDING_MARKER = 0x80
ROUND_KEY_1 = 0xF3
ROUND_KEY_2 = 0xE3


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _require_multiple(data: bytes, size: int) -> None:
    if len(data) % size:
        raise ValueError(f"data length {len(data)} is not a multiple of {size}")


def _require_iv(iv: bytes) -> None:
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")


def flip_bit(data: bytes, index: int) -> bytes:
    """Copy of ``data`` with the lowest bit of byte ``index`` inverted."""
    buffer = bytearray(data)
    if not -len(buffer) <= index < len(buffer):
        raise IndexError(f"byte index {index} out of range for {len(buffer)} bytes")
    buffer[index] ^= 0x01
    return bytes(buffer)


def pad_block(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Zero-fill ``data`` to a whole number of blocks, ending the last block with 0x80."""
    if block_size <= 0:
        raise ValueError(f"block size must be positive, got {block_size}")
    padded_length = (len(data) // block_size + 1) * block_size
    fill = padded_length - len(data) - 1
    return bytes(data) + bytes(fill) + bytes([PADDING_MARKER])


def ecb_encrypt(data: bytes) -> bytes:
    """ECB over the identity block function: blocks are copied unchanged."""
    _require_multiple(data, BLOCK_SIZE)
    return bytes(data)


def cbc_encrypt(data: bytes, iv: bytes) -> bytes:
    """CBC chaining: each block is XORed with the previous output block."""
    _require_multiple(data, BLOCK_SIZE)
    _require_iv(iv)
    out = bytearray()
    previous = bytes(iv)
    for start in range(0, len(data), BLOCK_SIZE):
        previous = _xor(data[start:start + BLOCK_SIZE], previous)
        out += previous
    return bytes(out)


def cfb_encrypt(data: bytes, iv: bytes) -> bytes:
    """CFB with 8-byte segments fed back into a 16-byte shift register."""
    _require_multiple(data, SEGMENT_SIZE)
    _require_iv(iv)
    out = bytearray()
    register = bytes(iv)
    for start in range(0, len(data), SEGMENT_SIZE):
        segment = _xor(data[start:start + SEGMENT_SIZE], register[:SEGMENT_SIZE])
        out += segment
        register = register[SEGMENT_SIZE:] + segment
    return bytes(out)


def _round_keys(key: int) -> tuple[int, int]:
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must be a byte, got {key}")
    return ROUND_KEY_1, ROUND_KEY_2


def ctr_encrypt(data: bytes, key: int) -> bytes:
    """Counter mode with a one-byte counter from 0; applying it twice decrypts.

    The simplified block function XORs the counter with the first round key,
    which in this scheme is fixed rather than derived from ``key``.
    """
    first, _ = _round_keys(key)
    return bytes(
        byte ^ ((counter & 0xFF) ^ first) for counter, byte in enumerate(data)
    )