"""CMAC subkey derivation by doubling in GF(2^64) or GF(2^128)."""

from __future__ import annotations

REDUCTION_CONSTANTS = {64: 0x1B, 128: 0x87}


def _double(block: bytes, constant: int) -> bytes:
    width = len(block) * 8
    value = int.from_bytes(block, "big")
    carry = value >> (width - 1)
    value = (value << 1) & ((1 << width) - 1)
    if carry:
        value ^= constant
    return value.to_bytes(len(block), "big")


def derive_subkeys(key: bytes, block_size: int = 128) -> tuple[bytes, bytes]:
    """Two subkeys: ``key`` doubled once and twice, for a 64- or 128-bit block."""
    try:
        constant = REDUCTION_CONSTANTS[block_size]
    except KeyError:
        raise ValueError(f"block size must be 64 or 128 bits, got {block_size}") from None
    if len(key) != block_size // 8:
        raise ValueError(f"key must be {block_size // 8} bytes, got {len(key)}")
    first = _double(bytes(key), constant)
    return first, _double(first, constant)