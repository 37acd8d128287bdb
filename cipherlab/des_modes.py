"""DES in ECB, CBC and 64-bit CFB modes, and three-key triple DES in CBC mode."""

from __future__ import annotations

from collections.abc import Sequence

from Crypto.Cipher import DES, DES3

BLOCK_SIZE = 8
KEY_SIZE = 8


def _require_blocks(data: bytes) -> None:
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"data length {len(data)} is not a multiple of {BLOCK_SIZE}")


def _require_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"a DES key must be {KEY_SIZE} bytes, got {len(key)}")


def _require_iv(iv: bytes) -> None:
    if len(iv) != BLOCK_SIZE:
        raise ValueError(f"IV must be {BLOCK_SIZE} bytes, got {len(iv)}")


def pad_data(data: bytes) -> bytes:
    """Append zeros and a final byte holding the pad length (always 1..8)."""
    padding = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return bytes(data) + bytes(padding - 1) + bytes([padding])


def unpad_data(data: bytes) -> bytes:
    """Remove the padding added by :func:`pad_data`."""
    if not data:
        raise ValueError("cannot unpad empty data")
    padding = data[-1]
    if not 1 <= padding <= min(BLOCK_SIZE, len(data)):
        raise ValueError(f"invalid padding length {padding}")
    return bytes(data[:-padding])


def _des(key: bytes, mode: int, **kwargs):
    _require_key(key)
    return DES.new(bytes(key), mode, **kwargs)


def ecb_encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt each 8-byte block independently."""
    _require_blocks(data)
    return _des(key, DES.MODE_ECB).encrypt(bytes(data))


def ecb_decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt each 8-byte block independently."""
    _require_blocks(data)
    return _des(key, DES.MODE_ECB).decrypt(bytes(data))


def cbc_encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt with each block XORed into the previous ciphertext block first."""
    _require_blocks(data)
    _require_iv(iv)
    return _des(key, DES.MODE_CBC, iv=bytes(iv)).encrypt(bytes(data))


def cbc_decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Undo :func:`cbc_encrypt`."""
    _require_blocks(data)
    _require_iv(iv)
    return _des(key, DES.MODE_CBC, iv=bytes(iv)).decrypt(bytes(data))


def cfb_encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Cipher feedback with whole 64-bit blocks fed back."""
    _require_blocks(data)
    _require_iv(iv)
    cipher = _des(key, DES.MODE_CFB, iv=bytes(iv), segment_size=BLOCK_SIZE * 8)
    return cipher.encrypt(bytes(data))


def cfb_decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Undo :func:`cfb_encrypt`."""
    _require_blocks(data)
    _require_iv(iv)
    cipher = _des(key, DES.MODE_CFB, iv=bytes(iv), segment_size=BLOCK_SIZE * 8)
    return cipher.decrypt(bytes(data))


def _triple_des(keys: Sequence[bytes], iv: bytes):
    if len(keys) != 3:
        raise ValueError(f"triple DES needs three keys, got {len(keys)}")
    for key in keys:
        _require_key(key)
    _require_iv(iv)
    return DES3.new(b"".join(bytes(key) for key in keys), DES3.MODE_CBC, iv=bytes(iv))


def triple_des_cbc_encrypt(data: bytes, keys: Sequence[bytes], iv: bytes) -> bytes:
    """Encrypt-decrypt-encrypt with three keys in CBC mode; a short last block is zero-filled."""
    padded = bytes(data) + bytes(-len(data) % BLOCK_SIZE)
    return _triple_des(keys, iv).encrypt(padded)


def triple_des_cbc_decrypt(data: bytes, keys: Sequence[bytes], iv: bytes) -> bytes:
    """Undo :func:`triple_des_cbc_encrypt`; the zero fill is left in place."""
    _require_blocks(data)
    return _triple_des(keys, iv).decrypt(bytes(data))