"""CBC-MAC over AES-256 and DSA signing and verification."""

from __future__ import annotations

from Crypto.Cipher import AES
from Crypto.Hash import SHA256
from Crypto.PublicKey import DSA
from Crypto.Signature import DSS

MAC_KEY_SIZE = 32
DSA_SIZES = (1024, 2048, 3072)


def cbc_mac(key: bytes, message: bytes) -> bytes:
    """CBC-MAC with a zero start value; the message must be whole 16-byte blocks."""
    if len(key) != MAC_KEY_SIZE:
        raise ValueError(f"key must be {MAC_KEY_SIZE} bytes, got {len(key)}")
    if len(message) % AES.block_size:
        raise ValueError(
            f"message length {len(message)} is not a multiple of {AES.block_size}"
        )
    if not message:
        return bytes(AES.block_size)
    cipher = AES.new(bytes(key), AES.MODE_CBC, iv=bytes(AES.block_size))
    return cipher.encrypt(bytes(message))[-AES.block_size:]


def generate_dsa_key(bits: int = 1024) -> DSA.DsaKey:
    """A fresh DSA key pair with a modulus of ``bits`` bits."""
    if bits not in DSA_SIZES:
        raise ValueError(f"DSA key size must be one of {DSA_SIZES}, got {bits}")
    return DSA.generate(bits)


def sign_dsa(key: DSA.DsaKey, message: bytes) -> bytes:
    """Sign the SHA-256 digest of ``message`` with a random nonce."""
    return DSS.new(key, "fips-186-3").sign(SHA256.new(bytes(message)))


def verify_dsa(key: DSA.DsaKey, message: bytes, signature: bytes) -> bool:
    """True if ``signature`` is a valid signature of ``message`` under ``key``."""
    verifier = DSS.new(key.public_key(), "fips-186-3")
    try:
        verifier.verify(SHA256.new(bytes(message)), bytes(signature))
    except ValueError:
        return False
    return True