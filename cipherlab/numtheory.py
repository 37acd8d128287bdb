"""Number theory helpers: inverses, factoring toy RSA moduli and key exchange."""

from __future__ import annotations

import math
from collections.abc import Sequence


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def mod_inverse(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m`` in 0..m-1; ValueError if it does not exist."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"inverse of {a} modulo {m} does not exist")
    return x % m


def factor_semiprime(n: int) -> tuple[int, int]:
    """Split ``n`` at its smallest factor p, returning ``(p, n // p)``.

    A prime ``n`` comes back as ``(n, 1)``.
    """
    if n < 2:
        raise ValueError(f"cannot factor {n}")
    for p in range(2, math.isqrt(n) + 1):
        if n % p == 0:
            return p, n // p
    return n, 1


def _totient_of_pair(p: int, q: int) -> int:
    return (p - 1) * (q - 1)


def recover_private_exponent(e: int, n: int) -> int:
    """Factor the modulus ``n`` and return the RSA private exponent for ``e``."""
    p, q = factor_semiprime(n)
    return mod_inverse(e, _totient_of_pair(p, q))


def common_factor_attack(n: int, e: int, blocks: Sequence[int]) -> list[int] | None:
    """Decrypt ``blocks`` once two of them share a factor with ``n``.

    Returns None when fewer than two blocks have a common factor with the
    modulus; raises ValueError when no private exponent follows from it.
    """
    sharing = [math.gcd(block, n) for block in blocks if math.gcd(block, n) != 1]
    if len(sharing) < 2:
        return None
    p = sharing[0]
    q = n // p
    phi = _totient_of_pair(p, q)
    if phi <= 1:
        raise ValueError("modular inverse could not be found")
    d = mod_inverse(e, phi)
    return [pow(block, d, n) for block in blocks]


def diffie_hellman(
    prime: int, base: int, alice_private: int, bob_private: int
) -> tuple[int, int, int, int]:
    """Run an exchange; returns both public keys, then both computed shared secrets."""
    if prime <= 1:
        raise ValueError(f"prime must be greater than 1, got {prime}")
    if alice_private < 0 or bob_private < 0:
        raise ValueError("private keys must not be negative")
    alice_public = pow(base, alice_private, prime)
    bob_public = pow(base, bob_private, prime)
    alice_shared = pow(bob_public, alice_private, prime)
    bob_shared = pow(alice_public, bob_private, prime)
    return alice_public, bob_public, alice_shared, bob_shared