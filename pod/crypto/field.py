"""
Module 02 - Field Arithmetic
Prime-field helpers over the BN254 scalar field, which is the base field of
the BabyJubJub curve and the input domain of Poseidon.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- The field modulus and its derived constants
- Inversion and square roots (Tonelli-Shanks)
- Little-endian byte conversions used by point and signature packing

All functions take and return plain Python ints in standard (non-Montgomery)
form, reduced into [0, p).
"""
from __future__ import annotations


# BN254 scalar field order, shared by Poseidon and the BabyJubJub base field.
BABY_JUB_PRIME: int = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)

BABY_JUB_NEGATIVE_ONE: int = BABY_JUB_PRIME - 1

# Values above this are "negative" when packing points.
BABY_JUB_HALF: int = BABY_JUB_PRIME >> 1


def _two_adic_split(n: int) -> tuple[int, int]:
    s = 0
    while n % 2 == 0:
        n //= 2
        s += 1
    return s, n


_TWO_ADICITY, _ODD_FACTOR = _two_adic_split(BABY_JUB_PRIME - 1)


def _find_non_residue() -> int:
    z = 2
    while pow(z, (BABY_JUB_PRIME - 1) // 2, BABY_JUB_PRIME) != BABY_JUB_NEGATIVE_ONE:
        z += 1
    return z


_NON_RESIDUE = _find_non_residue()


def field_element(n: int) -> int:
    """Reduce an arbitrary integer (including negatives) into [0, p)."""
    return n % BABY_JUB_PRIME


def field_inverse(n: int) -> int:
    """
    Multiplicative inverse modulo p.

    Raises:
        ZeroDivisionError: If n is congruent to zero
    """
    n %= BABY_JUB_PRIME
    if n == 0:
        raise ZeroDivisionError("Zero has no inverse in the field")
    return pow(n, -1, BABY_JUB_PRIME)


def is_quadratic_residue(n: int) -> bool:
    """Euler's criterion. Zero counts as a residue."""
    n %= BABY_JUB_PRIME
    if n == 0:
        return True
    return pow(n, (BABY_JUB_PRIME - 1) // 2, BABY_JUB_PRIME) == 1


def field_sqrt(n: int) -> int | None:
    """
    Square root modulo p.

    Returns the root in [0, (p-1)/2], or None when n is not a square.
    The caller negates it (p - r) to select the other root.
    """
    n %= BABY_JUB_PRIME
    if n == 0:
        return 0
    if not is_quadratic_residue(n):
        return None

    p = BABY_JUB_PRIME
    m = _TWO_ADICITY
    c = pow(_NON_RESIDUE, _ODD_FACTOR, p)
    t = pow(n, _ODD_FACTOR, p)
    r = pow(n, (_ODD_FACTOR + 1) // 2, p)

    while t != 1:
        # Least i with t^(2^i) == 1
        i = 1
        t2 = t * t % p
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        r = r * b % p

    return r if r <= BABY_JUB_HALF else p - r


def le_bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "little")


def int_to_le_bytes(n: int, length: int = 32) -> bytes:
    """
    Encode a non-negative integer as fixed-length little-endian bytes.

    Raises:
        OverflowError: If n does not fit in length bytes
    """
    return n.to_bytes(length, "little")


__all__ = [
    "BABY_JUB_PRIME",
    "BABY_JUB_NEGATIVE_ONE",
    "BABY_JUB_HALF",
    "field_element",
    "field_inverse",
    "is_quadratic_residue",
    "field_sqrt",
    "le_bytes_to_int",
    "int_to_le_bytes",
]
