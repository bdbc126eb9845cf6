"""
Module 02 - BabyJubJub Curve
Twisted Edwards curve a*x^2 + y^2 = 1 + d*x^2*y^2 over the BN254 scalar field.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Curve constants (generator, Base8, subgroup order)
- Affine point addition and scalar multiplication
- Curve membership checks
- Circomlib point packing (32 bytes, y little-endian with x sign in the top bit)

Points are (x, y) tuples of ints. The identity is (0, 1).
"""
from __future__ import annotations

from typing import Optional

from pod.crypto.field import (
    BABY_JUB_HALF,
    BABY_JUB_PRIME,
    field_inverse,
    field_sqrt,
    int_to_le_bytes,
    le_bytes_to_int,
)


Point = tuple[int, int]

A: int = 168700
D: int = 168696

# Order of the prime subgroup generated by Base8
SUBGROUP_ORDER: int = (
    2736030358979909402780800718157159386076813972158567259200215660948447373041
)

GENERATOR: Point = (
    995203441582195749578291179787384436505546430278305826713579947235728471134,
    5472060717959818805561601436314318772137091100104008585924551046643952123905,
)

BASE8: Point = (
    5299619240641551281634865583518297030282874472190772894086521144482721001553,
    16950150798460657717958625567821834550301663161624707787222815936182638968203,
)

IDENTITY: Point = (0, 1)

PACKED_POINT_SIZE = 32


def add_point(p1: Point, p2: Point) -> Point:
    """Add two points with the complete twisted Edwards addition law."""
    p = BABY_JUB_PRIME
    x1, y1 = p1
    x2, y2 = p2
    dxy = D * x1 % p * x2 % p * y1 % p * y2 % p
    x3 = (x1 * y2 + y1 * x2) % p * field_inverse(1 + dxy) % p
    y3 = (y1 * y2 - A * x1 * x2) % p * field_inverse(1 - dxy) % p
    return x3, y3


def mul_point_escalar(base: Point, scalar: int) -> Point:
    """Multiply a point by a non-negative scalar (double-and-add)."""
    if scalar < 0:
        raise ValueError("Scalar must be non-negative")
    result = IDENTITY
    addend = base
    while scalar:
        if scalar & 1:
            result = add_point(result, addend)
        addend = add_point(addend, addend)
        scalar >>= 1
    return result


def in_curve(point: Point) -> bool:
    """Check that a point's coordinates are field elements satisfying the curve equation."""
    p = BABY_JUB_PRIME
    x, y = point
    if not (0 <= x < p and 0 <= y < p):
        return False
    x2 = x * x % p
    y2 = y * y % p
    return (A * x2 + y2) % p == (1 + D * x2 % p * y2) % p


def in_subgroup(point: Point) -> bool:
    """Check that a point is on the curve and in the Base8 subgroup."""
    return in_curve(point) and mul_point_escalar(point, SUBGROUP_ORDER) == IDENTITY


def pack_point(point: Point) -> bytes:
    """
    Pack a point into 32 bytes.

    y is written little-endian; the top bit of the last byte is set when
    x is in the upper half of the field.
    """
    x, y = point
    packed = bytearray(int_to_le_bytes(y, PACKED_POINT_SIZE))
    if x > BABY_JUB_HALF:
        packed[31] |= 0x80
    return bytes(packed)


def unpack_point(packed: bytes) -> Optional[Point]:
    """
    Unpack 32 bytes into a curve point.

    Returns:
        The point, or None when y is not a field element or no x exists
    """
    if len(packed) != PACKED_POINT_SIZE:
        return None
    buf = bytearray(packed)
    negative = bool(buf[31] & 0x80)
    buf[31] &= 0x7F

    p = BABY_JUB_PRIME
    y = le_bytes_to_int(bytes(buf))
    if y >= p:
        return None

    y2 = y * y % p
    denominator = (A - D * y2) % p
    if denominator == 0:
        return None
    x2 = (1 - y2) % p * field_inverse(denominator) % p
    x = field_sqrt(x2)
    if x is None:
        return None
    if negative:
        x = (p - x) % p
    return x, y


__all__ = [
    "Point",
    "A",
    "D",
    "SUBGROUP_ORDER",
    "GENERATOR",
    "BASE8",
    "IDENTITY",
    "PACKED_POINT_SIZE",
    "add_point",
    "mul_point_escalar",
    "in_curve",
    "in_subgroup",
    "pack_point",
    "unpack_point",
]
