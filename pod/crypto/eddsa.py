"""
Module 02 - EdDSA-Poseidon
EdDSA signatures over BabyJubJub with a Poseidon challenge hash.

Owner: Protocol/Crypto Engineer
Module ID: M02

Compatible with circomlibjs signPoseidon/verifyPoseidon and the zk-kit
eddsa-poseidon package:

    h  = BLAKE-512(private_key)
    s  = prune(h[0:32])                       (little-endian scalar)
    A  = Base8 * (s >> 3)
    r  = BLAKE-512(h[32:64] || le32(msg)) mod l
    R8 = Base8 * r
    hm = Poseidon(R8.x, R8.y, A.x, A.y, msg)
    S  = (r + hm * s) mod l

Verification checks Base8 * S == R8 + A * (8 * hm).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pod.crypto.babyjub import (
    BASE8,
    PACKED_POINT_SIZE,
    SUBGROUP_ORDER,
    Point,
    add_point,
    in_curve,
    mul_point_escalar,
    pack_point,
    unpack_point,
)
from pod.crypto.blake512 import blake512
from pod.crypto.context import CryptoContext
from pod.crypto.field import BABY_JUB_PRIME, int_to_le_bytes, le_bytes_to_int
from pod.crypto.poseidon import poseidon_hash


PRIVATE_KEY_SIZE = 32
PACKED_SIGNATURE_SIZE = 64


@dataclass(frozen=True)
class Signature:
    """An EdDSA signature: the nonce point R8 and the scalar S."""

    r8: Point
    s: int

    def to_dict(self) -> dict:
        """Render in the circomlibjs shape, with decimal-string coordinates."""
        return {
            "R8": [str(self.r8[0]), str(self.r8[1])],
            "S": str(self.s),
        }


def _check_private_key(private_key: bytes) -> bytes:
    key = bytes(private_key)
    if len(key) != PRIVATE_KEY_SIZE:
        raise ValueError(
            f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(key)}"
        )
    return key


def _prune_buffer(buf: bytes) -> bytes:
    pruned = bytearray(buf[:32])
    pruned[0] &= 0xF8
    pruned[31] &= 0x7F
    pruned[31] |= 0x40
    return bytes(pruned)


def derive_secret_scalar(private_key: bytes) -> int:
    """Derive the pruned secret scalar s from a 32-byte private key."""
    digest = blake512(_check_private_key(private_key))
    return le_bytes_to_int(_prune_buffer(digest))


def derive_public_key(private_key: bytes) -> Point:
    """Derive the public key point A = Base8 * (s >> 3)."""
    return mul_point_escalar(BASE8, derive_secret_scalar(private_key) >> 3)


def sign_message(
    private_key: bytes,
    message: int,
    context: Optional[CryptoContext] = None,
) -> Signature:
    """
    Sign a field element.

    Deterministic: the nonce comes from the private key and the message.

    Raises:
        ValueError: If the key is not 32 bytes or the message is not in the field
    """
    key = _check_private_key(private_key)
    if not 0 <= message < BABY_JUB_PRIME:
        raise ValueError("Message must be a field element")

    digest = blake512(key)
    s = le_bytes_to_int(_prune_buffer(digest))
    public_key = mul_point_escalar(BASE8, s >> 3)

    r = le_bytes_to_int(blake512(digest[32:64] + int_to_le_bytes(message))) % SUBGROUP_ORDER
    r8 = mul_point_escalar(BASE8, r)

    hm = poseidon_hash(
        [r8[0], r8[1], public_key[0], public_key[1], message],
        context=context,
    )
    return Signature(r8=r8, s=(r + hm * s) % SUBGROUP_ORDER)


def verify_signature(
    message: int,
    signature: Signature,
    public_key: Point,
    context: Optional[CryptoContext] = None,
) -> bool:
    """
    Verify a signature over a field element.

    Returns False (never raises) for off-curve points, S >= l, or a
    signature that does not match.
    """
    if not in_curve(signature.r8) or not in_curve(public_key):
        return False
    if not 0 <= signature.s < SUBGROUP_ORDER:
        return False

    hm = poseidon_hash(
        [signature.r8[0], signature.r8[1], public_key[0], public_key[1], message],
        context=context,
    )
    left = mul_point_escalar(BASE8, signature.s)
    right = add_point(signature.r8, mul_point_escalar(public_key, 8 * hm))
    return left == right


def pack_signature(signature: Signature) -> bytes:
    """Pack as packed R8 (32 bytes) followed by S little-endian (32 bytes)."""
    return pack_point(signature.r8) + int_to_le_bytes(signature.s, 32)


def unpack_signature(packed: bytes) -> Optional[Signature]:
    """
    Unpack 64 bytes into a Signature.

    Returns None when R8 is not a valid packed point. S is not range
    checked here; verification rejects S >= l.
    """
    if len(packed) != PACKED_SIGNATURE_SIZE:
        return None
    r8 = unpack_point(packed[:PACKED_POINT_SIZE])
    if r8 is None:
        return None
    return Signature(r8=r8, s=le_bytes_to_int(packed[PACKED_POINT_SIZE:]))


__all__ = [
    "PRIVATE_KEY_SIZE",
    "PACKED_SIGNATURE_SIZE",
    "Signature",
    "derive_secret_scalar",
    "derive_public_key",
    "sign_message",
    "verify_signature",
    "pack_signature",
    "unpack_signature",
]
