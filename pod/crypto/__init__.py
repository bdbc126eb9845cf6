"""
Core cryptographic primitives.

Module 02 provides the field, curve and hash primitives:
- field: BN254 scalar field helpers
- poseidon / context: circomlib Poseidon and its parameter cache
- blake512: original BLAKE-512
- babyjub: BabyJubJub arithmetic and point packing
- eddsa: EdDSA-Poseidon signing and verification

The POD-level layers (hashing, encoding, signatures) depend on
pod.schemas and are imported from their own modules.
"""
from .babyjub import (
    BASE8,
    SUBGROUP_ORDER,
    Point,
    add_point,
    in_curve,
    mul_point_escalar,
    pack_point,
    unpack_point,
)
from .blake512 import blake512
from .context import (
    CryptoContext,
    build_crypto_context,
    get_default_context,
    set_default_context,
)
from .eddsa import (
    Signature,
    derive_public_key,
    derive_secret_scalar,
    pack_signature,
    sign_message,
    unpack_signature,
    verify_signature,
)
from .field import BABY_JUB_NEGATIVE_ONE, BABY_JUB_PRIME
from .poseidon import poseidon_hash

__all__ = [
    "BABY_JUB_PRIME",
    "BABY_JUB_NEGATIVE_ONE",
    "BASE8",
    "SUBGROUP_ORDER",
    "Point",
    "add_point",
    "in_curve",
    "mul_point_escalar",
    "pack_point",
    "unpack_point",
    "blake512",
    "CryptoContext",
    "build_crypto_context",
    "get_default_context",
    "set_default_context",
    "Signature",
    "derive_public_key",
    "derive_secret_scalar",
    "pack_signature",
    "sign_message",
    "unpack_signature",
    "verify_signature",
    "poseidon_hash",
]
