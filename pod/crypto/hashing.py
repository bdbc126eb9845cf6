"""
Module 02 - Hashing Utilities
Field hashing primitives for POD names, values and Merkle nodes.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- String hashing: keccak256 of the UTF-8 bytes, shifted right 8 bits so the
  result fits the field (the ecosystem's "snark message hash")
- Integer hashing: Poseidon of one input, reduced modulo p
- Name and value hashing built from the two above
- The Merkle node combiner: Poseidon of two inputs

Security/Determinism Notes:
- All functions are pure and total over their input types
- Value tags are not mixed into value hashes; int and cryptographic values
  with the same payload hash identically
"""
from __future__ import annotations

from typing import Optional

from Crypto.Hash import keccak

from pod.crypto.context import CryptoContext
from pod.crypto.field import BABY_JUB_PRIME
from pod.crypto.poseidon import poseidon_hash
from pod.schemas.values import PODValue, is_pod_numeric_value


def keccak256(data: bytes) -> bytes:
    """
    Compute the Ethereum-style keccak256 digest (not NIST SHA3-256).

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak.new(digest_bits=256, data=data).digest()


def pod_string_hash(text: str) -> int:
    """
    Hash a string into the field.

    Rule: int.from_bytes(keccak256(utf8(text)), "big") >> 8
    """
    return int.from_bytes(keccak256(text.encode("utf-8")), "big") >> 8


def pod_int_hash(n: int, context: Optional[CryptoContext] = None) -> int:
    """
    Hash an integer into the field.

    Rule: Poseidon([n mod p]). Negative values and values >= p are reduced
    first, so pod_int_hash(-1) == pod_int_hash(p - 1).
    """
    return poseidon_hash([n % BABY_JUB_PRIME], context=context)


def pod_name_hash(name: str) -> int:
    """Hash an entry name. Names hash exactly like string values."""
    return pod_string_hash(name)


def pod_value_hash(value: PODValue, context: Optional[CryptoContext] = None) -> int:
    """
    Hash a POD value.

    Strings use pod_string_hash; int and cryptographic values use
    pod_int_hash of their payload.
    """
    if is_pod_numeric_value(value):
        return pod_int_hash(int(value.value), context=context)
    return pod_string_hash(str(value.value))


def pod_merkle_tree_hash(
    left: int,
    right: int,
    context: Optional[CryptoContext] = None,
) -> int:
    """
    Combine two Merkle nodes.

    Rule: Poseidon([left, right]). Order-sensitive.
    """
    return poseidon_hash([left, right], context=context)


__all__ = [
    "keccak256",
    "pod_string_hash",
    "pod_int_hash",
    "pod_name_hash",
    "pod_value_hash",
    "pod_merkle_tree_hash",
]
