"""
Module 04 - Signing & Verification
Sign and verify POD content identifiers (Merkle roots).

Owner: Protocol/Crypto Engineer
Module ID: M04

Signatures are EdDSA-Poseidon over BabyJubJub, exchanged in canonical hex
(see pod.crypto.encoding). Signing is deterministic.

Malformed inputs raise PODFormatException. A well-formed signature that
does not verify is reported as False.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pod.crypto.context import CryptoContext
from pod.crypto.eddsa import derive_public_key, sign_message, verify_signature
from pod.crypto.encoding import (
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode_private_key,
    encode_public_key,
    encode_signature,
)
from pod.schemas.values import (
    POD_CRYPTOGRAPHIC_MAX,
    POD_CRYPTOGRAPHIC_MIN,
    check_bigint_bounds,
    require_type,
)


@dataclass(frozen=True)
class RootSignature:
    """
    A signature over a content identifier, with the signer's public key.

    Both fields are canonical lowercase hex.
    """

    signature: str
    public_key: str

    def to_dict(self) -> dict[str, str]:
        return {"signature": self.signature, "publicKey": self.public_key}


def _check_root(root: Any) -> int:
    require_type("root", root, int)
    return check_bigint_bounds("root", root, POD_CRYPTOGRAPHIC_MIN, POD_CRYPTOGRAPHIC_MAX)


def _private_key_bytes(private_key: Any) -> bytes:
    # Normalise bytes and hex input through the same strict codec
    return decode_private_key(encode_private_key(private_key))


def derive_pod_public_key(private_key: Any) -> str:
    """Derive the canonical hex public key for a private key (hex or bytes)."""
    return encode_public_key(derive_public_key(_private_key_bytes(private_key)))


def sign_pod_root(
    root: int,
    private_key: Any,
    context: Optional[CryptoContext] = None,
) -> RootSignature:
    """
    Sign a content identifier.

    Args:
        root: Content identifier, a field element
        private_key: 64-char hex string or 32 raw bytes
        context: Optional CryptoContext

    Returns:
        RootSignature with hex-encoded signature and public key

    Raises:
        PODFormatException: For a malformed private key or an out-of-field root
    """
    root = _check_root(root)
    key = _private_key_bytes(private_key)

    signature = sign_message(key, root, context=context)
    public_key = derive_public_key(key)
    return RootSignature(
        signature=encode_signature(signature),
        public_key=encode_public_key(public_key),
    )


def verify_pod_root_signature(
    root: int,
    signature: str,
    public_key: str,
    context: Optional[CryptoContext] = None,
) -> bool:
    """
    Verify a signature over a content identifier.

    Returns:
        True if the signature is valid for root and public_key

    Raises:
        PODFormatException: If root, signature or public key is malformed
    """
    root = _check_root(root)
    decoded_signature = decode_signature(signature)
    decoded_public_key = decode_public_key(public_key)
    return verify_signature(root, decoded_signature, decoded_public_key, context=context)


__all__ = [
    "RootSignature",
    "derive_pod_public_key",
    "sign_pod_root",
    "verify_pod_root_signature",
]
