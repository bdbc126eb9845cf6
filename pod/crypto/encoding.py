"""
Module 03 - Key & Signature Codec
Strict canonical hex encodings for private keys, public keys and signatures.

Owner: Protocol/Crypto Engineer
Module ID: M03

Encodings:
- Private key: 32 raw bytes, 64 hex chars
- Public key: packed BabyJubJub point, 64 hex chars
- Signature: packed R8 followed by S little-endian, 128 hex chars

Output is always lowercase hex with no 0x prefix. Decoders accept either
case but never a prefix or any other length. Every failure is a
PODFormatException (a TypeError).
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pod.crypto.babyjub import (
    IDENTITY,
    PACKED_POINT_SIZE,
    SUBGROUP_ORDER,
    Point,
    in_curve,
    pack_point,
    unpack_point,
)
from pod.crypto.eddsa import (
    PACKED_SIGNATURE_SIZE,
    PRIVATE_KEY_SIZE,
    Signature,
    pack_signature,
    unpack_signature,
)
from pod.schemas.errors import ErrorCodes, PODCurvePointException, PODFormatException
from pod.schemas.values import check_bigint_bounds


PRIVATE_KEY_FORMAT_MESSAGE = "Private key should be 32 bytes hex-encoded."
PUBLIC_KEY_FORMAT_MESSAGE = "Public key should be 32 bytes hex-encoded."
SIGNATURE_FORMAT_MESSAGE = "Signature should be 64 bytes hex-encoded."

_PRIVATE_KEY_REGEX = re.compile(r"[0-9A-Fa-f]{64}")
_PUBLIC_KEY_REGEX = re.compile(r"[0-9A-Fa-f]{64}")
_SIGNATURE_REGEX = re.compile(r"[0-9A-Fa-f]{128}")

_DECIMAL_REGEX = re.compile(r"-?[0-9]+")
_HEX_NUMBER_REGEX = re.compile(r"0[xX][0-9A-Fa-f]+")


def _check_hex_format(
    text: Any,
    pattern: re.Pattern,
    message: str,
    code: str,
    label: str,
) -> str:
    if not isinstance(text, str) or not pattern.fullmatch(text):
        raise PODFormatException(message, label=label, code=code)
    return text


# =============================================================================
# Format Checks (syntax only)
# =============================================================================

def check_private_key_format(text: Any) -> str:
    """Check that text is 64 hex chars. Returns it unchanged."""
    return _check_hex_format(
        text, _PRIVATE_KEY_REGEX, PRIVATE_KEY_FORMAT_MESSAGE,
        ErrorCodes.INVALID_PRIVATE_KEY, "privateKey",
    )


def check_public_key_format(text: Any) -> str:
    """Check that text is 64 hex chars. Returns it unchanged."""
    return _check_hex_format(
        text, _PUBLIC_KEY_REGEX, PUBLIC_KEY_FORMAT_MESSAGE,
        ErrorCodes.INVALID_PUBLIC_KEY, "publicKey",
    )


def check_signature_format(text: Any) -> str:
    """Check that text is 128 hex chars. Returns it unchanged."""
    return _check_hex_format(
        text, _SIGNATURE_REGEX, SIGNATURE_FORMAT_MESSAGE,
        ErrorCodes.INVALID_SIGNATURE, "signature",
    )


# =============================================================================
# Numeric Parsing
# =============================================================================

def _parse_int(label: str, value: Any, code: str) -> int:
    """Accept an int (not bool), or a decimal or 0x-prefixed numeric string."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        if _DECIMAL_REGEX.fullmatch(value):
            return int(value, 10)
        if _HEX_NUMBER_REGEX.fullmatch(value):
            return int(value[2:], 16)
    raise PODFormatException(
        f"{label} should be an integer or numeric string, got {type(value).__name__}.",
        label=label,
        code=code,
    )


def _parse_point(label: str, value: Any, code: str) -> Point:
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, (list, tuple)):
        raise PODFormatException(
            f"{label} should be a pair of coordinates.", label=label, code=code
        )
    if len(value) != 2:
        raise PODFormatException(
            f"{label} should have 2 coordinates, got {len(value)}.",
            label=label,
            code=code,
        )
    point = (_parse_int(label, value[0], code), _parse_int(label, value[1], code))
    if not in_curve(point):
        raise PODCurvePointException(f"{label} is not on the BabyJubJub curve.", label=label)
    return point


def _as_bytes(value: Any) -> bytes | None:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return None


# =============================================================================
# Private Keys
# =============================================================================

def encode_private_key(raw: Any) -> str:
    """
    Encode a private key as 64 lowercase hex chars.

    Args:
        raw: 32 raw bytes, or a 64-char hex string

    Raises:
        PODFormatException: On any other type or length
    """
    if isinstance(raw, str):
        return check_private_key_format(raw).lower()
    data = _as_bytes(raw)
    if data is None:
        raise PODFormatException(
            PRIVATE_KEY_FORMAT_MESSAGE,
            label="privateKey",
            code=ErrorCodes.INVALID_PRIVATE_KEY,
        )
    check_bigint_bounds("privateKey", len(data), PRIVATE_KEY_SIZE, PRIVATE_KEY_SIZE)
    return data.hex()


def decode_private_key(text: Any) -> bytes:
    """
    Decode a 64-char hex private key into 32 bytes.

    Raises:
        PODFormatException: "Private key should be 32 bytes hex-encoded."
    """
    return bytes.fromhex(check_private_key_format(text))


# =============================================================================
# Public Keys
# =============================================================================

def encode_public_key(point: Any) -> str:
    """
    Encode a public key as 64 lowercase hex chars.

    Args:
        point: An (x, y) pair of ints or numeric strings, 32 packed bytes,
            or a 64-char hex string

    Raises:
        PODFormatException: On a malformed key
        PODCurvePointException: If the point is not on the curve
    """
    if isinstance(point, str):
        return pack_point(decode_public_key(point)).hex()
    data = _as_bytes(point)
    if data is not None:
        check_bigint_bounds("publicKey", len(data), PACKED_POINT_SIZE, PACKED_POINT_SIZE)
        return pack_point(_unpack_public_key(data)).hex()
    parsed = _parse_point("publicKey", point, ErrorCodes.INVALID_PUBLIC_KEY)
    return pack_point(_check_not_identity(parsed)).hex()


def _check_not_identity(point: Point) -> Point:
    if point == IDENTITY:
        raise PODCurvePointException(
            "publicKey may not be the identity point.", label="publicKey"
        )
    return point


def _unpack_public_key(data: bytes) -> Point:
    point = unpack_point(data)
    if point is None:
        raise PODCurvePointException(
            "publicKey is not a valid packed BabyJubJub point.", label="publicKey"
        )
    return _check_not_identity(point)


def decode_public_key(text: Any) -> Point:
    """
    Decode a 64-char hex public key into an (x, y) point.

    Raises:
        PODFormatException: On bad syntax
        PODCurvePointException: If the packed bytes are not a curve point
            or are the identity
    """
    return _unpack_public_key(bytes.fromhex(check_public_key_format(text)))


# =============================================================================
# Signatures
# =============================================================================

def _coerce_signature(sig: Any) -> Signature:
    code = ErrorCodes.INVALID_SIGNATURE
    if isinstance(sig, Signature):
        r8 = _parse_point("signature.R8", list(sig.r8), code)
        s = sig.s
    elif isinstance(sig, Mapping):
        if "R8" not in sig or "S" not in sig:
            raise PODFormatException(
                "Signature should have R8 and S.", label="signature", code=code
            )
        r8 = _parse_point("signature.R8", sig["R8"], code)
        s = _parse_int("signature.S", sig["S"], code)
    else:
        raise PODFormatException(
            SIGNATURE_FORMAT_MESSAGE, label="signature", code=code
        )
    check_bigint_bounds("signature.S", s, 0, SUBGROUP_ORDER - 1)
    return Signature(r8=r8, s=s)


def encode_signature(sig: Any) -> str:
    """
    Encode a signature as 128 lowercase hex chars.

    Args:
        sig: A Signature, a mapping {"R8": [x, y], "S": s} of ints or numeric
            strings, 64 packed bytes, or a 128-char hex string

    Raises:
        PODFormatException: On a malformed signature or S >= l
        PODCurvePointException: If R8 is not on the curve
    """
    if isinstance(sig, str):
        return pack_signature(_coerce_signature(decode_signature(sig))).hex()
    data = _as_bytes(sig)
    if data is not None:
        check_bigint_bounds(
            "signature", len(data), PACKED_SIGNATURE_SIZE, PACKED_SIGNATURE_SIZE
        )
        return pack_signature(_coerce_signature(_unpack_signature(data))).hex()
    return pack_signature(_coerce_signature(sig)).hex()


def _unpack_signature(data: bytes) -> Signature:
    unpacked = unpack_signature(data)
    if unpacked is None:
        raise PODCurvePointException(
            "signature.R8 is not a valid packed BabyJubJub point.",
            label="signature.R8",
        )
    return unpacked


def decode_signature(text: Any) -> Signature:
    """
    Decode a 128-char hex signature.

    S is not range checked; verification returns False for S >= l.

    Raises:
        PODFormatException: On bad syntax
        PODCurvePointException: If R8 is not a curve point
    """
    return _unpack_signature(bytes.fromhex(check_signature_format(text)))


__all__ = [
    "PRIVATE_KEY_FORMAT_MESSAGE",
    "PUBLIC_KEY_FORMAT_MESSAGE",
    "SIGNATURE_FORMAT_MESSAGE",
    "check_private_key_format",
    "check_public_key_format",
    "check_signature_format",
    "encode_private_key",
    "decode_private_key",
    "encode_public_key",
    "decode_public_key",
    "encode_signature",
    "decode_signature",
]
