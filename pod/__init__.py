"""
POD: a content-addressed, signed, typed record format.

A POD maps names to typed values (string, int, cryptographic). Entries are
hashed into a lean Merkle tree whose root is the content ID, and the content
ID is signed with EdDSA-Poseidon over BabyJubJub.

Layout:
- pod.schemas: values, names, bounds, errors and JSON codecs
- pod.crypto: field, Poseidon, BLAKE-512, BabyJubJub, EdDSA, POD hashing,
  key/signature codec and root signing
- pod.merkle: lean Merkle tree and proofs
- pod.content: PODContent and POD
- pod.config: runtime configuration (imported explicitly by callers)
"""

from pod.schemas import (
    POD_CRYPTOGRAPHIC_MAX,
    POD_CRYPTOGRAPHIC_MIN,
    POD_INT_MAX,
    POD_INT_MIN,
    POD_NAME_REGEX,
    ErrorCodes,
    PODBoundsException,
    PODCurvePointException,
    PODEntries,
    PODEntryNotFoundException,
    PODError,
    PODException,
    PODFormatException,
    PODValue,
    PODValueType,
    check_bigint_bounds,
    check_pod_entries,
    check_pod_name,
    check_pod_value,
    clone_optional_pod_value,
    clone_pod_entries,
    clone_pod_value,
    deserialize_pod_entries,
    get_pod_value_for_circuit,
    is_pod_numeric_value,
    pod_cryptographic_value,
    pod_entries_from_simplified_json,
    pod_entries_to_simplified_json,
    pod_int_value,
    pod_string_value,
    require_type,
    serialize_pod_entries,
)
from pod.crypto.context import CryptoContext, build_crypto_context, get_default_context
from pod.crypto.eddsa import Signature
from pod.crypto.encoding import (
    check_private_key_format,
    check_public_key_format,
    check_signature_format,
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode_private_key,
    encode_public_key,
    encode_signature,
)
from pod.crypto.hashing import (
    pod_int_hash,
    pod_merkle_tree_hash,
    pod_name_hash,
    pod_string_hash,
    pod_value_hash,
)
from pod.crypto.signatures import (
    RootSignature,
    derive_pod_public_key,
    sign_pod_root,
    verify_pod_root_signature,
)
from pod.merkle import MerkleProof
from pod.content import POD, EntryProof, PODContent

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Objects
    "POD",
    "PODContent",
    "EntryProof",
    "MerkleProof",
    # Values
    "POD_CRYPTOGRAPHIC_MIN",
    "POD_CRYPTOGRAPHIC_MAX",
    "POD_INT_MIN",
    "POD_INT_MAX",
    "POD_NAME_REGEX",
    "PODValue",
    "PODValueType",
    "PODEntries",
    "pod_string_value",
    "pod_int_value",
    "pod_cryptographic_value",
    "require_type",
    "check_bigint_bounds",
    "check_pod_name",
    "check_pod_value",
    "check_pod_entries",
    "is_pod_numeric_value",
    "get_pod_value_for_circuit",
    "clone_pod_value",
    "clone_optional_pod_value",
    "clone_pod_entries",
    # Errors
    "ErrorCodes",
    "PODError",
    "PODException",
    "PODFormatException",
    "PODBoundsException",
    "PODCurvePointException",
    "PODEntryNotFoundException",
    # Hashing
    "CryptoContext",
    "build_crypto_context",
    "get_default_context",
    "pod_string_hash",
    "pod_int_hash",
    "pod_name_hash",
    "pod_value_hash",
    "pod_merkle_tree_hash",
    # Codec
    "Signature",
    "check_private_key_format",
    "check_public_key_format",
    "check_signature_format",
    "encode_private_key",
    "decode_private_key",
    "encode_public_key",
    "decode_public_key",
    "encode_signature",
    "decode_signature",
    # Signing
    "RootSignature",
    "derive_pod_public_key",
    "sign_pod_root",
    "verify_pod_root_signature",
    # Serialization
    "serialize_pod_entries",
    "deserialize_pod_entries",
    "pod_entries_to_simplified_json",
    "pod_entries_from_simplified_json",
]
