"""
Module 05 - Merkle Tree and Commitments
Lean binary Merkle tree over field elements + proof generation/verification.

Owner: Protocol/Crypto Engineer
Module ID: M05

This module provides:
- MerkleProof: Dataclass representing a Merkle inclusion proof
- build_merkle_levels / build_merkle_root: Build the tree from leaves
- build_merkle_proof: Generate proof for a specific leaf
- verify_merkle_proof: Verify a proof against its claimed root

Canonical Commitment Rules:
1. Parent hashing: Poseidon([left, right])
2. Odd levels: lone right-most node carried up unchanged
3. Single leaf: root = leaf
4. Empty tree: rejected

Usage:
    from pod.merkle import build_merkle_root, build_merkle_proof, verify_merkle_proof

    root = build_merkle_root(leaves)
    proof = build_merkle_proof(leaves, index=2)
    assert verify_merkle_proof(proof)
"""
from .merkle_tree import (
    MerkleProof,
    build_merkle_levels,
    build_merkle_proof,
    build_merkle_proof_from_levels,
    build_merkle_root,
    compute_tree_depth,
    merkle_parent,
    verify_merkle_proof,
)

__all__ = [
    "MerkleProof",
    "merkle_parent",
    "build_merkle_levels",
    "build_merkle_root",
    "build_merkle_proof",
    "build_merkle_proof_from_levels",
    "verify_merkle_proof",
    "compute_tree_depth",
]
