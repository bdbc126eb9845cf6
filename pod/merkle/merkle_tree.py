"""
Module 05 - Merkle Tree Implementation
Lean binary Merkle tree over field elements, with inclusion proofs.

Owner: Protocol/Crypto Engineer
Module ID: M05

This module provides:
- Level-by-level tree construction
- Merkle root computation
- Merkle proof generation for any leaf index
- Merkle proof verification

Canonical Commitment Rules (Hard Contracts):
1. Leaves are field elements supplied by the caller, in order
2. Parent hashing: parent = Poseidon([left, right])
3. Odd levels: a node without a right sibling is carried up unchanged;
   no padding value is ever hashed
4. Single leaf: root = leaf
5. Empty trees are not allowed

The tree policy matches the zk-kit LeanIMT, so roots and proofs agree with
circuits and libraries built on it.

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts leaves; POD entry ordering happens upstream
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from pod.crypto.context import CryptoContext
from pod.crypto.hashing import pod_merkle_tree_hash


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle proof for a single leaf in a lean Merkle tree.

    Attributes:
        leaf: The leaf being proven
        index: Compressed path bitmask. Bit i is set when the node is the
            right child at the i-th level that had a sibling.
        siblings: Sibling nodes from bottom to top, levels without a
            sibling omitted
        root: The Merkle root this proof is against
    """
    leaf: int
    index: int
    siblings: tuple[int, ...]
    root: int

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Proof index must be non-negative, got {self.index}")
        if self.index >> len(self.siblings):
            raise ValueError(
                f"Proof index {self.index} has bits beyond its "
                f"{len(self.siblings)} siblings"
            )

    def to_dict(self) -> dict:
        return {
            "leaf": str(self.leaf),
            "index": self.index,
            "siblings": [str(s) for s in self.siblings],
            "root": str(self.root),
        }


def merkle_parent(left: int, right: int, context: Optional[CryptoContext] = None) -> int:
    """Compute the parent of two child nodes: Poseidon([left, right])."""
    return pod_merkle_tree_hash(left, right, context=context)


def build_merkle_levels(
    leaves: Sequence[int],
    context: Optional[CryptoContext] = None,
) -> list[list[int]]:
    """
    Build every level of the tree, leaves first and root last.

    Example: [a, b, c] -> [[a, b, c], [H(a, b), c], [H(H(a, b), c)]]

    Raises:
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot build a Merkle tree with no leaves")

    levels: list[list[int]] = [list(leaves)]
    current_level = levels[0]

    while len(current_level) > 1:
        next_level: list[int] = []
        for i in range(0, len(current_level) - 1, 2):
            next_level.append(merkle_parent(current_level[i], current_level[i + 1], context))
        # Carry a lone right-most node up unchanged
        if len(current_level) % 2 == 1:
            next_level.append(current_level[-1])
        levels.append(next_level)
        current_level = next_level

    return levels


def build_merkle_root(
    leaves: Sequence[int],
    context: Optional[CryptoContext] = None,
) -> int:
    """
    Build a Merkle root from a sequence of leaves.

    Args:
        leaves: Field elements, order preserved

    Returns:
        The root field element

    Raises:
        ValueError: If leaves is empty
    """
    return build_merkle_levels(leaves, context)[-1][0]


def build_merkle_proof_from_levels(levels: Sequence[Sequence[int]], index: int) -> MerkleProof:
    """
    Generate a proof from precomputed levels (see build_merkle_levels).

    Raises:
        IndexError: If index is out of range
    """
    leaves = levels[0]
    if index < 0 or index >= len(leaves):
        raise IndexError(f"Leaf index {index} out of range for {len(leaves)} leaves")

    siblings: list[int] = []
    path = 0
    current_index = index

    for level in levels[:-1]:
        is_right = current_index & 1
        sibling_index = current_index - 1 if is_right else current_index + 1
        if sibling_index < len(level):
            path |= is_right << len(siblings)
            siblings.append(level[sibling_index])
        current_index >>= 1

    return MerkleProof(
        leaf=leaves[index],
        index=path,
        siblings=tuple(siblings),
        root=levels[-1][0],
    )


def build_merkle_proof(
    leaves: Sequence[int],
    index: int,
    context: Optional[CryptoContext] = None,
) -> MerkleProof:
    """
    Generate a Merkle proof for the leaf at the given index.

    Args:
        leaves: Field elements
        index: 0-based index of the leaf to prove

    Returns:
        MerkleProof with leaf, path bitmask, siblings (bottom-up), and root

    Raises:
        IndexError: If index is out of range
        ValueError: If leaves is empty
    """
    return build_merkle_proof_from_levels(build_merkle_levels(leaves, context), index)


def verify_merkle_proof(proof: MerkleProof, context: Optional[CryptoContext] = None) -> bool:
    """
    Verify a Merkle proof.

    Recomputes the root from the leaf and siblings, checking it against
    the claimed root in the proof.
    """
    node = proof.leaf
    for i, sibling in enumerate(proof.siblings):
        if (proof.index >> i) & 1:
            node = merkle_parent(sibling, node, context)
        else:
            node = merkle_parent(node, sibling, context)
    return node == proof.root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the number of hashing levels above the leaves.

    A single leaf has depth 0, two leaves depth 1, three or four depth 2.
    """
    if num_leaves <= 0:
        raise ValueError(f"Tree needs at least one leaf, got {num_leaves}")
    return (num_leaves - 1).bit_length()


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
