"""
Module 06 - POD Content
Content-addressed POD entries.

Owner: Protocol Engineer
Module ID: M06

PODContent holds validated entries in canonical (sorted) order together
with their Merkle tree. The content ID is the tree root:

    leaves = [nameHash(n0), valueHash(v0), nameHash(n1), valueHash(v1), ...]
    content_id = lean_merkle_root(leaves)

Each entry is therefore a first-level node H(nameHash, valueHash), and an
entry proof is the Merkle proof of the entry's name leaf.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pod.crypto.context import CryptoContext
from pod.crypto.hashing import pod_name_hash, pod_value_hash
from pod.merkle.merkle_tree import (
    MerkleProof,
    build_merkle_levels,
    build_merkle_proof_from_levels,
    verify_merkle_proof,
)
from pod.schemas.errors import PODEntryNotFoundException, PODFormatException
from pod.schemas.values import (
    PODEntries,
    PODValue,
    check_pod_entries,
    clone_pod_entries,
    clone_pod_value,
)


# An entry proof is a Merkle proof whose leaf is the entry's name hash
EntryProof = MerkleProof


class PODContent:
    """
    Immutable, content-addressed POD entries.

    Build instances with PODContent.from_entries().
    """

    def __init__(
        self,
        entries: PODEntries,
        levels: list[list[int]],
    ) -> None:
        self._entries = entries
        self._levels = levels
        self._name_indexes = {name: i for i, name in enumerate(entries)}

    @classmethod
    def from_entries(
        cls,
        entries: Mapping[str, Any],
        context: Optional[CryptoContext] = None,
    ) -> "PODContent":
        """
        Validate entries, sort them by name and build the Merkle tree.

        Args:
            entries: Mapping of names to PODValues (or {"type", "value"} dicts)
            context: Optional CryptoContext for hashing

        Raises:
            PODFormatException: On an invalid name or value, or no entries
        """
        checked = check_pod_entries(entries)
        if len(checked) == 0:
            raise PODFormatException("PODs must have at least one entry.")

        sorted_entries = {name: checked[name] for name in sorted(checked)}
        leaves: list[int] = []
        for name, value in sorted_entries.items():
            leaves.append(pod_name_hash(name))
            leaves.append(pod_value_hash(value, context=context))

        return cls(sorted_entries, build_merkle_levels(leaves, context))

    @property
    def content_id(self) -> int:
        """The Merkle root of the entries."""
        return self._levels[-1][0]

    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._entries)

    @property
    def merkle_tree_depth(self) -> int:
        return len(self._levels) - 1

    def list_names(self) -> list[str]:
        """Entry names in sorted order."""
        return list(self._entries)

    def list_entries(self) -> list[tuple[str, PODValue]]:
        """(name, value) pairs in sorted order. Values are copies."""
        return [(name, clone_pod_value(value)) for name, value in self._entries.items()]

    def as_entries(self) -> PODEntries:
        """All entries as a new dict, in sorted order."""
        return clone_pod_entries(self._entries)

    def get_value(self, name: str) -> Optional[PODValue]:
        """Get the value of an entry, or None if the name is absent."""
        value = self._entries.get(name)
        return None if value is None else clone_pod_value(value)

    def get_raw_value(self, name: str) -> Optional[str | int]:
        """Get the bare payload of an entry, or None if the name is absent."""
        value = self._entries.get(name)
        return None if value is None else value.value

    def generate_entry_proof(self, name: str) -> EntryProof:
        """
        Prove that an entry is part of this content.

        The first sibling is the entry's value hash.

        Raises:
            PODEntryNotFoundException: If the name is absent
        """
        index = self._name_indexes.get(name)
        if index is None:
            raise PODEntryNotFoundException(name)
        return build_merkle_proof_from_levels(self._levels, 2 * index)

    @staticmethod
    def verify_entry_proof(
        proof: EntryProof,
        context: Optional[CryptoContext] = None,
    ) -> bool:
        """Verify an entry proof against the root it carries."""
        return verify_merkle_proof(proof, context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PODContent):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self.content_id)

    def __repr__(self) -> str:
        return f"PODContent(size={self.size}, content_id={self.content_id})"


__all__ = ["EntryProof", "PODContent"]
