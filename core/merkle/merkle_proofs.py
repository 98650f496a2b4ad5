"""
Merkle Proofs Convenience Wrappers
Thin wrappers around the Merkle tree for record-level proving and verifying.

This module provides class-based interfaces:
- MerkleProver: Build a tree over records and prove any of them
- MerkleVerifier: Verify proofs from leaves or from raw records
"""
from __future__ import annotations

from typing import Optional, Sequence

from core.merkle.leaves import build_leaves, leaf_hash
from core.merkle.merkle_tree import (
    MerkleProof,
    MerkleTree,
    verify_merkle_proof,
    verify_proof,
)
from core.schemas.records import ProofRecord, Record


class MerkleProver:
    """
    Builds a Merkle tree over an ordered list of records.

    Example:
        >>> prover = MerkleProver.from_records(records)
        >>> proof = prover.prove(1)
        >>> MerkleVerifier.verify(proof)
        True
    """

    def __init__(self, records: Sequence[Record], tree: MerkleTree) -> None:
        self._records = tuple(records)
        self._tree = tree

    @classmethod
    def from_records(cls, records: Sequence[Record]) -> "MerkleProver":
        """
        Hash records into leaves (in order) and build the tree.

        Raises:
            EncodingError: If any record cannot be encoded
        """
        return cls(records, MerkleTree(build_leaves(records)))

    @property
    def tree(self) -> MerkleTree:
        return self._tree

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    @property
    def root(self) -> Optional[bytes]:
        return self._tree.root

    def prove(self, index: int) -> MerkleProof:
        """
        Generate a proof for the record at the given index.

        Raises:
            IndexOutOfBounds: If index is out of range
        """
        return self._tree.build_proof(index)

    def prove_record(self, index: int) -> ProofRecord:
        """
        Generate the published proof record for the record at index.

        Raises:
            IndexOutOfBounds: If index is out of range
        """
        proof = self.prove(index)
        return ProofRecord.from_proof(self._records[index], proof)

    def prove_all(self) -> list[ProofRecord]:
        """Generate published proof records for every record, in order."""
        return [self.prove_record(i) for i in range(len(self._records))]


class MerkleVerifier:
    """Convenience class for verifying Merkle proofs."""

    @staticmethod
    def verify(proof: MerkleProof) -> bool:
        """Verify a MerkleProof against its own root."""
        return verify_proof(proof)

    @staticmethod
    def verify_leaf_in_root(
        leaf: bytes,
        siblings: Sequence[bytes],
        positions: Sequence[bool],
        root: Optional[bytes],
    ) -> bool:
        """Verify a leaf is included in a Merkle root using raw components."""
        return verify_merkle_proof(leaf, siblings, positions, root)

    @staticmethod
    def verify_record(
        address: str,
        amount: int,
        siblings: Sequence[bytes],
        positions: Sequence[bool],
        root: Optional[bytes],
    ) -> bool:
        """
        Verify an (address, amount) record is included in a Merkle root.

        The leaf is recomputed from the record first.

        Raises:
            EncodingError: If the record cannot be encoded
        """
        leaf = leaf_hash(address, amount)
        return verify_merkle_proof(leaf, siblings, positions, root)

    @staticmethod
    def verify_proof_record(proof_record: ProofRecord, root: Optional[bytes]) -> bool:
        """Verify a published proof record against a root."""
        return MerkleVerifier.verify_record(
            proof_record.address,
            proof_record.amount,
            proof_record.to_siblings(),
            proof_record.positions,
            root,
        )


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
