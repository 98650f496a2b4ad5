"""
Merkle Tree and Commitments
Deterministic Merkle tree construction + proof generation/verification
over (address, amount) records.

This module provides:
- MerkleTree: Level hierarchy from leaves to root, proof generation
- MerkleProof: Dataclass representing a Merkle inclusion proof
- leaf_hash: Fixed-width record encoding hashed into a leaf
- verify_merkle_proof: Verify a proof against a root

Canonical Commitment Rules:
1. Leaf hashing: sha3_256(address_32 + amount_8)
2. Parent hashing: sha3_256(left + right)
3. Pairing: unpaired last node is paired with itself at any level
4. Empty tree: no root
5. Single leaf: root = leaf

Usage:
    from core.merkle import MerkleTree, leaf_hash, verify_merkle_proof

    leaves = [leaf_hash(r.address, r.amount) for r in records]
    tree = MerkleTree(leaves)

    siblings, positions = tree.generate_proof(2)
    assert verify_merkle_proof(leaves[2], siblings, positions, tree.root)
"""
from .leaves import (
    LEAF_FORMAT,
    LeafFormat,
    leaf_hash,
    build_leaves,
)

from .merkle_tree import (
    MerkleProof,
    MerkleTree,
    merkle_parent,
    build_merkle_root,
    verify_merkle_proof,
    verify_proof,
    compute_proof_length,
    compute_tree_depth,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Leaves
    "LEAF_FORMAT",
    "LeafFormat",
    "leaf_hash",
    "build_leaves",
    # Core types
    "MerkleProof",
    "MerkleTree",
    # Core functions
    "merkle_parent",
    "build_merkle_root",
    "verify_merkle_proof",
    "verify_proof",
    "compute_proof_length",
    "compute_tree_depth",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
