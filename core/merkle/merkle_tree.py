"""
Merkle Tree Implementation
Level-by-level Merkle tree construction, proof generation, and verification.

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: see core.merkle.leaves.leaf_hash()
2. Parent hashing: parent = sha3_256(left + right)
3. Pairing rule: an unpaired last node at any level is paired with
   itself. The duplicate is never stored in the level.
4. Empty leaves: one empty level and no root (root is None)
5. Single leaf: root = leaf, no hashing

Proof Layout:
- siblings[j] / positions[j] belong to level j (leaves first)
- positions[j] is True when the path node was the right-hand element
  of its pair, i.e. the sibling sits on the left

Determinism Notes:
- This module never sorts leaves - it trusts input order
- A built tree is immutable; proofs are read-only walks over it
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from core.crypto.hashing import hash_concat
from core.schemas.errors import IndexOutOfBounds


Level = tuple[bytes, ...]


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf hash being proven
        index: The 0-based index of the leaf in the leaf level
        siblings: Sibling hashes from bottom to top of tree
        positions: Per-level flag, True if the path node was on the right
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: tuple[bytes, ...]
    positions: tuple[bool, ...]
    root: bytes

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        if len(self.siblings) != len(self.positions):
            raise ValueError(
                f"Proof has {len(self.siblings)} siblings but {len(self.positions)} positions"
            )


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent hash of two child nodes: sha3_256(left + right).
    """
    return hash_concat(left, right)


def _next_level(level: Level) -> Level:
    parents: list[bytes] = []
    for i in range(0, len(level), 2):
        left = level[i]
        right = level[i + 1] if i + 1 < len(level) else left
        parents.append(merkle_parent(left, right))
    return tuple(parents)


class MerkleTree:
    """
    Merkle tree over an ordered sequence of leaf digests.

    levels[0] holds the leaves, levels[-1] the root (a single digest),
    except for an empty tree which has exactly one empty level.

    Example:
        >>> from core.merkle.leaves import leaf_hash
        >>> tree = MerkleTree([leaf_hash("0x1", 100), leaf_hash("0x2", 200)])
        >>> proof, positions = tree.generate_proof(1)
        >>> positions
        [True]
    """

    def __init__(self, leaves: Sequence[bytes]) -> None:
        levels: list[Level] = [tuple(leaves)]

        while len(levels[-1]) > 1:
            levels.append(_next_level(levels[-1]))

        self._levels: tuple[Level, ...] = tuple(levels)

    @classmethod
    def build(cls, leaves: Sequence[bytes]) -> "MerkleTree":
        """Build a tree from leaf digests. Same as MerkleTree(leaves)."""
        return cls(leaves)

    @property
    def levels(self) -> tuple[Level, ...]:
        """All levels, leaves first, root level last."""
        return self._levels

    @property
    def leaves(self) -> Level:
        return self._levels[0]

    @property
    def leaf_count(self) -> int:
        return len(self._levels[0])

    @property
    def depth(self) -> int:
        """Number of stored levels (leaves and root included)."""
        return len(self._levels)

    @property
    def root(self) -> Optional[bytes]:
        """The root digest, or None when the tree has no leaves."""
        top = self._levels[-1]
        return top[0] if top else None

    def __len__(self) -> int:
        return self.leaf_count

    def generate_proof(self, index: int) -> tuple[list[bytes], list[bool]]:
        """
        Generate the sibling hashes and position flags for a leaf.

        Algorithm, for each level below the root:
        1. is_right = index is odd
        2. sibling is index - 1 if is_right, else index + 1
        3. If the sibling is past the end of the level, the node is an
           unpaired tail and its own digest is the sibling
        4. Move up: index = index // 2

        Args:
            index: 0-based index of the leaf to prove

        Returns:
            (siblings, positions), both ordered leaves-first

        Raises:
            IndexOutOfBounds: If index is not a position in the leaf level
        """
        if index < 0 or index >= self.leaf_count:
            raise IndexOutOfBounds(index, self.leaf_count)

        siblings: list[bytes] = []
        positions: list[bool] = []

        for level in self._levels[:-1]:
            is_right = index % 2 == 1
            sibling_index = index - 1 if is_right else index + 1

            if sibling_index < len(level):
                siblings.append(level[sibling_index])
            else:
                siblings.append(level[index])
            positions.append(is_right)

            index //= 2

        return siblings, positions

    def build_proof(self, index: int) -> MerkleProof:
        """
        Generate a MerkleProof (leaf, index and root included) for a leaf.

        Raises:
            IndexOutOfBounds: If index is not a position in the leaf level
        """
        siblings, positions = self.generate_proof(index)
        return MerkleProof(
            leaf=self.leaves[index],
            index=index,
            siblings=tuple(siblings),
            positions=tuple(positions),
            root=self.root,
        )


def build_merkle_root(leaves: Sequence[bytes]) -> Optional[bytes]:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Returns:
        32-byte Merkle root, or None for an empty sequence
    """
    return MerkleTree(leaves).root


def verify_merkle_proof(
    leaf: bytes,
    siblings: Sequence[bytes],
    positions: Sequence[bool],
    root: Optional[bytes],
) -> bool:
    """
    Verify an inclusion proof against a root.

    The leaf index is not needed; the position flags carry the path.

    Algorithm:
    1. Start with the leaf hash
    2. For each (sibling, is_right) pair, bottom-up:
       - is_right: hash = parent(sibling, hash)
       - otherwise: hash = parent(hash, sibling)
    3. Check computed root equals claimed root

    Returns:
        True if the proof is valid, False otherwise
    """
    if root is None or len(siblings) != len(positions):
        return False

    current_hash = leaf
    for sibling, is_right in zip(siblings, positions):
        if is_right:
            current_hash = merkle_parent(sibling, current_hash)
        else:
            current_hash = merkle_parent(current_hash, sibling)

    return current_hash == root


def verify_proof(proof: MerkleProof) -> bool:
    """Verify a MerkleProof against the root it carries."""
    return verify_merkle_proof(proof.leaf, proof.siblings, proof.positions, proof.root)


def compute_proof_length(num_leaves: int) -> int:
    """
    Number of (sibling, position) pairs in a proof: ceil(log2(N)), 0 for N <= 1.
    """
    if num_leaves <= 1:
        return 0
    return (num_leaves - 1).bit_length()


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of stored levels for a tree with given number of leaves.

    An empty tree still has its one (empty) leaf level.
    """
    if num_leaves == 0:
        return 1
    return compute_proof_length(num_leaves) + 1


__all__ = [
    "Level",
    "MerkleProof",
    "MerkleTree",
    "merkle_parent",
    "build_merkle_root",
    "verify_merkle_proof",
    "verify_proof",
    "compute_proof_length",
    "compute_tree_depth",
]
