"""
Commitment Pipeline

In-process runner composing the Merkle core with artifact IO:
records -> leaves -> tree -> one proof per record -> root and proof files.

The Merkle core is pure; every file path and the log setup arrive here
through RuntimeConfig.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from core.config.runtime import RuntimeConfig
from core.crypto.hashing import to_hex
from core.merkle.merkle_proofs import MerkleProver
from core.merkle.merkle_tree import MerkleTree
from core.schemas.errors import EmptyCommitmentError
from core.schemas.records import ProofRecord, Record

from orchestrator.artifacts.io import load_records, save_commitment


logger = logging.getLogger(__name__)


@dataclass
class CommitmentResult:
    """Complete result of a commitment run."""

    tree: MerkleTree
    records: list[Record]
    proofs: list[ProofRecord] = field(default_factory=list)
    root_path: Optional[Path] = None
    proof_path: Optional[Path] = None

    @property
    def root(self) -> Optional[bytes]:
        return self.tree.root

    @property
    def root_hex(self) -> Optional[str]:
        return to_hex(self.root) if self.root is not None else None

    def to_dict(self) -> dict:
        return {
            "root": self.root_hex,
            "leaf_count": self.tree.leaf_count,
            "depth": self.tree.depth,
            "root_file": str(self.root_path) if self.root_path else None,
            "proof_file": str(self.proof_path) if self.proof_path else None,
        }


class CommitmentPipeline:
    """
    Builds the commitment over a record list and its per-record proofs.

    Usage:
        pipeline = CommitmentPipeline(RuntimeConfig.from_env())
        result = pipeline.run_from_files()
        print(result.root_hex)
    """

    def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
        self.config = config or RuntimeConfig()

    def run(self, records: Sequence[Record]) -> CommitmentResult:
        """
        Build the tree and every proof, in memory.

        An empty record list yields a result whose root is None.

        Raises:
            EncodingError: If any record cannot be encoded
        """
        prover = MerkleProver.from_records(records)
        tree = prover.tree

        if tree.root is None:
            logger.warning("No records supplied, tree has no root")
            return CommitmentResult(tree=tree, records=list(records))

        logger.info(f"Merkle Root: {to_hex(tree.root, prefix=True)}")

        proofs: list[ProofRecord] = []
        for index, record in enumerate(records):
            proof_record = prover.prove_record(index)
            proofs.append(proof_record)

            logger.info(f"Proof for user {index} ({record.address}): positions={proof_record.positions}")
            for sibling in proof_record.proof:
                logger.debug(f"  0x{sibling}")

        return CommitmentResult(tree=tree, records=list(records), proofs=proofs)

    def run_from_files(
        self,
        input_file: str | Path | None = None,
        root_file: str | Path | None = None,
        proof_file: str | Path | None = None,
    ) -> CommitmentResult:
        """
        Read records, build the commitment, and write the root and proofs.

        Arguments default to the configured paths.

        Raises:
            ArtifactIOError: If the input cannot be read or outputs written
            EncodingError: If any record cannot be encoded
            EmptyCommitmentError: If the input holds no records
        """
        paths = self.config.paths
        record_set = load_records(input_file or paths.input_file)

        result = self.run(record_set.users)
        if result.root is None:
            raise EmptyCommitmentError(
                details={"input_file": str(input_file or paths.input_file)},
            )

        result.root_path, result.proof_path = save_commitment(
            result.root,
            result.proofs,
            root_file or paths.root_file,
            proof_file or paths.proof_file,
        )
        return result


__all__ = [
    "CommitmentPipeline",
    "CommitmentResult",
]
