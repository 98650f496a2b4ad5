"""
Commitment Orchestration

Public API:
- CommitmentPipeline: Runs records through the Merkle core and writes artifacts
- CommitmentResult: Tree, proofs and output locations of a run
- ArtifactIOError: Raised for unreadable input or unwritable output
"""

from orchestrator.artifacts.io import ArtifactIOError
from orchestrator.pipeline import CommitmentPipeline, CommitmentResult

__all__ = [
    "ArtifactIOError",
    "CommitmentPipeline",
    "CommitmentResult",
]
