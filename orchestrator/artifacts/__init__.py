"""
Artifact IO

Reading records and persisting the root and proof files.
"""

from orchestrator.artifacts.io import (
    ArtifactIOError,
    dump_proofs,
    load_proofs,
    load_records,
    load_root,
    save_commitment,
    save_proofs,
    save_root,
)

__all__ = [
    "ArtifactIOError",
    "dump_proofs",
    "load_proofs",
    "load_records",
    "load_root",
    "save_commitment",
    "save_proofs",
    "save_root",
]
