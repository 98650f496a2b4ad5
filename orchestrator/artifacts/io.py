"""
Artifact IO
File: io.py

Purpose: Read the record input file and write/read the root and proof files.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.crypto.hashing import from_hex, to_hex
from core.schemas.errors import AirdropException, ErrorCodes
from core.schemas.records import ProofRecord, RecordSet


logger = logging.getLogger(__name__)

_PROOF_LIST = TypeAdapter(list[ProofRecord])


class ArtifactIOError(AirdropException):
    """Error reading or writing an artifact file."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        details: dict[str, Any] = {}
        if path is not None:
            details["path"] = str(path)
        super().__init__(message=message, code=ErrorCodes.ARTIFACT_IO_ERROR, details=details)
        self.path = path


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ArtifactIOError(f"File not found: {path}", path=path) from e
    except OSError as e:
        raise ArtifactIOError(f"Failed to read {path}: {e}", path=path) from e


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ArtifactIOError(f"Failed to write {path}: {e}", path=path) from e


def load_records(path: str | Path) -> RecordSet:
    """
    Load the input document {"users": [{"address": ..., "amount": ...}]}.

    Raises:
        ArtifactIOError: If the file is missing, is not JSON, or does not
                         match the record schema
    """
    path = Path(path)
    content = _read_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ArtifactIOError(f"Failed to parse JSON in {path}: {e}", path=path) from e

    try:
        records = RecordSet.model_validate(data)
    except ValidationError as e:
        raise ArtifactIOError(f"Invalid records in {path}: {e}", path=path) from e

    logger.info(f"Loaded {len(records)} records from {path}")
    return records


def save_root(root: bytes, path: str | Path) -> Path:
    """Write the root as lowercase hex without prefix (no trailing newline)."""
    path = Path(path)
    _write_text(path, to_hex(root))
    logger.info(f"Root saved to {path}")
    return path


def load_root(path: str | Path) -> bytes:
    """Read a root written by save_root()."""
    path = Path(path)
    content = _read_text(path).strip()
    try:
        return from_hex(content)
    except ValueError as e:
        raise ArtifactIOError(f"Invalid root in {path}: {e}", path=path) from e


def dump_proofs(proofs: list[ProofRecord]) -> str:
    """Serialize proof records as a pretty-printed JSON array."""
    return json.dumps(
        [p.model_dump(mode="json") for p in proofs],
        indent=2,
    )


def save_proofs(proofs: list[ProofRecord], path: str | Path) -> Path:
    """Write all proof records to a JSON file."""
    path = Path(path)
    _write_text(path, dump_proofs(proofs))
    logger.info(f"All proofs saved to {path}")
    return path


def _stage_text(path: Path, content: str) -> Path:
    """Write content to a temp file beside path and return the temp path."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            try:
                tmp.write(content)
            except OSError:
                Path(tmp.name).unlink(missing_ok=True)
                raise
        return Path(tmp.name)
    except OSError as e:
        raise ArtifactIOError(f"Failed to write {path}: {e}", path=path) from e


def save_commitment(
    root: bytes,
    proofs: list[ProofRecord],
    root_path: str | Path,
    proof_path: str | Path,
) -> tuple[Path, Path]:
    """
    Write the root and proofs files together.

    Both files are staged next to their targets and only moved into
    place once both are fully written. The root is moved last, so a
    failed write never leaves a new root beside missing or stale proofs.

    Raises:
        ArtifactIOError: If either file cannot be written
    """
    root_path = Path(root_path)
    proof_path = Path(proof_path)

    for path in (root_path, proof_path):
        if path.is_dir():
            raise ArtifactIOError(f"Failed to write {path}: is a directory", path=path)

    staged: list[Path] = []
    try:
        staged.append(_stage_text(root_path, to_hex(root)))
        staged.append(_stage_text(proof_path, dump_proofs(proofs)))

        # proofs first: a failed root move leaves no new root behind
        for tmp, target in ((staged[1], proof_path), (staged[0], root_path)):
            try:
                os.replace(tmp, target)
            except OSError as e:
                raise ArtifactIOError(f"Failed to write {target}: {e}", path=target) from e
    finally:
        for tmp in staged:
            tmp.unlink(missing_ok=True)

    logger.info(f"Root saved to {root_path}")
    logger.info(f"All proofs saved to {proof_path}")
    return root_path, proof_path


def load_proofs(path: str | Path) -> list[ProofRecord]:
    """Read proof records written by save_proofs()."""
    path = Path(path)
    content = _read_text(path)
    try:
        return _PROOF_LIST.validate_json(content)
    except ValidationError as e:
        raise ArtifactIOError(f"Invalid proofs in {path}: {e}", path=path) from e


__all__ = [
    "ArtifactIOError",
    "load_records",
    "save_root",
    "load_root",
    "dump_proofs",
    "save_proofs",
    "save_commitment",
    "load_proofs",
]
