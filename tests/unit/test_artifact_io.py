"""
Artifact IO Tests
Tests for orchestrator/artifacts/io.py

1. Records load in file order
2. Root file is lowercase hex, no prefix
3. Proofs file round-trips and verifies against the saved root
4. Missing / malformed files raise ArtifactIOError
5. Root and proofs are written together or not at all
"""
import json

import pytest

from core.merkle.merkle_proofs import MerkleProver, MerkleVerifier
from core.schemas.errors import ErrorCodes
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

from fixtures import SAMPLE_USERS


class TestLoadRecords:
    """Tests for load_records()."""

    def test_load_in_file_order(self, users_file):
        record_set = load_records(users_file)

        assert [(r.address, r.amount) for r in record_set.users] == SAMPLE_USERS

    def test_missing_file(self, tmp_path):
        with pytest.raises(ArtifactIOError, match="not found") as exc_info:
            load_records(tmp_path / "nope.json")

        assert exc_info.value.code == ErrorCodes.ARTIFACT_IO_ERROR
        assert exc_info.value.details["path"].endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text("{not json")

        with pytest.raises(ArtifactIOError, match="parse JSON"):
            load_records(path)

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"users": [{"address": "0x1", "amount": -5}]}))

        with pytest.raises(ArtifactIOError, match="Invalid records"):
            load_records(path)

    def test_empty_users(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"users": []}))

        assert len(load_records(path)) == 0


class TestRootFile:
    """Tests for save_root() / load_root()."""

    def test_root_file_contents(self, tmp_path):
        root = bytes.fromhex("AB" * 32)
        path = save_root(root, tmp_path / "merkle_root.txt")

        assert path.read_text() == "ab" * 32
        assert load_root(path) == root

    def test_creates_parent_dirs(self, tmp_path):
        path = save_root(b"\x01" * 32, tmp_path / "out" / "root.txt")

        assert path.exists()

    def test_invalid_root_file(self, tmp_path):
        path = tmp_path / "root.txt"
        path.write_text("xyz")

        with pytest.raises(ArtifactIOError, match="Invalid root"):
            load_root(path)


class TestProofFile:
    """Tests for save_proofs() / load_proofs()."""

    def test_proofs_file_shape(self, tmp_path, sample_records):
        proofs = MerkleProver.from_records(sample_records).prove_all()
        path = save_proofs(proofs, tmp_path / "merkle_proof.json")

        data = json.loads(path.read_text())

        assert isinstance(data, list)
        assert len(data) == 4
        assert set(data[0]) == {"address", "amount", "proof", "positions"}
        assert data[0]["address"] == SAMPLE_USERS[0][0]
        assert data[0]["amount"] == SAMPLE_USERS[0][1]

    def test_pretty_printed(self, sample_records):
        proofs = MerkleProver.from_records(sample_records).prove_all()

        assert dump_proofs(proofs).startswith("[\n  {")

    def test_saved_proofs_verify_against_saved_root(self, tmp_path, sample_records):
        prover = MerkleProver.from_records(sample_records)
        root_path = save_root(prover.root, tmp_path / "merkle_root.txt")
        proof_path = save_proofs(prover.prove_all(), tmp_path / "merkle_proof.json")

        root = load_root(root_path)
        for proof_record in load_proofs(proof_path):
            assert MerkleVerifier.verify_proof_record(proof_record, root)

    def test_invalid_proofs_file(self, tmp_path):
        path = tmp_path / "merkle_proof.json"
        path.write_text(json.dumps([{"address": "0x1", "amount": 1, "proof": ["00"], "positions": []}]))

        with pytest.raises(ArtifactIOError, match="Invalid proofs"):
            load_proofs(path)

    @pytest.mark.parametrize("sibling", ["zz", "ab" * 31])
    def test_malformed_sibling_in_proofs_file(self, tmp_path, sibling):
        path = tmp_path / "merkle_proof.json"
        path.write_text(json.dumps([{"address": "0x1", "amount": 1, "proof": [sibling], "positions": [True]}]))

        with pytest.raises(ArtifactIOError, match="Invalid proofs") as exc_info:
            load_proofs(path)

        assert exc_info.value.code == ErrorCodes.ARTIFACT_IO_ERROR


class TestSaveCommitment:
    """Tests for save_commitment()."""

    def test_writes_both_files(self, tmp_path, sample_records):
        prover = MerkleProver.from_records(sample_records)

        root_path, proof_path = save_commitment(
            prover.root,
            prover.prove_all(),
            tmp_path / "merkle_root.txt",
            tmp_path / "merkle_proof.json",
        )

        root = load_root(root_path)
        assert root == prover.root
        for proof_record in load_proofs(proof_path):
            assert MerkleVerifier.verify_proof_record(proof_record, root)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["merkle_proof.json", "merkle_root.txt"]

    def test_unwritable_proofs_leaves_previous_root(self, tmp_path, sample_records):
        prover = MerkleProver.from_records(sample_records)
        root_path = tmp_path / "merkle_root.txt"
        root_path.write_text("previous")
        proof_dir = tmp_path / "proofs_dir"
        proof_dir.mkdir()

        with pytest.raises(ArtifactIOError) as exc_info:
            save_commitment(prover.root, prover.prove_all(), root_path, proof_dir)

        assert exc_info.value.details["path"] == str(proof_dir)
        assert root_path.read_text() == "previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["merkle_root.txt", "proofs_dir"]
