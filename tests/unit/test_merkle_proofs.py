"""
Merkle Prover / Verifier Unit Tests
Tests for core/merkle/merkle_proofs.py
"""
import pytest

from core.crypto.hashing import sha3_256
from core.merkle.leaves import leaf_hash
from core.merkle.merkle_proofs import MerkleProver, MerkleVerifier
from core.schemas.errors import EncodingError, IndexOutOfBounds
from core.schemas.records import ProofRecord, Record

from fixtures import make_records


class TestMerkleProver:
    """Tests for MerkleProver."""

    def test_from_records_builds_leaves_in_order(self, sample_records):
        prover = MerkleProver.from_records(sample_records)

        assert list(prover.tree.leaves) == [leaf_hash(r.address, r.amount) for r in sample_records]
        assert prover.root == prover.tree.root

    def test_prove_verifies(self, sample_records):
        prover = MerkleProver.from_records(sample_records)

        for i in range(len(sample_records)):
            assert MerkleVerifier.verify(prover.prove(i))

    def test_prove_record_shape(self, sample_records):
        prover = MerkleProver.from_records(sample_records)

        proof_record = prover.prove_record(1)

        assert proof_record.address == sample_records[1].address
        assert proof_record.amount == sample_records[1].amount
        assert len(proof_record.proof) == 2
        assert proof_record.positions == [True, False]
        assert all(len(h) == 64 and h == h.lower() for h in proof_record.proof)

    def test_prove_all_one_per_record(self):
        records = make_records(7)
        proofs = MerkleProver.from_records(records).prove_all()

        assert [p.address for p in proofs] == [r.address for r in records]

    def test_prove_record_out_of_range(self, sample_records):
        prover = MerkleProver.from_records(sample_records)

        with pytest.raises(IndexOutOfBounds):
            prover.prove_record(len(sample_records))
        with pytest.raises(IndexOutOfBounds):
            prover.prove_record(-1)

    def test_empty_records(self):
        prover = MerkleProver.from_records([])

        assert prover.root is None
        assert prover.prove_all() == []

    def test_unencodable_record_raises(self):
        records = [Record(address="0xzz", amount=1)]

        with pytest.raises(EncodingError):
            MerkleProver.from_records(records)


class TestMerkleVerifier:
    """Tests for MerkleVerifier."""

    def test_verify_record(self, sample_records):
        prover = MerkleProver.from_records(sample_records)
        siblings, positions = prover.tree.generate_proof(2)
        record = sample_records[2]

        assert MerkleVerifier.verify_record(record.address, record.amount, siblings, positions, prover.root)

    def test_verify_record_wrong_amount(self, sample_records):
        prover = MerkleProver.from_records(sample_records)
        siblings, positions = prover.tree.generate_proof(2)
        record = sample_records[2]

        assert not MerkleVerifier.verify_record(
            record.address, record.amount + 1, siblings, positions, prover.root
        )

    def test_verify_leaf_in_root(self, sample_records):
        prover = MerkleProver.from_records(sample_records)
        siblings, positions = prover.tree.generate_proof(0)

        assert MerkleVerifier.verify_leaf_in_root(prover.tree.leaves[0], siblings, positions, prover.root)
        assert not MerkleVerifier.verify_leaf_in_root(sha3_256(b"x"), siblings, positions, prover.root)

    def test_verify_proof_record(self, sample_records):
        prover = MerkleProver.from_records(sample_records)

        for proof_record in prover.prove_all():
            assert MerkleVerifier.verify_proof_record(proof_record, prover.root)

    def test_verify_proof_record_tampered(self, sample_records):
        prover = MerkleProver.from_records(sample_records)
        proof_record = prover.prove_record(3)
        tampered = ProofRecord(
            address=proof_record.address,
            amount=proof_record.amount,
            proof=list(reversed(proof_record.proof)),
            positions=proof_record.positions,
        )

        assert not MerkleVerifier.verify_proof_record(tampered, prover.root)
