"""
CLI Inspect Commands

Compute the root, or a single record's proof, without writing any files.

Usage:
    airdrop root [--input users.json] [--json]
    airdrop proof INDEX [--input users.json] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from core.config.runtime import RuntimeConfig
from core.crypto.hashing import to_hex
from core.merkle.merkle_proofs import MerkleProver
from core.schemas.errors import AirdropException, EmptyCommitmentError
from orchestrator.artifacts.io import load_records

from airdrop_cli.commands.build import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, print_error


logger = logging.getLogger(__name__)


def _load_prover(args: Namespace) -> MerkleProver:
    config: RuntimeConfig = getattr(args, "runtime_config", None) or RuntimeConfig()
    record_set = load_records(args.input or config.paths.input_file)
    return MerkleProver.from_records(record_set.users)


def root_cmd(args: Namespace) -> int:
    """Print the Merkle root of the input records."""
    try:
        prover = _load_prover(args)
        if prover.root is None:
            raise EmptyCommitmentError()
    except AirdropException as e:
        logger.error(f"Root computation failed: {e.message}")
        print_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    root_hex = to_hex(prover.root)
    if args.json:
        print(json.dumps({"root": root_hex, "leaf_count": prover.tree.leaf_count}, indent=2))
    else:
        print(root_hex)
    return EXIT_SUCCESS


def proof_cmd(args: Namespace) -> int:
    """Print the published proof record for one input record."""
    try:
        prover = _load_prover(args)
        proof_record = prover.prove_record(args.index)
    except AirdropException as e:
        logger.error(f"Proof generation failed: {e.message}")
        print_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(proof_record.model_dump_json(indent=2))
    else:
        print(f"address: {proof_record.address}")
        print(f"amount: {proof_record.amount}")
        print(f"positions: {proof_record.positions}")
        print("proof:")
        for sibling in proof_record.proof:
            print(f"  0x{sibling}")
    return EXIT_SUCCESS
