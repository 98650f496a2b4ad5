"""
CLI Build Command

Read the records, compute the Merkle root and every proof, and write
the root and proof files.

Usage:
    airdrop build [--input users.json] [--root-out merkle_root.txt]
                  [--proof-out merkle_proof.json] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from typing import Any

from core.config.runtime import RuntimeConfig
from core.schemas.errors import AirdropException
from orchestrator.pipeline import CommitmentPipeline, CommitmentResult


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


@dataclass
class BuildSummary:
    """Summary of a build run for CLI output."""
    root: str = ""
    leaf_count: int = 0
    depth: int = 0
    root_file: str = ""
    proof_file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_summary(result: CommitmentResult) -> BuildSummary:
    """Build a BuildSummary from a commitment result."""
    return BuildSummary(
        root=result.root_hex or "",
        leaf_count=result.tree.leaf_count,
        depth=result.tree.depth,
        root_file=str(result.root_path or ""),
        proof_file=str(result.proof_path or ""),
    )


def print_summary_human(summary: BuildSummary) -> None:
    """Print summary in human-readable format."""
    print(f"root: {summary.root}")
    print(f"leaves: {summary.leaf_count}")
    print(f"levels: {summary.depth}")
    print(f"root_file: {summary.root_file}")
    print(f"proof_file: {summary.proof_file}")


def print_error(error: AirdropException, output_json: bool) -> None:
    """Report a fatal error on stderr (as JSON when requested)."""
    if output_json:
        print(error.to_error_model().model_dump_json(indent=2), file=sys.stderr)
    else:
        print(f"Error: {error.message}", file=sys.stderr)


def build_cmd(args: Namespace) -> int:
    """
    Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config: RuntimeConfig = getattr(args, "runtime_config", None) or RuntimeConfig()
    output_json = args.json

    pipeline = CommitmentPipeline(config)
    try:
        result = pipeline.run_from_files(
            input_file=args.input,
            root_file=args.root_out,
            proof_file=args.proof_out,
        )
    except AirdropException as e:
        logger.error(f"Build failed: {e.message}")
        print_error(e, output_json)
        return EXIT_RUNTIME_ERROR

    summary = build_summary(result)
    if output_json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS
