"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m airdrop_cli build [--input PATH] [--root-out PATH] [--proof-out PATH] [--json]
    python -m airdrop_cli root [--input PATH] [--json]
    python -m airdrop_cli proof INDEX [--input PATH] [--json]
    python -m airdrop_cli config --init|--show [--path PATH]

Environment Variables:
    AIRDROP_INPUT_FILE      Input records JSON (default: users.json)
    AIRDROP_ROOT_FILE       Root output file (default: merkle_root.txt)
    AIRDROP_PROOF_FILE      Proofs output file (default: merkle_proof.json)
    AIRDROP_LOG_LEVEL       Log level (default: INFO)
    AIRDROP_LOG_FILE        Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from airdrop_cli import __version__
from airdrop_cli.commands import build, inspect
from core.config.runtime import get_default_config_template, load_config


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="airdrop",
        description="Airdrop Merkle CLI - Commit to (address, amount) records and issue inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./airdrop.yaml or ~/.config/airdrop/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Compute the root and all proofs and write them to disk",
        description="Read the records file, build the Merkle tree, and write the root and proof files.",
    )
    build_parser.add_argument(
        "--input", "-i",
        type=str,
        default=None,
        help="Input records JSON (default: from config)",
    )
    build_parser.add_argument(
        "--root-out",
        type=str,
        default=None,
        help="Root output file (default: from config)",
    )
    build_parser.add_argument(
        "--proof-out",
        type=str,
        default=None,
        help="Proofs output file (default: from config)",
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    build_parser.set_defaults(func=build.build_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of the records",
    )
    root_parser.add_argument("--input", "-i", type=str, default=None, help="Input records JSON")
    root_parser.add_argument("--json", action="store_true", help="JSON output")
    root_parser.set_defaults(func=inspect.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Print the inclusion proof for one record",
    )
    proof_parser.add_argument("index", type=int, help="0-based record index")
    proof_parser.add_argument("--input", "-i", type=str, default=None, help="Input records JSON")
    proof_parser.add_argument("--json", action="store_true", help="JSON output")
    proof_parser.set_defaults(func=inspect.proof_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="airdrop.yaml",
        help="Path for config file (default: airdrop.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (AIRDROP_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: airdrop config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
