"""
Airdrop CLI

Command-line interface for building airdrop Merkle commitments.

Usage:
    python -m airdrop_cli build --input users.json
    python -m airdrop_cli root --input users.json
    python -m airdrop_cli proof 3 --input users.json
    python -m airdrop_cli config --init
"""

__version__ = "0.1.0"
