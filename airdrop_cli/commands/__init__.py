"""
CLI command modules.
"""

from airdrop_cli.commands import build, inspect

__all__ = ["build", "inspect"]
