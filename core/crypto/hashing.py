"""
Hashing Utilities
Hash function adapter for airdrop Merkle commitments.

This module provides:
- SHA3-256 hashing for raw bytes
- Concatenation hashing for Merkle parents
- Hex encoding/decoding for digests

Security/Determinism Notes:
- Every leaf and every parent in a tree is hashed with SHA3-256.
  Proofs are not portable across hash functions, so there is no
  way to swap the primitive per call.
- All operations are deterministic
"""
from __future__ import annotations

import hashlib


# Length in bytes of every digest produced here
DIGEST_SIZE: int = 32


def sha3_256(data: bytes) -> bytes:
    """
    Compute SHA3-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA3-256 digest

    Example:
        >>> sha3_256(b"").hex()
        'a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a'
    """
    return hashlib.sha3_256(data).digest()


def hash_bytes(data: bytes) -> bytes:
    """Alias for sha3_256()."""
    return sha3_256(data)


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is used for computing Merkle parent hashes:
    parent = sha3_256(left + right)

    Args:
        left: Left child hash (32 bytes)
        right: Right child hash (32 bytes)

    Returns:
        32-byte SHA3-256 digest of concatenation
    """
    return sha3_256(left + right)


def to_hex(data: bytes, prefix: bool = False) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Persisted roots and proofs carry no prefix; log lines use
    prefix=True for the familiar "0x..." rendering.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        'deadbeef'
        >>> to_hex(bytes.fromhex("deadbeef"), prefix=True)
        '0xdeadbeef'
    """
    encoded = data.hex()
    return "0x" + encoded if prefix else encoded


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string (0x prefix optional) to bytes.

    Args:
        hex_string: Hex string, with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string has odd length or contains
                   invalid hex characters
    """
    hex_content = hex_string[2:] if hex_string.startswith("0x") else hex_string

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length, got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "DIGEST_SIZE",
    "sha3_256",
    "hash_bytes",
    "hash_concat",
    "to_hex",
    "from_hex",
]
