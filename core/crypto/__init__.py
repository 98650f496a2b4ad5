"""
Core cryptographic utilities.

Provides the SHA3-256 adapter used by leaf and parent hashing.
"""
from .hashing import (
    DIGEST_SIZE,
    sha3_256,
    hash_bytes,
    hash_concat,
    to_hex,
    from_hex,
)

__all__ = [
    "DIGEST_SIZE",
    "sha3_256",
    "hash_bytes",
    "hash_concat",
    "to_hex",
    "from_hex",
]
