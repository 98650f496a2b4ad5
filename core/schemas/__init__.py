"""
Schemas & Errors
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error taxonomy
from .errors import (
    AirdropError,
    AirdropException,
    EmptyCommitmentError,
    EncodingError,
    ErrorCodes,
    IndexOutOfBounds,
)

# Records
from .records import (
    MAX_AMOUNT,
    ProofRecord,
    Record,
    RecordSet,
)

__all__ = [
    # Errors
    "AirdropError",
    "AirdropException",
    "EmptyCommitmentError",
    "EncodingError",
    "ErrorCodes",
    "IndexOutOfBounds",
    # Records
    "MAX_AMOUNT",
    "ProofRecord",
    "Record",
    "RecordSet",
]
