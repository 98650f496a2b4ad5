"""
Fixed-width encoding of commitment records.
"""
from .byte_encoder import (
    ADDRESS_SIZE,
    AMOUNT_SIZE,
    encode_address,
    encode_amount,
)

__all__ = [
    "ADDRESS_SIZE",
    "AMOUNT_SIZE",
    "encode_address",
    "encode_amount",
]
