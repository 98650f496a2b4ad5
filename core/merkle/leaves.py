"""
Leaf Builder
Combines an encoded address and amount into one leaf digest.

Rule: leaf = sha3_256(encode_address(address) + encode_amount(amount))

Any change to field order, widths or hash breaks every proof issued
under the previous format; LEAF_FORMAT names the current one.
"""
from __future__ import annotations

from typing import Iterable, NamedTuple

from core.crypto.hashing import sha3_256
from core.encoding.byte_encoder import (
    ADDRESS_SIZE,
    AMOUNT_SIZE,
    encode_address,
    encode_amount,
)
from core.schemas.records import Record


class LeafFormat(NamedTuple):
    """Versioned description of the leaf preimage layout."""
    version: int
    address_width: int
    amount_width: int
    order: tuple[str, ...]
    hash_name: str


LEAF_FORMAT = LeafFormat(
    version=1,
    address_width=ADDRESS_SIZE,
    amount_width=AMOUNT_SIZE,
    order=("address", "amount"),
    hash_name="sha3_256",
)


def leaf_hash(address: str, amount: int) -> bytes:
    """
    Compute the leaf digest for one (address, amount) record.

    Raises:
        EncodingError: If either field cannot be encoded
    """
    return sha3_256(encode_address(address) + encode_amount(amount))


def build_leaves(records: Iterable[Record]) -> list[bytes]:
    """Compute leaf digests in record order."""
    return [leaf_hash(record.address, record.amount) for record in records]


__all__ = [
    "LeafFormat",
    "LEAF_FORMAT",
    "leaf_hash",
    "build_leaves",
]
