"""
Schemas & Errors
File: records.py

Purpose: Input record and output proof schemas for airdrop commitments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StringConstraints, model_validator

from core.crypto.hashing import from_hex, to_hex

if TYPE_CHECKING:
    from core.merkle.merkle_tree import MerkleProof


# Largest amount representable in the 8-byte amount encoding
MAX_AMOUNT: int = 2**64 - 1

# One sibling digest: 32 bytes as lowercase hex, no prefix
SiblingHex = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{64}$")]


class Record(BaseModel):
    """A single committed (address, amount) entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    address: str = Field(..., description="Hex address, 0x prefix optional")
    amount: StrictInt = Field(..., ge=0, le=MAX_AMOUNT, description="Unsigned 64-bit amount")


class RecordSet(BaseModel):
    """
    The input document.

    Record order is significant: it fixes each record's leaf index
    and therefore the root.
    """

    model_config = ConfigDict(extra="forbid")

    users: list[Record] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.users)


class ProofRecord(BaseModel):
    """
    Published inclusion proof for one record.

    `proof` holds sibling digests as lowercase hex without prefix,
    closest to the leaves first. `positions[j]` is True when the path
    node was the right-hand element of its pair at level j.
    """

    model_config = ConfigDict(extra="forbid")

    address: str
    amount: StrictInt = Field(..., ge=0, le=MAX_AMOUNT)
    proof: list[SiblingHex] = Field(default_factory=list)
    positions: list[bool] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_lengths(self) -> "ProofRecord":
        if len(self.proof) != len(self.positions):
            raise ValueError(
                f"proof has {len(self.proof)} hashes but {len(self.positions)} positions"
            )
        return self

    @classmethod
    def from_proof(cls, record: Record, proof: "MerkleProof") -> "ProofRecord":
        """Render an in-memory proof in its published form."""
        return cls(
            address=record.address,
            amount=record.amount,
            proof=[to_hex(sibling) for sibling in proof.siblings],
            positions=list(proof.positions),
        )

    def to_siblings(self) -> list[bytes]:
        """Decode the sibling digests back to bytes."""
        return [from_hex(h) for h in self.proof]


__all__ = [
    "MAX_AMOUNT",
    "SiblingHex",
    "Record",
    "RecordSet",
    "ProofRecord",
]
