"""
Common test fixtures shared by all modules.

Provides factory functions for core data structures:
- Record / RecordSet
- Leaf digests
- Input documents on disk
"""

import json
from pathlib import Path
from typing import Optional

from core.merkle.leaves import leaf_hash
from core.schemas.records import Record, RecordSet


# Four realistic 32-byte addresses
SAMPLE_USERS: list[tuple[str, int]] = [
    ("0x73d820fdc9febcbdb9824ce83d5939e6b4dd6cc251e8714a7da6eac64f2468bf", 100),
    ("0x05725e2fd119370a9da4b3afab923f9c35f454c810e175177f06a352de8a26d8", 200),
    ("0x4d2672eca0dcf730350502b9c5f0742cbee0ff10fd69b6c9414407bf15d4b7d1", 300),
    ("0x60db2945ec2e70071427892e671bcb1a242c2e7927d420abdfce4c854d01c6c8", 400),
]


def make_record(address: str = "0x1", amount: int = 100) -> Record:
    """Create a single Record."""
    return Record(address=address, amount=amount)


def make_records(count: Optional[int] = None) -> list[Record]:
    """
    Create Records.

    Without a count, the four SAMPLE_USERS are returned; with a count,
    short sequential addresses 0x0, 0x1, ... with amounts 100, 200, ...
    """
    if count is None:
        return [Record(address=a, amount=amt) for a, amt in SAMPLE_USERS]
    return [Record(address=f"0x{i:x}", amount=(i + 1) * 100) for i in range(count)]


def make_leaves(count: int) -> list[bytes]:
    """Create leaf digests for make_records(count)."""
    return [leaf_hash(r.address, r.amount) for r in make_records(count)]


def write_users_file(path: Path, records: list[Record]) -> Path:
    """Write an input document {"users": [...]} to path."""
    record_set = RecordSet(users=records)
    path.write_text(json.dumps(record_set.model_dump(mode="json"), indent=2))
    return path
