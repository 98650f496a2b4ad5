"""
Test fixtures package.

Usage:
    from fixtures import make_records, make_leaves

    def test_something():
        leaves = make_leaves(5)
"""

from .common import (
    SAMPLE_USERS,
    make_record,
    make_records,
    make_leaves,
    write_users_file,
)

__all__ = [
    "SAMPLE_USERS",
    "make_record",
    "make_records",
    "make_leaves",
    "write_users_file",
]
