"""
Pytest configuration and shared fixtures for airdrop commitment tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_records = _common.make_records
make_leaves = _common.make_leaves
write_users_file = _common.write_users_file


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sample_records():
    """Provide the four sample records."""
    return make_records()


@pytest.fixture
def users_file(tmp_path, sample_records):
    """Provide an input document on disk holding the sample records."""
    return write_users_file(tmp_path / "users.json", sample_records)


@pytest.fixture(autouse=True)
def _clean_airdrop_env(monkeypatch):
    """Keep AIRDROP_* variables from the host out of every test."""
    for key in [
        "AIRDROP_INPUT_FILE",
        "AIRDROP_ROOT_FILE",
        "AIRDROP_PROOF_FILE",
        "AIRDROP_LOG_LEVEL",
        "AIRDROP_LOG_FILE",
    ]:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
