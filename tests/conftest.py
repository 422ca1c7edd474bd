"""
Pytest configuration and shared fixtures for allowlist Merkle tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_addresses = _common.make_addresses
make_hex_addresses = _common.make_hex_addresses
make_tree = _common.make_tree
scenario_identifiers = _common.scenario_identifiers


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def scenario_tree():
    """Tree over [A, B, B] from the deployment allowlist."""
    from core.merkle.merkle_tree import build_tree
    return build_tree(scenario_identifiers())


@pytest.fixture
def seven_leaf_tree():
    """Odd-sized tree that pads at more than one level."""
    return make_tree(7)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ALLOWLIST_* variables so config tests see defaults."""
    for var in ("ALLOWLIST_HASH_ALGORITHM", "ALLOWLIST_LOG_LEVEL", "ALLOWLIST_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
