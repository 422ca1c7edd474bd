"""
Test fixtures package.

This package provides factory functions for creating test objects.

Usage:
    from fixtures import make_addresses, make_tree

    def test_something():
        tree = make_tree(5)
"""

from .common import (
    ADDRESS_A,
    ADDRESS_B,
    ADDRESS_C,
    SCENARIO_ADDRESSES,
    ABSENT_ADDRESS,
    make_address,
    make_addresses,
    make_hex_addresses,
    make_tree,
    scenario_identifiers,
)

__all__ = [
    "ADDRESS_A",
    "ADDRESS_B",
    "ADDRESS_C",
    "SCENARIO_ADDRESSES",
    "ABSENT_ADDRESS",
    "make_address",
    "make_addresses",
    "make_hex_addresses",
    "make_tree",
    "scenario_identifiers",
]
