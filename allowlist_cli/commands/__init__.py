"""
CLI command modules.
"""

from allowlist_cli.commands import root, proof, verify, show

__all__ = ["root", "proof", "verify", "show"]
