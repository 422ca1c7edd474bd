"""
CLI Show Command

Print the whole tree, root first.

Usage:
    allowlist show addresses.txt [--json]
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from allowlist_cli.inputs import load_identifiers, resolve_hasher
from core.merkle.merkle_proofs import decode_identifiers
from core.merkle.merkle_tree import build_tree
from core.schemas.errors import AllowlistException


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def show_cmd(args: Namespace) -> int:
    """Execute the show command."""
    try:
        identifiers = load_identifiers(args.source)
        tree = build_tree(decode_identifiers(identifiers), resolve_hasher(args))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except AllowlistException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({"root": tree.hex_root, "levels": tree.hex_levels}, indent=2))
    else:
        print(tree.render())

    return EXIT_SUCCESS
