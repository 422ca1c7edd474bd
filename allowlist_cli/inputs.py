"""
Identifier list loading for CLI commands.

One 0x-prefixed identifier per line. Blank lines and lines starting
with '#' are skipped; trailing '#' comments are stripped.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from core.crypto.hashing import Hasher, get_hasher


def parse_identifier_lines(text: str) -> list[str]:
    """Extract identifiers from file text, preserving order and duplicates."""
    identifiers: list[str] = []
    for line in text.splitlines():
        entry = line.split("#", 1)[0].strip()
        if entry:
            identifiers.append(entry)
    return identifiers


def load_identifiers(source: str) -> list[str]:
    """Read identifiers from a file path, or from stdin when source is '-'."""
    if source == "-":
        return parse_identifier_lines(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Identifier file not found: {path}")
    return parse_identifier_lines(path.read_text())


def resolve_hasher(args: Namespace) -> Hasher:
    """The --hash flag wins over the loaded configuration."""
    name = getattr(args, "hash", None)
    if name:
        return get_hasher(name)
    return args.cli_config.merkle.hasher()
