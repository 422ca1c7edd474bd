"""
API Dependencies

Resolves the runtime configuration and the hasher for each request.
"""

from __future__ import annotations

import logging

from api.errors import InvalidRequestError
from core.config.runtime import RuntimeConfig, load_config
from core.crypto.hashing import Hasher, get_hasher

logger = logging.getLogger(__name__)


def get_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from the default config file locations, then env vars.

    Search order for config file:
      1. ./allowlist.json
      2. ./.allowlist.json
      3. ~/.config/allowlist/config.json

    Environment variables ALWAYS override config file values.
    The .env file is loaded automatically by core.config.runtime on import.
    """
    return load_config()


def resolve_hasher(hash_algorithm: str | None) -> Hasher:
    """Per-request algorithm wins over the server-wide configuration.

    Raises:
        InvalidRequestError: if the requested algorithm is not supported.
    """
    if hash_algorithm is None:
        return get_runtime_config().merkle.hasher()
    try:
        return get_hasher(hash_algorithm)
    except ValueError as e:
        logger.debug(f"Rejected hash algorithm {hash_algorithm!r}")
        raise InvalidRequestError(str(e), details={"hash_algorithm": hash_algorithm}) from e
