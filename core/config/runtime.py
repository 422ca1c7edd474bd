"""
Runtime Configuration

Central configuration for tree hashing and logging.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.crypto.hashing import KECCAK256, Hasher, get_hasher

load_dotenv()


ENV_PREFIX = "ALLOWLIST_"


@dataclass
class MerkleConfig:
    """Configuration for tree construction."""
    hash_algorithm: str = KECCAK256

    def hasher(self) -> Hasher:
        return get_hasher(self.hash_algorithm)


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON file
    - Programmatic construction
    """
    merkle: MerkleConfig = field(default_factory=MerkleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - ALLOWLIST_HASH_ALGORITHM: keccak256 or sha256
        - ALLOWLIST_LOG_LEVEL: Log level name
        - ALLOWLIST_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("merkle", {})["hash_algorithm"] = (
                os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM", KECCAK256).lower()
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        merkle_data = data.get("merkle", {})
        logging_data = data.get("logging", {})

        merkle = MerkleConfig(**merkle_data) if merkle_data else MerkleConfig()
        log_config = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        # Fail at load time rather than at first build
        get_hasher(merkle.hash_algorithm)

        return cls(
            merkle=merkle,
            logging=log_config,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "merkle" in overrides:
            for key, value in overrides["merkle"].items():
                setattr(new_config.merkle, key, value)
            get_hasher(new_config.merkle.hash_algorithm)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "merkle": {
                "hash_algorithm": self.merkle.hash_algorithm,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def default_config_paths() -> list[Path]:
    """Config file search order."""
    return [
        Path.cwd() / "allowlist.json",
        Path.cwd() / ".allowlist.json",
        Path.home() / ".config" / "allowlist" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    An explicit path must exist. Without one, the default locations are
    searched and the first existing file wins. Environment variables
    always override file values.
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for path in default_config_paths():
            if path.exists():
                config = RuntimeConfig.from_file(path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
