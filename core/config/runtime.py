"""
Runtime Configuration

Central configuration for file locations and logging of a commitment run.
The Merkle core reads none of this; it is handed to the pipeline and CLI.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()


ENV_PREFIX = "AIRDROP_"

DEFAULT_INPUT_FILE = "users.json"
DEFAULT_ROOT_FILE = "merkle_root.txt"
DEFAULT_PROOF_FILE = "merkle_proof.json"


@dataclass
class PathsConfig:
    """Input and output file locations."""
    input_file: str = DEFAULT_INPUT_FILE
    root_file: str = DEFAULT_ROOT_FILE
    proof_file: str = DEFAULT_PROOF_FILE


@dataclass
class LoggingConfig:
    """Configuration for process-wide logging."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    paths: PathsConfig = field(default_factory=PathsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - AIRDROP_INPUT_FILE: Input JSON with the records
        - AIRDROP_ROOT_FILE: Where the hex root is written
        - AIRDROP_PROOF_FILE: Where the proofs JSON is written
        - AIRDROP_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
        - AIRDROP_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        for key in ("input_file", "root_file", "proof_file"):
            value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
            if value:
                overrides.setdefault("paths", {})[key] = value

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
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        paths_data = data.get("paths", {}) or {}
        logging_data = data.get("logging", {}) or {}

        paths = PathsConfig(**paths_data) if paths_data else PathsConfig()
        logging_config = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            paths=paths,
            logging=logging_config,
            extra=data.get("extra", {}) or {},
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

        for key, value in overrides.get("paths", {}).items():
            setattr(new_config.paths, key, value)

        for key, value in overrides.get("logging", {}).items():
            setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "paths": {
                "input_file": self.paths.input_file,
                "root_file": self.paths.root_file,
                "proof_file": self.paths.proof_file,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from a YAML file and/or the environment.

    Environment variables override file settings. Without an explicit
    path, ./airdrop.yaml and ~/.config/airdrop/config.yaml are tried.
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()

    default_paths = [
        Path.cwd() / "airdrop.yaml",
        Path.home() / ".config" / "airdrop" / "config.yaml",
    ]
    for default_path in default_paths:
        if default_path.exists():
            return RuntimeConfig.from_yaml(default_path).with_env_overrides()

    return RuntimeConfig.from_env()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return yaml.safe_dump(RuntimeConfig().to_dict(), sort_keys=False)
