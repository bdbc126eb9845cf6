"""
Runtime Configuration

Central configuration for signing keys, output formatting and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


REDACTED = "***"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SigningConfig:
    """Configuration for POD signing."""
    private_key: Optional[str] = None

    def __post_init__(self):
        # Load key from environment if not provided
        if self.private_key is None:
            self.private_key = os.getenv("POD_PRIVATE_KEY") or None


@dataclass
class OutputConfig:
    """Configuration for JSON output."""
    json_indent: Optional[int] = 2
    simplified: bool = False


@dataclass
class LoggingConfig:
    """Configuration for CLI logging."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for POD tooling.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    signing: SigningConfig = field(default_factory=SigningConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - POD_PRIVATE_KEY: Default signing key (64 hex chars)
        - POD_JSON_INDENT: JSON indent for output; "none" for compact
        - POD_SIMPLIFIED_JSON: Read/write simplified entry JSON (true/false)
        - POD_LOG_LEVEL: Logging level name
        - POD_LOG_FILE: Log file path
        """
        overrides: dict[str, Any] = {}

        # Signing
        if os.getenv("POD_PRIVATE_KEY"):
            overrides.setdefault("signing", {})["private_key"] = os.getenv("POD_PRIVATE_KEY")

        # Output
        indent = os.getenv("POD_JSON_INDENT")
        if indent:
            overrides.setdefault("output", {})["json_indent"] = (
                None if indent.strip().lower() == "none" else int(indent)
            )
        if os.getenv("POD_SIMPLIFIED_JSON"):
            overrides.setdefault("output", {})["simplified"] = _env_flag("POD_SIMPLIFIED_JSON")

        # Logging
        if os.getenv("POD_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("POD_LOG_LEVEL", "INFO").upper()
        if os.getenv("POD_LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv("POD_LOG_FILE")

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
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        signing_data = data.get("signing") or {}
        output_data = data.get("output") or {}
        logging_data = data.get("logging") or {}

        signing = SigningConfig(**signing_data) if signing_data else SigningConfig()
        output = OutputConfig(**output_data) if output_data else OutputConfig()
        logging_config = LoggingConfig(**logging_data) if logging_data else LoggingConfig()

        return cls(
            signing=signing,
            output=output,
            logging=logging_config,
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
        for section in ("signing", "output", "logging"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        return new_config

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        """
        Convert configuration to a dictionary.

        The private key is replaced by a marker unless redact is False.
        """
        private_key = self.signing.private_key
        if redact and private_key:
            private_key = REDACTED
        return {
            "signing": {
                "private_key": private_key,
            },
            "output": {
                "json_indent": self.output.json_indent,
                "simplified": self.output.simplified,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
