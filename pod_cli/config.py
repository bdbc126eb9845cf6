"""
CLI Configuration

Locates and loads the runtime configuration for the POD CLI.
Supports YAML configuration files and environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pod.config import RuntimeConfig


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "pod.yaml",
        Path.cwd() / ".pod.yaml",
        Path.home() / ".config" / "pod" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Merged configuration
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()

    for default_path in default_config_paths():
        if default_path.exists():
            return RuntimeConfig.from_yaml(default_path).with_env_overrides()

    return RuntimeConfig.from_env()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """\
# POD CLI configuration
# Environment variables (POD_* prefix) override these values.

signing:
  # 64 hex chars. Prefer the POD_PRIVATE_KEY environment variable.
  private_key: null

output:
  json_indent: 2
  simplified: false

logging:
  level: INFO
  file: null
"""
