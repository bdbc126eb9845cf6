"""
Runtime Configuration Module

Provides configuration loading and management for POD tooling.
"""

from .runtime import (
    LoggingConfig,
    OutputConfig,
    RuntimeConfig,
    SigningConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "SigningConfig",
    "OutputConfig",
    "LoggingConfig",
    "get_default_config",
    "set_default_config",
]
