"""
Runtime Configuration Module

Provides configuration loading and management for commitment runs.
"""

from .runtime import (
    LoggingConfig,
    PathsConfig,
    RuntimeConfig,
    get_default_config_template,
    load_config,
)

__all__ = [
    "LoggingConfig",
    "PathsConfig",
    "RuntimeConfig",
    "get_default_config_template",
    "load_config",
]
