"""
Runtime Configuration Module

Provides configuration loading and logging setup.
"""

from .runtime import (
    HashConfig,
    LoggingConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
    setup_logging,
)

__all__ = [
    "HashConfig",
    "LoggingConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
