"""Configuration loading, schema, and defaults."""

from gitdeny.config.loader import ConfigError, load_config
from gitdeny.config.schema import GitDenyConfig, OutputConfig, ScanConfig

__all__ = [
    "ConfigError",
    "GitDenyConfig",
    "OutputConfig",
    "ScanConfig",
    "load_config",
]
