"""Load and merge configuration from .gitdeny.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitdeny.config.schema import (
    OUTPUT_FORMATS,
    GitDenyConfig,
    OutputConfig,
    ScanConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitdeny.toml"

_TRUTHY = ("1", "true", "yes")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitDenyConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r}; "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    workers = cfg.scan.max_workers
    # TOML booleans are ints in Python
    if workers is not None and (
        isinstance(workers, bool) or not isinstance(workers, int) or workers < 1
    ):
        raise ConfigError(f"scan.max_workers must be a positive integer, got {workers!r}")
    if not isinstance(cfg.scan.rules, str) or not cfg.scan.rules:
        raise ConfigError("scan.rules must be a non-empty path")


def _merge_env_overrides(cfg: GitDenyConfig) -> None:
    """Apply GITDENY_* environment variable overrides."""
    if val := os.environ.get("GITDENY_RULES"):
        cfg.scan.rules = val
    if val := os.environ.get("GITDENY_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITDENY_ALL"):
        cfg.scan.all = val.lower() in _TRUTHY
    if val := os.environ.get("GITDENY_MAX_WORKERS"):
        try:
            workers = int(val)
        except ValueError:
            logger.warning("Ignoring GITDENY_MAX_WORKERS=%r: not an integer", val)
        else:
            if workers > 0:
                cfg.scan.max_workers = workers


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitDenyConfig:
    """Load, validate, and return a GitDenyConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitDenyConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = GitDenyConfig(
            version=str(raw.get("version", "1.0")),
            scan=_build_section(raw, ScanConfig, "scan"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
