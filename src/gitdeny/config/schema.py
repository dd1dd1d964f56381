"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")

DEFAULT_RULES_FILE = "git-deny-patterns.json"


@dataclass
class ScanConfig:
    rules: str = DEFAULT_RULES_FILE  # relative paths resolve against the repo
    all: bool = False  # check all tracked files instead of staged ones
    max_workers: Optional[int] = None  # None = one worker per file


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class GitDenyConfig:
    version: str = "1.0"
    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
