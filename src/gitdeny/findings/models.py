"""Violation and scan-result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Violation:
    """One rule (or credential check) that fired for one file.

    ``file_path`` is the path exactly as it was handed to the checker.
    """

    file_path: str
    rule_caption: str
    description: str = ""


@dataclass
class ScanResult:
    """Complete result of a scan run."""

    violations: List[Violation] = field(default_factory=list)
    checked_files: int = 0
    rules_loaded: int = 0
    scan_duration_ms: float = 0.0

    @property
    def total_violations(self) -> int:
        return len(self.violations)

    @property
    def blocked(self) -> bool:
        """Any violation rejects the commit."""
        return bool(self.violations)

    @property
    def files_with_violations(self) -> List[str]:
        return sorted({v.file_path for v in self.violations})

    def sorted_violations(self) -> List[Violation]:
        """Violations grouped by file, keeping each file's own order."""
        return sorted(self.violations, key=lambda v: v.file_path)
