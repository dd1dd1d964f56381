"""Scan engine — runs the checking pipeline and times it."""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

from gitdeny.findings.models import ScanResult
from gitdeny.scanner.checker import FileChecker

logger = logging.getLogger(__name__)


def scan(
    checker: FileChecker,
    paths: Sequence[str],
    *,
    max_workers: Optional[int] = None,
) -> ScanResult:
    """Check every path in *paths* and return a ScanResult."""
    start = time.perf_counter()

    violations = checker.check_files(paths, max_workers=max_workers)

    elapsed = (time.perf_counter() - start) * 1000
    logger.debug(
        "Checked %d files against %d rules in %.1fms (%d violations)",
        len(paths), len(checker.rules), elapsed, len(violations),
    )

    return ScanResult(
        violations=violations,
        checked_files=len(paths),
        rules_loaded=len(checker.rules),
        scan_duration_ms=round(elapsed, 2),
    )
