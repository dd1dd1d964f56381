"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from gitdeny.findings.models import ScanResult


def to_dict(result: ScanResult) -> Dict[str, Any]:
    """Convert ScanResult to a JSON-serialisable dict."""
    violations: List[Dict[str, Any]] = []
    for v in result.sorted_violations():
        violations.append({
            "file": v.file_path,
            "violation": v.rule_caption,
            **({"description": v.description} if v.description else {}),
        })

    return {
        "version": "1.0",
        "checked_files": result.checked_files,
        "rules_loaded": result.rules_loaded,
        "total_violations": result.total_violations,
        "blocked": result.blocked,
        "violations": violations,
        "scan_duration_ms": result.scan_duration_ms,
    }


def render(result: ScanResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
