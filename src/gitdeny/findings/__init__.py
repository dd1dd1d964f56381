"""Violation models."""

from gitdeny.findings.models import ScanResult, Violation

__all__ = ["ScanResult", "Violation"]
