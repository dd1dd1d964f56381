"""Credential check for ``.npmrc`` files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

_AUTH_MARKER = "_auth="
_AUTH_TOKEN_MARKER = "_authToken="


class CredentialScanError(Exception):
    """Raised when an .npmrc file cannot be read."""


def check_npmrc(path: Union[str, Path]) -> List[str]:
    """Return one finding per auth marker in the .npmrc at *path*, in file order.

    ``_auth=`` and ``_authToken=`` are checked independently, so a line that
    carries both yields two findings. Lines split on ``\\n`` only; a lone
    ``\\r`` does not start a new line.
    """
    findings: List[str] = []
    try:
        with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
            for line_no, raw in enumerate(f, 1):
                line = raw.rstrip("\n").rstrip("\r")
                if _AUTH_MARKER in line:
                    findings.append(f"Found _auth token at line {line_no}")
                if _AUTH_TOKEN_MARKER in line:
                    findings.append(f"Found _authToken at line {line_no}")
    except OSError as exc:
        raise CredentialScanError(f"error reading .npmrc {path}: {exc}") from exc
    return findings
