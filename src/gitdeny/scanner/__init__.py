"""Scanner — file checker, checking pipeline, .npmrc credential check."""

from gitdeny.scanner.checker import FileChecker, split_path
from gitdeny.scanner.engine import scan
from gitdeny.scanner.npmrc import CredentialScanError, check_npmrc

__all__ = [
    "CredentialScanError",
    "FileChecker",
    "check_npmrc",
    "scan",
    "split_path",
]
