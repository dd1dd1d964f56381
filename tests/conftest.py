"""Shared test fixtures — sample rules, rule files, temp git repos."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

import pytest

from gitdeny.rules.loader import build_rule_set
from gitdeny.rules.models import RuleSet
from gitdeny.scanner.checker import FileChecker

SAMPLE_RULES = [
    {
        "part": "filename",
        "type": "match",
        "pattern": ".env",
        "caption": "Environment configuration file",
        "description": "Environment files usually hold secrets.",
    },
    {
        "part": "path",
        "type": "regex",
        "pattern": "\\A.env\\z",
        "caption": "Environment file at repository root",
    },
    {
        "part": "extension",
        "type": "match",
        "pattern": "pem",
        "caption": "Potential cryptographic private key",
    },
    {
        "part": "filename",
        "type": "regex",
        "pattern": "id_rsa",
        "caption": "Private SSH key",
    },
    {
        "part": "filename",
        "type": "match",
        "pattern": ".npmrc",
        "caption": "NPM configuration file",
    },
]


@pytest.fixture
def sample_rules() -> list[dict]:
    return [dict(r) for r in SAMPLE_RULES]


@pytest.fixture
def rule_set(sample_rules) -> RuleSet:
    return build_rule_set(sample_rules)


@pytest.fixture
def checker(rule_set) -> FileChecker:
    return FileChecker(rule_set)


@pytest.fixture
def rules_file(tmp_path: Path, sample_rules) -> Path:
    """Sample rules written as git-deny-patterns.json."""
    path = tmp_path / "git-deny-patterns.json"
    path.write_text(json.dumps(sample_rules), encoding="utf-8")
    return path


@pytest.fixture
def npmrc_with_tokens(tmp_path: Path) -> Path:
    path = tmp_path / ".npmrc"
    path.write_text(
        "registry=https://x\n"
        "//x/:_authToken=abc123\n"
        "_auth=deadbeef\n",
        encoding="utf-8",
    )
    return path


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test")
    readme = repo / "README.md"
    readme.write_text("# Test\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "init")
    return repo


@pytest.fixture
def stage(tmp_git_repo: Path):
    """Write files into the temp repo and stage them."""

    def _stage(files: dict[str, str]) -> None:
        for name, content in files.items():
            path = tmp_git_repo / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        _git(tmp_git_repo, "--literal-pathspecs", "add", "--", *files)

    return _stage
