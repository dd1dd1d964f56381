"""File checker — applies every rule to a path, and fans out across many paths."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple

from gitdeny.findings.models import Violation
from gitdeny.rules.models import Part, Rule, RuleSet
from gitdeny.scanner.npmrc import CredentialScanError, check_npmrc

logger = logging.getLogger(__name__)

NPMRC_FILENAME = ".npmrc"

_SEPARATORS = os.sep + (os.altsep or "")


def split_path(path: str) -> Tuple[str, str]:
    """Return ``(filename, extension)`` for *path*.

    The extension is the text after the last dot of the filename, without the
    dot, or ``""`` when the filename has none (``.env`` -> ``env``).
    """
    filename = os.path.basename(path.rstrip(_SEPARATORS))
    _, dot, ext = filename.rpartition(".")
    return filename, ext if dot else ""


class FileChecker:
    """Check file paths against a loaded RuleSet.

    The RuleSet is read-only once built, so one checker can be shared by any
    number of worker threads.
    """

    def __init__(self, rule_set: RuleSet) -> None:
        self._rules = rule_set.rules
        self._patterns = rule_set.patterns

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def _matches(self, rule: Rule, value: str) -> bool:
        if rule.is_regex:
            return self._patterns[rule.pattern].search(value) is not None
        return value == rule.pattern

    def check_file(self, path: str) -> List[Violation]:
        """Return every violation for *path*, in rule-declaration order."""
        filename, ext = split_path(path)
        values = {
            Part.FILENAME.value: filename,
            Part.EXTENSION.value: ext,
            Part.PATH.value: path,
        }

        violations: List[Violation] = []
        for rule in self._rules:
            value = values.get(rule.part)
            if value is None:
                continue  # unknown part never matches
            if self._matches(rule, value):
                violations.append(
                    Violation(
                        file_path=path,
                        rule_caption=rule.caption,
                        description=rule.description,
                    )
                )

        if filename == NPMRC_FILENAME:
            try:
                findings = check_npmrc(path)
            except CredentialScanError as exc:
                logger.warning("Skipping credential check: %s", exc)
            else:
                violations.extend(
                    Violation(file_path=path, rule_caption=finding) for finding in findings
                )

        return violations

    def check_files(
        self,
        paths: Sequence[str],
        max_workers: Optional[int] = None,
    ) -> List[Violation]:
        """Check all *paths* concurrently and collect their violations.

        One task is submitted per path. ``max_workers=None`` sizes the pool to
        the number of paths. Violations of a single file stay in order; there
        is no ordering across files.
        """
        if not paths:
            return []
        workers = max_workers if max_workers and max_workers > 0 else len(paths)

        all_violations: List[Violation] = []
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="gitdeny") as ex:
            futures = [ex.submit(self.check_file, p) for p in paths]
            for fut in as_completed(futures):
                all_violations.extend(fut.result())
        return all_violations
