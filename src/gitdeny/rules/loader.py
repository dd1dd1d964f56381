"""Load rule files (JSON or YAML) into a RuleSet."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import yaml

from gitdeny.rules.compiler import PatternError, compile_pattern
from gitdeny.rules.models import Rule, RuleSet

logger = logging.getLogger(__name__)


class RulesError(Exception):
    """Raised when the rule file cannot be read, parsed, or compiled.

    ``index`` is the 0-based position of the offending rule, when known.
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


def _field(entry: Mapping[str, Any], key: str) -> str:
    value = entry.get(key)
    return "" if value is None else str(value)


def _parse(text: str, path: Path) -> Any:
    if path.suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise RulesError(f"cannot parse rules in {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise RulesError(f"cannot parse rules in {path}: {exc}") from exc


def build_rule_set(entries: Iterable[Mapping[str, Any]]) -> RuleSet:
    """Build a RuleSet from parsed rule records, compiling every regex rule."""
    rules: List[Rule] = []
    patterns: Dict[str, Any] = {}

    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise RulesError(
                f"cannot parse rules: rule {i} is {type(entry).__name__}, expected a mapping",
                index=i,
            )
        rule = Rule(
            part=_field(entry, "part"),
            kind=_field(entry, "type"),
            pattern=_field(entry, "pattern"),
            caption=_field(entry, "caption"),
            description=_field(entry, "description"),
        )
        rules.append(rule)

        if not rule.is_regex or rule.pattern in patterns:
            continue
        if not rule.pattern:
            raise RulesError(f"invalid regex pattern in rule {i}: pattern is empty", index=i)
        try:
            patterns[rule.pattern] = compile_pattern(rule.pattern)
        except PatternError as exc:
            raise RulesError(f"invalid regex pattern in rule {i}: {exc}", index=i) from exc

    return RuleSet(rules=tuple(rules), patterns=MappingProxyType(patterns))


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read and compile the rule file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RulesError(f"cannot read rules file {path}: {exc}") from exc

    data = _parse(text, path)
    if not isinstance(data, list):
        raise RulesError(
            f"cannot parse rules in {path}: expected a list of rules, "
            f"got {type(data).__name__}"
        )

    rule_set = build_rule_set(data)
    logger.info(
        "Loaded %d rules (%d compiled patterns) from %s",
        len(rule_set), len(rule_set.patterns), path,
    )
    return rule_set
