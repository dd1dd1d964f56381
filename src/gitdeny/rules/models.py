"""Rule data model — raw rule fields plus the compiled-pattern registry."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Part(str, Enum):
    """Which facet of a file path a rule inspects."""

    FILENAME = "filename"
    EXTENSION = "extension"
    PATH = "path"


class Kind(str, Enum):
    """How a rule's pattern is interpreted."""

    REGEX = "regex"
    MATCH = "match"


@dataclass(frozen=True)
class Rule:
    """A single sensitive-file rule.

    ``part`` and ``kind`` are kept exactly as they were read so that rule files
    written for newer versions still load. Any ``kind`` other than ``regex`` is
    compared by plain string equality.
    """

    part: str
    kind: str
    pattern: str
    caption: str
    description: str = ""

    @property
    def is_regex(self) -> bool:
        return self.kind == Kind.REGEX


@dataclass(frozen=True)
class RuleSet:
    """Loaded rules in declaration order and their compiled regex patterns.

    ``patterns`` is keyed by the raw pattern string, so rules that share a
    pattern share one compiled matcher.
    """

    rules: Tuple[Rule, ...] = ()
    patterns: Mapping[str, re.Pattern[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __len__(self) -> int:
        return len(self.rules)
