"""Pattern compiler for ``regex`` rules.

Rule files in the ``git-deny-patterns.json`` family were written for a regex
engine that spells anchors ``\\A`` / ``\\z``. Most of their patterns are
otherwise meant literally, so a pattern is escaped wholesale and then only
three sequences of the escaped text are turned back into live syntax:

  - ``\\\\A`` becomes ``^``
  - ``\\\\z`` becomes ``$``
  - ``\\\\.`` becomes ``.``

The net effect is that ``\\A.env\\z`` compiles to ``^\\.env$`` and a
backslash-dot in a rule still matches a literal dot.

This is a compatibility shim for that corpus, not a general regex translator.
"""

from __future__ import annotations

import re

# Applied in order, on the output of re.escape()
_RESTORE = (
    ("\\\\A", "^"),
    ("\\\\z", "$"),
    ("\\\\.", "."),
)


class PatternError(Exception):
    """Raised when a translated rule pattern cannot be compiled."""


def translate_pattern(pattern: str) -> str:
    """Return the ``re`` source for a rule *pattern*."""
    translated = re.escape(pattern)
    for escaped, live in _RESTORE:
        translated = translated.replace(escaped, live)
    return translated


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate and compile *pattern*. Raises PatternError on failure."""
    source = translate_pattern(pattern)
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternError(f"{pattern!r} (translated to {source!r}): {exc}") from exc
