"""Rule engine — models, pattern compiler, rule-file loader."""

from gitdeny.rules.compiler import PatternError, compile_pattern, translate_pattern
from gitdeny.rules.loader import RulesError, build_rule_set, load_rules
from gitdeny.rules.models import Kind, Part, Rule, RuleSet

__all__ = [
    "Kind",
    "Part",
    "PatternError",
    "Rule",
    "RuleSet",
    "RulesError",
    "build_rule_set",
    "compile_pattern",
    "load_rules",
    "translate_pattern",
]
