from .base import Rule, RuleSpec
from .registry import RULE_REGISTRY, default_rule_specs, normalize_rule_specs

__all__ = [
    "Rule",
    "RuleSpec",
    "RULE_REGISTRY",
    "default_rule_specs",
    "normalize_rule_specs",
]
