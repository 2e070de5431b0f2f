"""Per-dialect validity rules."""

from __future__ import annotations

from .dialect import DialectConfig, DialectRule, RuleMeta, RuleUnavailable
from .registry import BABEL_CONFIG, DIALECTS, TYPESCRIPT_CONFIG, create_rule, get_dialect

__all__ = [
    "DialectConfig",
    "DialectRule",
    "RuleMeta",
    "RuleUnavailable",
    "BABEL_CONFIG",
    "TYPESCRIPT_CONFIG",
    "DIALECTS",
    "create_rule",
    "get_dialect",
]
