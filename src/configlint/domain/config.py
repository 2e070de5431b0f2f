"""Domain models representing host lint settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Mapping, Optional

Severity = Literal["error", "warning", "off"]


class ConfigError(Exception):
    """Raised when settings files fail validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@dataclass(frozen=True, kw_only=True)
class RuleSetting:
    rule_id: str
    severity: Severity = "error"


@dataclass(frozen=True, kw_only=True)
class LintSettings:
    path: Optional[Path] = field(default=None, repr=False, compare=False)
    rules: Mapping[str, RuleSetting] = field(default_factory=dict)

    def severity_of(self, rule_id: str) -> Severity:
        """Rules not mentioned in the settings are reported as errors."""
        setting = self.rules.get(rule_id)
        return setting.severity if setting is not None else "error"

    def is_enabled(self, rule_id: str) -> bool:
        return self.severity_of(rule_id) != "off"


__all__ = ["Severity", "ConfigError", "RuleSetting", "LintSettings"]
