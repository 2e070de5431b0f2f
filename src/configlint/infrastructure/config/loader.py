"""Settings loading coordinating schema validation and parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional

import yaml

from configlint.domain.config import ConfigError, LintSettings, RuleSetting
from configlint.rules.dialect import RuleUnavailable
from configlint.rules.registry import get_dialect

from .validators import build_validator, format_config_error, validate_with_schema

SETTINGS_FILE_NAMES: tuple[str, ...] = ("configlint.yaml", ".configlintrc.yaml")

__all__ = ["SETTINGS_FILE_NAMES", "find_settings", "load_settings"]


def _read_yaml(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem error propagation
        raise ConfigError(format_config_error(path, "<file>", str(exc))) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(format_config_error(path, "<root>", f"Invalid YAML: {exc}")) from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(format_config_error(path, "<root>", "Top-level document must be a mapping."))
    return data


def _build_rule(rule_id: str, raw: Any, path: Path) -> RuleSetting:
    try:
        dialect = get_dialect(rule_id)
    except RuleUnavailable as exc:
        raise ConfigError(format_config_error(path, f"rules.{rule_id}", str(exc))) from exc

    if isinstance(raw, str):
        return RuleSetting(rule_id=dialect.rule_id, severity=raw)

    severity, *rest = raw
    options = rest[0] if rest else {}
    # Validity rules declare an empty options schema.
    if options and not dialect.meta.schema:
        raise ConfigError(
            format_config_error(path, f"rules.{rule_id}", f"Rule '{dialect.rule_id}' does not accept options.")
        )
    return RuleSetting(rule_id=dialect.rule_id, severity=severity)


def find_settings(directory: Path) -> Optional[Path]:
    for name in SETTINGS_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(path: Optional[Path] = None, search: Iterable[Path] = ()) -> LintSettings:
    """Load lint settings from *path* or the first settings file found in *search*.

    Without any settings file every rule is enabled with ``error`` severity.
    """

    if path is None:
        path = next((found for found in map(find_settings, search) if found is not None), None)
    if path is None:
        return LintSettings()

    data = _read_yaml(path)
    validate_with_schema(build_validator(), data, path)

    rules: Dict[str, RuleSetting] = {}
    for rule_id, raw in (data.get("rules") or {}).items():
        setting = _build_rule(str(rule_id), raw, path)
        rules[setting.rule_id] = setting
    return LintSettings(path=path, rules=rules)
