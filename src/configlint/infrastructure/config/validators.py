"""Validation helpers for lint settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft202012Validator, ValidationError

from configlint.domain.config import ConfigError

SCHEMA_FILE = Path(__file__).resolve().parent / "schemas" / "settings-schema.json"


def read_schema(path: Path) -> Mapping[str, Any]:
    """Read a bundled JSON schema; JSON is a subset of YAML."""
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def build_validator() -> Draft202012Validator:
    return Draft202012Validator(read_schema(SCHEMA_FILE))


def format_config_error(path: Path, field: str, message: str) -> str:
    location = f"[cyan]{path}[/cyan]"
    target = f" → [magenta]{field}[/magenta]" if field else ""
    return f"[bold red]Config error[/bold red]: {location}{target} {message}"


def validate_with_schema(
    validator: Draft202012Validator,
    instance: Mapping[str, object],
    path: Path,
) -> None:
    try:
        validator.validate(instance)
    except ValidationError as exc:
        field = "/".join(str(part) for part in exc.absolute_path)
        field_display = field or "<root>"
        raise ConfigError(format_config_error(path, field_display, exc.message)) from exc


__all__ = ["SCHEMA_FILE", "build_validator", "format_config_error", "read_schema", "validate_with_schema"]
