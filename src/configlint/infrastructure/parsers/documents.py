"""Minimal configuration parsers that feed events to the validity rules."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from configlint.domain.config import ConfigError
from configlint.domain.events import InvalidJson, InvalidSchema, ParserEvent
from configlint.infrastructure.config.validators import format_config_error, read_schema
from configlint.rules.dialect import DialectConfig, RuleUnavailable
from configlint.rules.registry import get_dialect

from .translate import translate_errors

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"

SCHEMA_FILES: Mapping[str, str] = {
    "babel-config": "babelrc.json",
    "typescript-config": "tsconfig.json",
}


@lru_cache(maxsize=None)
def load_schema(dialect_id: str) -> Mapping[str, Any]:
    try:
        filename = SCHEMA_FILES[dialect_id]
    except KeyError as exc:
        raise RuleUnavailable(f"No bundled schema for dialect '{dialect_id}'.") from exc
    return read_schema(SCHEMA_DIR / filename)


@lru_cache(maxsize=None)
def build_validator(dialect_id: str) -> Validator:
    schema = load_schema(dialect_id)
    validator_cls = validator_for(schema)
    return validator_cls(schema)


def detect_dialect(path: Path) -> Optional[DialectConfig]:
    """Guess the dialect from a configuration file name."""

    name = path.name.lower()
    if name in (".babelrc", ".babelrc.json"):
        return get_dialect("babel-config")
    if name.startswith("tsconfig") and name.endswith(".json"):
        return get_dialect("typescript-config")
    return None


RawDocument = Union[str, bytes]


def read_document(path: Path) -> Optional[bytes]:
    """Return the raw file contents, or ``None`` when there is no configuration file."""

    if not path.exists():
        logger.debug("No configuration file at %s", path)
        return None
    try:
        return path.read_bytes()
    except OSError as exc:  # pragma: no cover - filesystem error propagation
        raise ConfigError(format_config_error(path, "<file>", str(exc))) from exc


def decode_document(raw: RawDocument) -> str:
    """Decode *raw* as UTF-8, dropping a leading byte order mark."""

    if isinstance(raw, bytes):
        return raw.decode("utf-8-sig")
    return raw[1:] if raw.startswith("\ufeff") else raw


def parse_document(dialect: DialectConfig, resource: str, raw: Optional[RawDocument]) -> List[ParserEvent]:
    """Parse and validate one document, returning the events it produces.

    A missing document yields nothing; undecodable bytes or a syntax error
    yield exactly one :class:`InvalidJson`; schema violations yield one
    :class:`InvalidSchema`.
    """

    if raw is None:
        return []
    try:
        document = json.loads(decode_document(raw))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return [InvalidJson(prefix=dialect.event_prefix, resource=resource, message=str(exc))]

    errors = translate_errors(build_validator(dialect.id), document)
    if not errors:
        return []
    return [InvalidSchema(prefix=dialect.event_prefix, resource=resource, errors=errors)]


__all__ = [
    "RawDocument",
    "SCHEMA_DIR",
    "SCHEMA_FILES",
    "load_schema",
    "build_validator",
    "detect_dialect",
    "read_document",
    "decode_document",
    "parse_document",
]
