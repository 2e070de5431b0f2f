"""Events pushed by configuration parsers onto the engine's channel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .diagnostics import RawValidationError


def json_event_name(prefix: str) -> str:
    return f"{prefix}::error::json"


def schema_event_name(prefix: str) -> str:
    return f"{prefix}::error::schema"


@dataclass(frozen=True, kw_only=True)
class InvalidJson:
    """The document could not be parsed; ``message`` is the parser's own text."""

    prefix: str
    resource: str
    message: str

    @property
    def name(self) -> str:
        return json_event_name(self.prefix)


@dataclass(frozen=True, kw_only=True)
class InvalidSchema:
    """The document parsed but failed schema validation."""

    prefix: str
    resource: str
    errors: tuple[RawValidationError, ...]

    @property
    def name(self) -> str:
        return schema_event_name(self.prefix)


ParserEvent = Union[InvalidJson, InvalidSchema]


__all__ = [
    "InvalidJson",
    "InvalidSchema",
    "ParserEvent",
    "json_event_name",
    "schema_event_name",
]
