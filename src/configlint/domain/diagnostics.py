"""Domain models for schema validation diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ReportError(Exception):
    """Raised when the reporting sink rejects a diagnostic."""

    def __init__(self, resource: str, message: str) -> None:
        super().__init__(f"Failed to report diagnostic for '{resource}': {message}")
        self.resource = resource


class Keyword(str, Enum):
    """Schema keywords the formatter tables know how to special-case."""

    ADDITIONAL_PROPERTIES = "additionalProperties"
    ENUM = "enum"
    TYPE = "type"
    PATTERN = "pattern"
    ANY_OF = "anyOf"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> Keyword:
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, kw_only=True)
class RawValidationError:
    """One failure record as produced by the schema validator.

    ``data_path`` keeps the validator's leading separator (``.`` or ``/``);
    ``property_name`` is the display form without it.
    """

    data_path: str
    keyword: str
    message: str
    params: Mapping[str, Any] = field(default_factory=dict)
    data: Any = None

    @property
    def property_name(self) -> str:
        return self.data_path[1:]

    @property
    def kind(self) -> Keyword:
        return Keyword.parse(self.keyword)


@dataclass(frozen=True, kw_only=True)
class ErrorGroup:
    data_path: str
    errors: tuple[RawValidationError, ...]


@dataclass(frozen=True, kw_only=True)
class DiagnosticMessage:
    """A resource-scoped diagnostic; the validator exposes no source positions."""

    resource: str
    text: str
    location: None = None


@dataclass(frozen=True, kw_only=True)
class ParseFailure:
    resource: str
    text: str


__all__ = [
    "ReportError",
    "Keyword",
    "RawValidationError",
    "ErrorGroup",
    "DiagnosticMessage",
    "ParseFailure",
]
