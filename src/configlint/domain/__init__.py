"""Domain types shared by the diagnostics engine and its collaborators."""

from __future__ import annotations

from .config import ConfigError, LintSettings, RuleSetting, Severity
from .diagnostics import (
    DiagnosticMessage,
    ErrorGroup,
    Keyword,
    ParseFailure,
    RawValidationError,
    ReportError,
)
from .events import InvalidJson, InvalidSchema, ParserEvent

__all__ = [
    "ConfigError",
    "LintSettings",
    "RuleSetting",
    "Severity",
    "DiagnosticMessage",
    "ErrorGroup",
    "Keyword",
    "ParseFailure",
    "RawValidationError",
    "ReportError",
    "InvalidJson",
    "InvalidSchema",
    "ParserEvent",
]
