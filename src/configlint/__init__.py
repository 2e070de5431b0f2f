"""Schema validation diagnostics for configuration files."""

from __future__ import annotations

from configlint.domain import (
    DiagnosticMessage,
    ErrorGroup,
    InvalidJson,
    InvalidSchema,
    Keyword,
    ParseFailure,
    RawValidationError,
    ReportError,
)
from configlint.engine import Reporter, ReportSink, combine_any_of, format_error, group_errors
from configlint.rules import DialectConfig, DialectRule, create_rule

__version__ = "0.1.0"

__all__ = [
    "DiagnosticMessage",
    "ErrorGroup",
    "InvalidJson",
    "InvalidSchema",
    "Keyword",
    "ParseFailure",
    "RawValidationError",
    "ReportError",
    "Reporter",
    "ReportSink",
    "combine_any_of",
    "format_error",
    "group_errors",
    "DialectConfig",
    "DialectRule",
    "create_rule",
]
