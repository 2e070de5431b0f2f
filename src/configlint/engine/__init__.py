"""Grouping, formatting and reporting of schema validation errors."""

from __future__ import annotations

from .disjunction import combine_any_of
from .formatters import (
    BABEL_FORMATTERS,
    TYPESCRIPT_FORMATTERS,
    FormatterTable,
    Template,
    format_error,
)
from .grouping import group_errors
from .reporter import Reporter, ReportSink

__all__ = [
    "BABEL_FORMATTERS",
    "TYPESCRIPT_FORMATTERS",
    "FormatterTable",
    "Template",
    "format_error",
    "combine_any_of",
    "group_errors",
    "Reporter",
    "ReportSink",
]
