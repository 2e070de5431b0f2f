"""Application services wiring parsers, rules and sinks together."""

from __future__ import annotations

from .dispatcher import DispatchSummary, Dispatcher, EventChannel, EventFailure
from .lint_service import Document, Finding, LintReport, LintService

__all__ = [
    "DispatchSummary",
    "Dispatcher",
    "EventChannel",
    "EventFailure",
    "Document",
    "Finding",
    "LintReport",
    "LintService",
]
