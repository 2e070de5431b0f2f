"""Application service that validates configuration documents."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from configlint.domain.config import LintSettings, Severity
from configlint.domain.diagnostics import DiagnosticMessage
from configlint.domain.events import ParserEvent
from configlint.infrastructure.parsers import parse_document
from configlint.infrastructure.parsers.documents import RawDocument
from configlint.infrastructure.sinks import CollectingSink
from configlint.rules.dialect import DialectConfig, DialectRule

from .dispatcher import Dispatcher, DispatchSummary, EventChannel, EventFailure


@dataclass(frozen=True)
class Document:
    dialect: DialectConfig
    resource: str
    text: Optional[RawDocument]


@dataclass(frozen=True)
class Finding:
    rule_id: str
    severity: Severity
    diagnostic: DiagnosticMessage


@dataclass
class LintReport:
    findings: List[Finding] = field(default_factory=list)
    failures: List[EventFailure] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(finding.severity == "error" for finding in self.findings) or bool(self.failures)

    def messages(self, resource: Optional[str] = None) -> List[str]:
        return [
            finding.diagnostic.text
            for finding in self.findings
            if resource is None or finding.diagnostic.resource == resource
        ]


class LintService:
    """Parses documents, pushes their events through the channel and collects diagnostics."""

    def __init__(
        self,
        settings: Optional[LintSettings] = None,
        *,
        parser: Callable[[DialectConfig, str, Optional[RawDocument]], List[ParserEvent]] = parse_document,
    ) -> None:
        self.settings = settings or LintSettings()
        self._parser = parser

    async def lint(self, documents: Sequence[Document]) -> LintReport:
        dispatcher = Dispatcher()
        sinks: Dict[str, CollectingSink] = {}
        for document in documents:
            dialect = document.dialect
            if dialect.rule_id in sinks or not self.settings.is_enabled(dialect.rule_id):
                continue
            sinks[dialect.rule_id] = CollectingSink()
            dispatcher.subscribe(DialectRule(dialect, sinks[dialect.rule_id]))

        channel = EventChannel()
        runner = asyncio.create_task(dispatcher.run(channel))
        try:
            for document in documents:
                for event in self._parser(document.dialect, document.resource, document.text):
                    await channel.publish(event)
        finally:
            await channel.close()
        summary: DispatchSummary = await runner

        report = LintReport(failures=list(summary.failures))
        for rule_id, sink in sinks.items():
            severity = self.settings.severity_of(rule_id)
            report.findings.extend(
                Finding(rule_id=rule_id, severity=severity, diagnostic=diagnostic)
                for diagnostic in sink.diagnostics
            )
        return report

    def run(self, documents: Sequence[Document]) -> LintReport:
        return asyncio.run(self.lint(documents))


__all__ = ["Document", "Finding", "LintReport", "LintService"]
