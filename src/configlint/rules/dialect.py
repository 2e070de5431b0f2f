"""Generic schema-validity rule parameterised by configuration dialect."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Mapping

from configlint.domain.diagnostics import ParseFailure
from configlint.domain.events import (
    InvalidJson,
    InvalidSchema,
    ParserEvent,
    json_event_name,
    schema_event_name,
)
from configlint.engine.formatters import FormatterTable
from configlint.engine.reporter import Reporter, ReportSink
from configlint.utils.log import ContextLogger, bind

logger = logging.getLogger(__name__)

Handler = Callable[[ParserEvent], Awaitable[None]]


class RuleUnavailable(Exception):
    """Raised when no rule is registered for a dialect id."""


@dataclass(frozen=True, kw_only=True)
class RuleMeta:
    id: str
    description: str
    category: str = "development"
    scope: str = "local"
    schema: tuple = ()


@dataclass(frozen=True, kw_only=True)
class DialectConfig:
    """Everything that differs between two dialect rules."""

    id: str
    event_prefix: str
    formatters: FormatterTable
    supports_disjunction: bool = False
    description: str = ""

    @property
    def rule_id(self) -> str:
        return f"{self.id}/is-valid"

    @property
    def meta(self) -> RuleMeta:
        return RuleMeta(id=self.rule_id, description=self.description)


class DialectRule:
    """Reports invalid configuration documents of one dialect.

    The rule has no options and is always active.
    """

    def __init__(self, config: DialectConfig, sink: ReportSink) -> None:
        self.config = config
        self.sink = sink

    @property
    def meta(self) -> RuleMeta:
        return self.config.meta

    @property
    def subscriptions(self) -> Mapping[str, Handler]:
        handlers: Dict[str, Handler] = {
            json_event_name(self.config.event_prefix): self.on_invalid_json,
            schema_event_name(self.config.event_prefix): self.on_invalid_schema,
        }
        return handlers

    def _logger(self, resource: str) -> ContextLogger:
        return bind(logger, dialect=self.config.id, resource=resource)

    def _reporter(self, log: ContextLogger) -> Reporter:
        return Reporter(
            self.sink,
            self.config.formatters,
            supports_disjunction=self.config.supports_disjunction,
            log=log,
        )

    async def on_invalid_json(self, event: ParserEvent) -> None:
        if not isinstance(event, InvalidJson):
            raise TypeError(f"Expected InvalidJson event, got {type(event).__name__}")
        log = self._logger(event.resource)
        log.debug("%s received", event.name)
        failure = ParseFailure(resource=event.resource, text=event.message)
        await self._reporter(log).report_parse_failure(failure)

    async def on_invalid_schema(self, event: ParserEvent) -> None:
        if not isinstance(event, InvalidSchema):
            raise TypeError(f"Expected InvalidSchema event, got {type(event).__name__}")
        log = self._logger(event.resource)
        log.debug("%s received", event.name)
        await self._reporter(log).report_schema_errors(event.resource, event.errors)

    async def handle(self, event: ParserEvent) -> bool:
        """Dispatch *event* to its handler; returns False when not subscribed."""

        handler = self.subscriptions.get(event.name)
        if handler is None:
            logger.debug("Rule %s ignores event %s", self.meta.id, event.name)
            return False
        await handler(event)
        return True


__all__ = ["Handler", "RuleUnavailable", "RuleMeta", "DialectConfig", "DialectRule"]
