"""Emission of diagnostics to the host reporting sink."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence, runtime_checkable

from configlint.domain.diagnostics import (
    ErrorGroup,
    Keyword,
    ParseFailure,
    RawValidationError,
    ReportError,
)

from .disjunction import combine_any_of
from .formatters import FormatterTable, format_error
from .grouping import group_errors

logger = logging.getLogger(__name__)


@runtime_checkable
class ReportSink(Protocol):
    """Host-side receiver of diagnostics."""

    async def report(self, resource: str, location: None, message: str) -> None:
        """Accept one diagnostic for *resource*."""


class Reporter:
    """Formats schema errors and forwards them to a :class:`ReportSink`.

    Groups are reported concurrently, so their relative completion order
    is unspecified. Messages inside one group are emitted strictly in the
    validator's order. A failing group does not stop the others; its
    error is raised once all groups have finished.
    """

    def __init__(
        self,
        sink: ReportSink,
        table: FormatterTable,
        *,
        supports_disjunction: bool = False,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self.sink = sink
        self.table = table
        self.supports_disjunction = supports_disjunction
        self.log = log or logger

    def render(self, error: RawValidationError, all_errors: Sequence[RawValidationError]) -> str:
        if self.supports_disjunction and error.kind is Keyword.ANY_OF:
            return combine_any_of(error, all_errors, self.table)
        return format_error(error, self.table)

    async def _emit(self, resource: str, text: str) -> None:
        try:
            await self.sink.report(resource, None, text)
        except ReportError:
            raise
        except Exception as exc:
            raise ReportError(resource, str(exc)) from exc

    async def report_parse_failure(self, failure: ParseFailure) -> None:
        await self._emit(failure.resource, failure.text)

    async def _report_group(
        self,
        resource: str,
        group: ErrorGroup,
        all_errors: Sequence[RawValidationError],
    ) -> None:
        for error in group.errors:
            await self._emit(resource, self.render(error, all_errors))

    async def report_schema_errors(self, resource: str, errors: Sequence[RawValidationError]) -> int:
        """Report every error for *resource*; returns the number of diagnostics sent."""

        all_errors = tuple(errors)
        groups = group_errors(all_errors)
        self.log.debug("Reporting %d schema errors in %d groups", len(all_errors), len(groups))
        results = await asyncio.gather(
            *(self._report_group(resource, group, all_errors) for group in groups),
            return_exceptions=True,
        )
        # every group has settled before the first failure propagates
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return len(all_errors)


__all__ = ["ReportSink", "Reporter"]
