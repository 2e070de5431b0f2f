"""Reporting sinks receiving diagnostics from the validity rules."""

from __future__ import annotations

from typing import List, Optional

from configlint.domain.diagnostics import DiagnosticMessage


class CollectingSink:
    """Keeps every diagnostic in arrival order."""

    def __init__(self) -> None:
        self.diagnostics: List[DiagnosticMessage] = []

    async def report(self, resource: str, location: None, message: str) -> None:
        self.diagnostics.append(DiagnosticMessage(resource=resource, text=message, location=location))

    def messages(self, resource: Optional[str] = None) -> List[str]:
        return [item.text for item in self.diagnostics if resource is None or item.resource == resource]


__all__ = ["CollectingSink"]
