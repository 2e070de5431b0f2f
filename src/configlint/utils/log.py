"""Logging helpers."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

from rich.console import Console
from rich.logging import RichHandler


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that tags every record with its bound context."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        context = dict(self.extra or {})
        extra = dict(kwargs.get("extra") or {})
        extra.update(context)
        kwargs["extra"] = extra
        tags = " ".join(f"{key}={value}" for key, value in context.items())
        return (f"[{tags}] {msg}" if tags else msg), kwargs


def bind(logger: logging.Logger, **context: Any) -> ContextLogger:
    """Return *logger* tagged with *context* (e.g. ``dialect`` and ``resource``)."""

    return ContextLogger(logger, context)


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )


__all__ = ["ContextLogger", "bind", "configure_logging"]
