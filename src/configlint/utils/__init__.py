"""Shared utility helpers for configlint."""

from __future__ import annotations

from .log import ContextLogger, bind, configure_logging

__all__ = ["ContextLogger", "bind", "configure_logging"]
