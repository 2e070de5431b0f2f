"""Configuration parsers producing events for the validity rules."""

from __future__ import annotations

from .documents import (
    build_validator,
    decode_document,
    detect_dialect,
    load_schema,
    parse_document,
    read_document,
)
from .translate import data_path, translate_errors

__all__ = [
    "build_validator",
    "decode_document",
    "detect_dialect",
    "load_schema",
    "parse_document",
    "read_document",
    "data_path",
    "translate_errors",
]
