"""Lint settings loading and validation."""

from __future__ import annotations

from .loader import SETTINGS_FILE_NAMES, find_settings, load_settings
from .validators import format_config_error, read_schema

__all__ = ["SETTINGS_FILE_NAMES", "find_settings", "load_settings", "format_config_error", "read_schema"]
