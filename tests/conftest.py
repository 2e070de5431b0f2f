"""Pytest configuration and fixtures for configlint tests."""

import os
from pathlib import Path

import pytest

# Keep Rich tables from wrapping diagnostics in CLI output.
os.environ.setdefault("COLUMNS", "400")
os.environ.setdefault("TERM", "dumb")

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES
