"""Tests for grouping errors by data path."""

from __future__ import annotations

from configlint.domain.diagnostics import RawValidationError
from configlint.engine.grouping import group_errors


def _error(path: str, message: str) -> RawValidationError:
    return RawValidationError(data_path=path, keyword="type", message=message)


def test_groups_follow_first_occurrence() -> None:
    first = _error(".a", "first")
    second = _error(".b", "second")
    third = _error(".a", "third")

    groups = group_errors([first, second, third])

    assert [group.data_path for group in groups] == [".a", ".b"]
    assert groups[0].errors == (first, third)
    assert groups[1].errors == (second,)


def test_every_error_lands_in_exactly_one_group() -> None:
    errors = [_error(path, str(index)) for index, path in enumerate([".x", ".y", ".x", ".z", ".y"])]

    groups = group_errors(errors)

    flattened = [error for group in groups for error in group.errors]
    assert sorted(flattened, key=lambda e: e.message) == errors
    assert len(flattened) == len(errors)


def test_empty_input_yields_no_groups() -> None:
    assert group_errors([]) == []
