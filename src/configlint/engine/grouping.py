"""Partition validator errors by the document location they refer to."""

from __future__ import annotations

from typing import Dict, Iterable, List

from configlint.domain.diagnostics import ErrorGroup, RawValidationError


def group_errors(errors: Iterable[RawValidationError]) -> list[ErrorGroup]:
    """Group *errors* by ``data_path``.

    Groups come out in order of first occurrence and keep the original
    relative order of their members.
    """

    buckets: Dict[str, List[RawValidationError]] = {}
    for error in errors:
        buckets.setdefault(error.data_path, []).append(error)
    return [ErrorGroup(data_path=path, errors=tuple(members)) for path, members in buckets.items()]


__all__ = ["group_errors"]
