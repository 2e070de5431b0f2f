"""Message building for ``anyOf`` failures."""

from __future__ import annotations

from typing import Sequence

from configlint.domain.diagnostics import RawValidationError

from .formatters import FormatterTable, format_error


def combine_any_of(
    error: RawValidationError,
    all_errors: Sequence[RawValidationError],
    table: FormatterTable,
) -> str:
    """Join the formatted text of every other error for the resource with ``" or "``.

    Siblings are taken from the whole resource, not from the group of
    *error*, so several ``anyOf`` failures repeat the same text.
    """

    siblings = [other for other in all_errors if other is not error]
    return " or ".join(format_error(other, table) for other in siblings)


__all__ = ["combine_any_of"]
