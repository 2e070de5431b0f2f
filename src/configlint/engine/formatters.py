"""Per-keyword message templates for schema validation errors."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Callable, Mapping

from configlint.domain.diagnostics import Keyword, RawValidationError

Template = Callable[[RawValidationError], str]
FormatterTable = Mapping[Keyword, Template]


def render_value(value: Any) -> str:
    """Render a document value the way it is quoted inside messages.

    Integral floats lose their fraction (``1.0`` -> ``1``) and arrays are
    joined with bare commas, so ``["a", "b"]`` reads ``a,b``. Objects keep
    the document's key order.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else render_value(item) for item in value)
    return json.dumps(value)


def _single_quoted(message: str) -> str:
    return message.replace('"', "'")


def additional_properties_template(error: RawValidationError) -> str:
    additional = error.params.get("additionalProperty")
    return (
        f"'{error.property_name}' {error.message}. "
        f"Additional property found '{render_value(additional)}'."
    )


def enum_template(error: RawValidationError) -> str:
    allowed = ", ".join(render_value(value) for value in error.params.get("allowedValues", ()))
    return f"'{error.property_name}' {error.message} '{allowed}'. Value found '{render_value(error.data)}'"


def type_template(error: RawValidationError) -> str:
    return f"'{error.property_name}' {_single_quoted(error.message)}."


def pattern_template(error: RawValidationError) -> str:
    return f"'{error.property_name}' {_single_quoted(error.message)}. Value found '{render_value(error.data)}'"


BABEL_FORMATTERS: FormatterTable = MappingProxyType(
    {
        Keyword.ADDITIONAL_PROPERTIES: additional_properties_template,
        Keyword.ENUM: enum_template,
        Keyword.TYPE: type_template,
    }
)

TYPESCRIPT_FORMATTERS: FormatterTable = MappingProxyType(
    {
        Keyword.ADDITIONAL_PROPERTIES: additional_properties_template,
        Keyword.ENUM: enum_template,
        Keyword.PATTERN: pattern_template,
    }
)


def format_error(error: RawValidationError, table: FormatterTable) -> str:
    """Return the readable message for *error*.

    Keywords without a template fall back to the validator's own message.
    """

    template = table.get(error.kind)
    if template is None:
        return error.message
    return template(error)


__all__ = [
    "Template",
    "FormatterTable",
    "render_value",
    "additional_properties_template",
    "enum_template",
    "type_template",
    "pattern_template",
    "BABEL_FORMATTERS",
    "TYPESCRIPT_FORMATTERS",
    "format_error",
]
