"""Conversion of ``jsonschema`` errors into raw validation records."""

from __future__ import annotations

import re
from typing import Any, Iterable, Iterator, List, Mapping

from jsonschema import ValidationError
from jsonschema.protocols import Validator

from configlint.domain.diagnostics import RawValidationError

_FLATTENED_KEYWORDS = ("anyOf", "oneOf")

_MESSAGES: Mapping[str, str] = {
    "additionalProperties": "should NOT have additional properties",
    "enum": "should be equal to one of the allowed values",
    "anyOf": "should match some schema in anyOf",
    "oneOf": "should match exactly one schema in oneOf",
}


def data_path(path: Iterable[Any]) -> str:
    """Render a ``jsonschema`` path as ``.compilerOptions.lib[3]``."""

    parts: List[str] = []
    for part in path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            parts.append(f".{part}")
    return "".join(parts)


def _additional_properties(error: ValidationError) -> List[str]:
    instance = error.instance
    if not isinstance(instance, Mapping):
        return []
    schema = error.schema if isinstance(error.schema, Mapping) else {}
    properties = schema.get("properties", {})
    patterns = list(schema.get("patternProperties", {}))
    return [
        key
        for key in instance
        if key not in properties and not any(re.search(pattern, key) for pattern in patterns)
    ]


def _type_message(expected: Any) -> str:
    if isinstance(expected, list):
        return f"should be {','.join(expected)}"
    return f"should be {expected}"


def _convert(error: ValidationError) -> Iterator[RawValidationError]:
    keyword = str(error.validator)
    path = data_path(error.absolute_path)

    if keyword == "additionalProperties":
        extras = _additional_properties(error) or [None]
        for extra in extras:
            yield RawValidationError(
                data_path=path,
                keyword=keyword,
                message=_MESSAGES[keyword],
                params={"additionalProperty": extra},
                data=error.instance,
            )
        return

    if keyword == "enum":
        yield RawValidationError(
            data_path=path,
            keyword=keyword,
            message=_MESSAGES[keyword],
            params={"allowedValues": list(error.validator_value)},
            data=error.instance,
        )
        return

    if keyword == "type":
        message = _type_message(error.validator_value)
    elif keyword == "pattern":
        message = f'should match pattern "{error.validator_value}"'
    else:
        message = _MESSAGES.get(keyword, error.message)

    yield RawValidationError(data_path=path, keyword=keyword, message=message, data=error.instance)


def _flatten(error: ValidationError) -> Iterator[RawValidationError]:
    # Alternatives first, then the combining failure itself.
    if error.validator in _FLATTENED_KEYWORDS:
        for child in error.context or ():
            yield from _flatten(child)
    yield from _convert(error)


def translate_errors(validator: Validator, document: Any) -> tuple[RawValidationError, ...]:
    """Validate *document* and return every failure as a raw record."""

    records: List[RawValidationError] = []
    for error in validator.iter_errors(document):
        records.extend(_flatten(error))
    return tuple(records)


__all__ = ["data_path", "translate_errors"]
