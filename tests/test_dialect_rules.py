"""Tests for the per-dialect validity rules."""

from __future__ import annotations

import pytest

from configlint.domain.diagnostics import RawValidationError
from configlint.domain.events import InvalidJson, InvalidSchema
from configlint.infrastructure.sinks import CollectingSink
from configlint.rules import BABEL_CONFIG, TYPESCRIPT_CONFIG, RuleUnavailable, create_rule, get_dialect

ENUM_ERROR = RawValidationError(
    data_path=".compilerOptions.target",
    keyword="enum",
    message="should be equal to one of the allowed values",
    params={"allowedValues": ["es3", "es5", "es6", "es2015", "es2016", "es2017", "esnext"]},
    data="invalid",
)
PATTERN_ERROR = RawValidationError(
    data_path=".compilerOptions.target",
    keyword="pattern",
    message='should match pattern "^([eE][sS]([356]|(201[567])|[nN][eE][xX][tT]))$"',
    data="invalid",
)
ANY_OF_ERROR = RawValidationError(
    data_path=".compilerOptions.target",
    keyword="anyOf",
    message="should match some schema in anyOf",
)


def test_rule_metadata() -> None:
    rule = create_rule("typescript-config", CollectingSink())

    assert rule.meta.id == "typescript-config/is-valid"
    assert rule.meta.schema == ()
    assert rule.meta.category == "development"
    assert rule.meta.scope == "local"
    assert set(rule.subscriptions) == {
        "parse::typescript-config::error::json",
        "parse::typescript-config::error::schema",
    }


def test_lookup_accepts_rule_ids_and_rejects_unknown() -> None:
    assert get_dialect("babel-config/is-valid") is BABEL_CONFIG
    assert get_dialect("TypeScript-Config") is TYPESCRIPT_CONFIG
    with pytest.raises(RuleUnavailable):
        create_rule("eslint-config", CollectingSink())


@pytest.mark.asyncio
async def test_invalid_json_event_reports_parser_message() -> None:
    sink = CollectingSink()
    rule = create_rule("typescript-config", sink)

    handled = await rule.handle(
        InvalidJson(
            prefix="parse::typescript-config",
            resource="r",
            message="Unexpected token ' in JSON at position 148",
        )
    )

    assert handled is True
    assert sink.messages() == ["Unexpected token ' in JSON at position 148"]


@pytest.mark.asyncio
async def test_typescript_pattern_scenario() -> None:
    sink = CollectingSink()
    rule = create_rule("typescript-config", sink)

    await rule.handle(
        InvalidSchema(
            prefix="parse::typescript-config",
            resource="tsconfig.json",
            errors=(ENUM_ERROR, PATTERN_ERROR, ANY_OF_ERROR),
        )
    )

    enum_text = (
        "'compilerOptions.target' should be equal to one of the allowed values "
        "'es3, es5, es6, es2015, es2016, es2017, esnext'. Value found 'invalid'"
    )
    pattern_text = (
        "'compilerOptions.target' should match pattern "
        "'^([eE][sS]([356]|(201[567])|[nN][eE][xX][tT]))$'. Value found 'invalid'"
    )
    assert sink.messages("tsconfig.json") == [enum_text, pattern_text, f"{enum_text} or {pattern_text}"]


@pytest.mark.asyncio
async def test_babel_rule_formats_type_and_not_any_of() -> None:
    sink = CollectingSink()
    rule = create_rule("babel-config", sink)
    type_error = RawValidationError(data_path=".comments", keyword="type", message="should be boolean")

    await rule.handle(
        InvalidSchema(prefix="parse::babel-config", resource=".babelrc", errors=(type_error, ANY_OF_ERROR))
    )

    assert sink.messages() == ["'comments' should be boolean.", "should match some schema in anyOf"]


@pytest.mark.asyncio
async def test_rule_ignores_other_dialect_events() -> None:
    sink = CollectingSink()
    rule = create_rule("babel-config", sink)

    handled = await rule.handle(InvalidJson(prefix="parse::typescript-config", resource="r", message="bad"))

    assert handled is False
    assert sink.diagnostics == []


@pytest.mark.asyncio
async def test_handler_rejects_mismatched_event_type() -> None:
    rule = create_rule("babel-config", CollectingSink())

    with pytest.raises(TypeError):
        await rule.on_invalid_schema(InvalidJson(prefix="parse::babel-config", resource="r", message="bad"))
