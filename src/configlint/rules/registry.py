"""Registry of the configuration dialects that ship with configlint."""

from __future__ import annotations

from typing import Dict

from configlint.engine.formatters import BABEL_FORMATTERS, TYPESCRIPT_FORMATTERS
from configlint.engine.reporter import ReportSink

from .dialect import DialectConfig, DialectRule, RuleUnavailable

BABEL_CONFIG = DialectConfig(
    id="babel-config",
    event_prefix="parse::babel-config",
    formatters=BABEL_FORMATTERS,
    supports_disjunction=False,
    description="'babel-config/is-valid' warns against providing an invalid babel configuration file `.babelrc`",
)

TYPESCRIPT_CONFIG = DialectConfig(
    id="typescript-config",
    event_prefix="parse::typescript-config",
    formatters=TYPESCRIPT_FORMATTERS,
    supports_disjunction=True,
    description="'typescript-config/is-valid' warns against providing an invalid TypeScript configuration file `tsconfig.json`",
)

DIALECTS: Dict[str, DialectConfig] = {
    BABEL_CONFIG.id: BABEL_CONFIG,
    TYPESCRIPT_CONFIG.id: TYPESCRIPT_CONFIG,
}


def get_dialect(dialect_id: str) -> DialectConfig:
    key = dialect_id.lower()
    if key.endswith("/is-valid"):
        key = key[: -len("/is-valid")]
    try:
        return DIALECTS[key]
    except KeyError as exc:
        raise RuleUnavailable(
            f"Unknown dialect '{dialect_id}'. Available: {', '.join(sorted(DIALECTS))}"
        ) from exc


def create_rule(dialect_id: str, sink: ReportSink) -> DialectRule:
    """Instantiate the validity rule for the given dialect id or rule id."""

    return DialectRule(get_dialect(dialect_id), sink)


__all__ = ["BABEL_CONFIG", "TYPESCRIPT_CONFIG", "DIALECTS", "get_dialect", "create_rule"]
