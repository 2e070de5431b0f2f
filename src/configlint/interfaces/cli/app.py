"""Command line interface for configlint."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from configlint.application import Document, LintReport, LintService
from configlint.domain.config import ConfigError, LintSettings
from configlint.infrastructure.config import load_settings
from configlint.infrastructure.parsers import detect_dialect, read_document
from configlint.rules import DIALECTS, RuleUnavailable, get_dialect
from configlint.utils.log import configure_logging

app = typer.Typer(help="Validate configuration files against their dialect schemas.")
console = Console()


def _handle_config_error(exc: ConfigError) -> None:
    console.print(str(exc))
    raise typer.Exit(code=1) from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        configure_logging(verbose=True)


def _load_settings(settings_file: Optional[Path], paths: List[Path]) -> LintSettings:
    search = [Path.cwd()] + [path.parent for path in paths]
    try:
        return load_settings(settings_file, search=search)
    except ConfigError as exc:
        _handle_config_error(exc)
        raise  # pragma: no cover


def _build_documents(paths: List[Path], dialect_id: Optional[str]) -> List[Document]:
    documents: List[Document] = []
    for path in paths:
        try:
            dialect = get_dialect(dialect_id) if dialect_id else detect_dialect(path)
        except RuleUnavailable as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
            raise typer.Exit(code=2) from exc
        if dialect is None:
            console.print(
                f"[red]Cannot infer the dialect of '{escape(str(path))}'. Use --dialect "
                f"({', '.join(sorted(DIALECTS))}).[/red]"
            )
            raise typer.Exit(code=2)
        try:
            raw = read_document(path)
        except ConfigError as exc:
            _handle_config_error(exc)
            raise  # pragma: no cover
        documents.append(Document(dialect=dialect, resource=str(path), text=raw))
    return documents


def _print_report(report: LintReport) -> None:
    table = Table(title="Configuration diagnostics")
    table.add_column("Resource", justify="left")
    table.add_column("Rule", justify="left")
    table.add_column("Severity", justify="left")
    table.add_column("Message", justify="left")
    for finding in report.findings:
        color = "red" if finding.severity == "error" else "yellow"
        table.add_row(
            escape(finding.diagnostic.resource),
            finding.rule_id,
            f"[{color}]{finding.severity}[/{color}]",
            escape(finding.diagnostic.text),
        )
    console.print(table)


@app.command()
def check(
    paths: List[Path] = typer.Argument(..., help="Configuration files to validate."),
    dialect: Optional[str] = typer.Option(
        None,
        "--dialect",
        help="Dialect of the files (babel-config, typescript-config). Inferred from file names by default.",
    ),
    settings_file: Optional[Path] = typer.Option(
        None,
        "--settings",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="configlint.yaml settings file.",
    ),
) -> None:
    """Validate configuration files and print every diagnostic."""

    settings = _load_settings(settings_file, paths)
    documents = _build_documents(paths, dialect)
    report = LintService(settings).run(documents)

    for failure in report.failures:
        console.print(f"[red]Failed to report diagnostics for {escape(failure.event.resource)}: {escape(str(failure.error))}[/red]")

    if not report.findings:
        console.print("[green]Configs OK[/green]")
    else:
        _print_report(report)

    if report.has_errors:
        raise typer.Exit(code=1)


@app.command()
def rules() -> None:
    """List the available validity rules."""

    table = Table(title="Rules")
    table.add_column("Rule", justify="left")
    table.add_column("Category", justify="left")
    table.add_column("Description", justify="left")
    for dialect in DIALECTS.values():
        meta = dialect.meta
        table.add_row(meta.id, meta.category, escape(meta.description))
    console.print(table)


def main(argv: Iterable[str] | None = None) -> None:
    """Invoke the Typer application."""
    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":
    main()
