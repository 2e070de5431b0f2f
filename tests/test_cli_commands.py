"""CLI command tests for configlint."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from configlint.cli import app


def test_cli_check_valid_files(fixtures_dir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "check",
            str(fixtures_dir / "typescript" / "valid" / "tsconfig.json"),
            str(fixtures_dir / "babel" / "valid" / ".babelrc"),
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Configs OK" in result.stdout


def test_cli_check_missing_file_passes(fixtures_dir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["check", str(fixtures_dir / "typescript" / "noconfig" / "tsconfig.json")],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Configs OK" in result.stdout


def test_cli_check_reports_diagnostics(fixtures_dir: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["check", str(fixtures_dir / "typescript" / "invalidschemaadditional" / "tsconfig.json")],
        catch_exceptions=False,
    )
    assert result.exit_code == 1
    assert "typescript-config/is-valid" in result.stdout
    assert "invalidProperty" in result.stdout


def test_cli_warning_severity_does_not_fail(fixtures_dir: Path, tmp_path: Path) -> None:
    settings = tmp_path / "configlint.yaml"
    settings.write_text("rules:\n  babel-config: warning\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "check",
            str(fixtures_dir / "babel" / "invalidschematype" / ".babelrc"),
            "--settings",
            str(settings),
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "warning" in result.stdout


def test_cli_unknown_dialect(tmp_path: Path) -> None:
    config = tmp_path / "settings.json"
    config.write_text("{}", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(config)], catch_exceptions=False)
    assert result.exit_code == 2
    assert "Cannot infer the dialect" in result.stdout


def test_cli_explicit_dialect(tmp_path: Path) -> None:
    config = tmp_path / "settings.json"
    config.write_text('{"sourceType": "module"}', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(config), "--dialect", "babel-config"], catch_exceptions=False)
    assert result.exit_code == 0


def test_cli_rules_lists_dialects() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["rules"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "babel-config/is-valid" in result.stdout
    assert "typescript-config/is-valid" in result.stdout


def test_cli_check_undecodable_file_is_a_diagnostic(tmp_path: Path) -> None:
    config = tmp_path / "tsconfig.json"
    config.write_bytes(b'{"compilerOptions": {"outDir": "\xff"}}')
    runner = CliRunner()
    result = runner.invoke(app, ["check", str(config)], catch_exceptions=False)
    assert result.exit_code == 1
    assert "typescript-config/is-valid" in result.stdout
    assert "can't decode byte 0xff" in result.stdout
