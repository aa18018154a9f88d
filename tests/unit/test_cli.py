"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from uidlc.cli import app


def flat(output: str) -> str:
    """Collapse the line wrapping rich applies to long messages."""
    return " ".join(output.split())


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run commands from an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestComponentCommand:
    def test_prints_generated_files(
        self, cli_runner: CliRunner, workdir: Path, greeting_uidl: dict
    ) -> None:
        source = workdir / "greeting.json"
        source.write_text(json.dumps(greeting_uidl))

        result = cli_runner.invoke(app, ["component", str(source), "--stack", "html"])

        assert result.exit_code == 0, result.output
        assert "greeting.html" in result.output
        assert "<div>Hello</div>" in result.output

    def test_react_lists_dependencies(
        self, cli_runner: CliRunner, workdir: Path, greeting_uidl: dict
    ) -> None:
        source = workdir / "greeting.json"
        source.write_text(json.dumps(greeting_uidl))

        result = cli_runner.invoke(app, ["component", str(source)])

        assert result.exit_code == 0, result.output
        assert "greeting.js" in result.output
        assert "^18.2.0" in result.output

    def test_invalid_json(self, cli_runner: CliRunner, workdir: Path) -> None:
        source = workdir / "broken.json"
        source.write_text("{not json")

        result = cli_runner.invoke(app, ["component", str(source)])

        assert result.exit_code == 1
        assert "is not valid JSON" in flat(result.output)

    def test_invalid_uidl(self, cli_runner: CliRunner, workdir: Path) -> None:
        source = workdir / "empty.json"
        source.write_text("{}")

        result = cli_runner.invoke(app, ["component", str(source)])

        assert result.exit_code == 1
        assert "Invalid component UIDL" in flat(result.output)

    def test_unknown_stack(
        self, cli_runner: CliRunner, workdir: Path, greeting_uidl: dict
    ) -> None:
        source = workdir / "greeting.json"
        source.write_text(json.dumps(greeting_uidl))

        result = cli_runner.invoke(app, ["component", str(source), "--stack", "svelte"])

        assert result.exit_code == 1
        assert "Stack 'svelte' not found" in flat(result.output)


class TestProjectCommand:
    def test_writes_files(
        self, cli_runner: CliRunner, workdir: Path, shop_project: dict
    ) -> None:
        source = workdir / "shop.json"
        source.write_text(json.dumps(shop_project))
        output = workdir / "out"

        result = cli_runner.invoke(app, ["project", str(source), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert (output / "src" / "views" / "home.js").exists()
        assert (output / "package.json").exists()

    def test_uses_config_file(
        self, cli_runner: CliRunner, workdir: Path, shop_project: dict
    ) -> None:
        (workdir / "uidlc.toml").write_text(
            '[generation]\nstack = "html"\noutput = "site"\n\n'
            '[package]\ndev_dependencies = { "serve" = "^14.0.0" }\n'
        )
        source = workdir / "shop.json"
        source.write_text(json.dumps(shop_project))

        result = cli_runner.invoke(app, ["project", str(source)])

        assert result.exit_code == 0, result.output
        assert (workdir / "site" / "home.html").exists()
        assert not (workdir / "site" / "package.json").exists()

    def test_dry_run(self, cli_runner: CliRunner, workdir: Path, shop_project: dict) -> None:
        source = workdir / "shop.json"
        source.write_text(json.dumps(shop_project))

        result = cli_runner.invoke(app, ["project", str(source), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "home.js" in result.output
        assert not (workdir / "generated").exists()

    def test_bad_config(self, cli_runner: CliRunner, workdir: Path, shop_project: dict) -> None:
        (workdir / "uidlc.toml").write_text("[generation\n")
        source = workdir / "shop.json"
        source.write_text(json.dumps(shop_project))

        result = cli_runner.invoke(app, ["project", str(source)])

        assert result.exit_code == 1
        assert "Invalid uidlc.toml" in flat(result.output)


class TestMiscCommands:
    def test_stacks(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["stacks"])

        assert result.exit_code == 0
        assert "html" in result.output
        assert "react" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("uidlc 0.4.0\n")
