from __future__ import annotations

import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from layerconf.cli.main import app

runner = CliRunner()


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_get_prefers_environment_over_files(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    _write(config, "server:\n  port: 8080\n")

    result = runner.invoke(
        app,
        ["option", "get", "server.port", "--type", "integer", "--env-prefix", "APP_", "--file", str(config)],
        env={"APP_SERVER__PORT": "9090"},
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "9090"


def test_get_json_reports_source(tmp_path: Path) -> None:
    base = tmp_path / "base.yaml"
    local = tmp_path / "local.yaml"
    _write(base, "hosts: a,b\n")
    _write(local, "other: 1\n")

    result = runner.invoke(
        app,
        ["option", "get", "hosts", "--type", "list", "--file", str(local), "--file", str(base), "--format", "json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"key": "hosts", "value": ["a", "b"], "found": True, "source": f"file:{base}"}


def test_get_uses_default_when_missing(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["option", "get", "debug", "--type", "boolean", "--default", "yes", "--file", str(tmp_path / "none.yaml")],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "true"


def test_get_reports_conversion_error(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    _write(config, "port: not-a-number\n")

    result = runner.invoke(app, ["option", "get", "port", "--type", "integer", "--file", str(config)])

    assert result.exit_code == 1
    assert "cannot convert 'not-a-number' to integer" in result.output


def test_set_writes_first_writable_store(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"

    result = runner.invoke(
        app,
        ["option", "set", "server.port", "7000", "--type", "integer", "--env-prefix", "APP_", "--file", str(config)],
        env={},
    )

    assert result.exit_code == 0
    assert f"file:{config}" in result.stdout
    assert yaml.safe_load(config.read_text(encoding="utf-8")) == {"server": {"port": "7000"}}


def test_set_without_writable_store_fails() -> None:
    result = runner.invoke(app, ["option", "set", "port", "1", "--env-prefix", "APP_"])

    assert result.exit_code == 1
    assert "No store accepted 'port'" in result.output


def test_set_rejects_unparseable_value(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"

    result = runner.invoke(app, ["option", "set", "port", "abc", "--type", "integer", "--file", str(config)])

    assert result.exit_code == 1
    assert not config.exists()


def test_enum_type_is_not_available_from_cli() -> None:
    result = runner.invoke(app, ["option", "get", "mode", "--type", "enum"])

    assert result.exit_code == 2
