"""Unit tests for errorchain.cli.main."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from errorchain.cli.main import cli
from errorchain.config.loader import ConfigLoader
from errorchain.schema.config import ClientOptions


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestVersionCommand:
    def test_prints_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "errorchain-sdk" in result.output


class TestParseTypeCommand:
    def test_prints_type_name(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-type", "ParseIntError { kind: InvalidDigit }"])
        assert result.exit_code == 0
        assert result.output.strip() == "ParseIntError"

    def test_leading_delimiter_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-type", " Foo"])
        assert result.exit_code == 1


class TestInitCommand:
    def test_creates_config(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["init", "--directory", str(tmp_path)])
        assert result.exit_code == 0
        data = yaml.safe_load((tmp_path / "errorchain.yaml").read_text(encoding="utf-8"))
        assert set(data) == set(ClientOptions.model_fields)
        assert data["transport"] == "console"
        assert data["environment"] == "development"

    def test_created_config_validates(self, runner: CliRunner, tmp_path: Path) -> None:
        runner.invoke(cli, ["init", "--directory", str(tmp_path)])
        result = runner.invoke(
            cli, ["config", "--validate", "--config", str(tmp_path / "errorchain.yaml")]
        )
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_jsonl_transport_gets_path_next_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        runner.invoke(cli, ["init", "-d", str(tmp_path), "--transport", "jsonl"])
        opts = ConfigLoader().load_file(tmp_path / "errorchain.yaml")
        assert opts.transport == "jsonl"
        assert opts.transport_path == str(tmp_path / "events.jsonl")

    def test_existing_config_skipped(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "errorchain.yaml"
        config.write_text("debug: true\n", encoding="utf-8")
        result = runner.invoke(cli, ["init", "--directory", str(tmp_path)])
        assert result.exit_code == 0
        assert config.read_text(encoding="utf-8") == "debug: true\n"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "errorchain.yaml"
        config.write_text("debug: true\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["init", "-d", str(tmp_path), "--force", "--environment", "ci"]
        )
        assert result.exit_code == 0
        assert ConfigLoader().load_file(config).environment == "ci"


class TestConfigCommand:
    def test_json_output_for_explicit_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "errorchain.json"
        config.write_text('{"environment": "ci"}', encoding="utf-8")
        result = runner.invoke(cli, ["config", "--format", "json", "--config", str(config)])
        assert result.exit_code == 0
        assert json.loads(result.output)["environment"] == "ci"

    def test_discovers_file_in_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "errorchain.yaml").write_text("release: '7'\n", encoding="utf-8")
        result = runner.invoke(cli, ["config", "--format", "json", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert json.loads(result.output)["release"] == "7"

    def test_environment_applies(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ERRORCHAIN_SERVER_NAME", "web-3")
        result = runner.invoke(cli, ["config", "--format", "json", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert json.loads(result.output)["server_name"] == "web-3"

    def test_table_shows_value_sources(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "errorchain.yaml").write_text("debug: true\n", encoding="utf-8")
        monkeypatch.setenv("ERRORCHAIN_RELEASE", "5")
        result = runner.invoke(cli, ["config", "-d", str(tmp_path)])
        assert result.exit_code == 0
        assert "ERRORCHAIN_RELEASE" in result.output
        assert "file" in result.output
        assert "default" in result.output

    def test_invalid_config_exits_nonzero(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "errorchain.yaml"
        config.write_text("transport: fax\n", encoding="utf-8")
        result = runner.invoke(cli, ["config", "--validate", "--config", str(config)])
        assert result.exit_code == 1

    def test_missing_config_exits_nonzero(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["config", "--config", str(tmp_path / "absent.yaml")])
        assert result.exit_code == 1


class TestDemoCommand:
    def test_json_output_is_root_cause_first(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["demo", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        types = [v["type"] for v in payload["exception"]["values"]]
        assert types == ["ValueError", "RuntimeError"]
        assert payload["level"] == "error"

    def test_table_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert "RuntimeError" in result.output
