"""Tests for the langpack CLI commands."""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
import yaml
from click.testing import CliRunner

from langpack.cli.main import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every command from an empty directory with no global config."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setattr("langpack.core.logging._log_file_path", None)
    with patch("langpack.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
        yield
    # The CLI binds log handlers to the runner's streams, which close after invoke
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


class TestMain:
    """Tests for the cli group."""

    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("check", "show", "detect", "list"):
            assert name in result.output

    def test_bad_repo_config(self) -> None:
        langpack_dir = Path.cwd() / ".langpack"
        langpack_dir.mkdir()
        (langpack_dir / "config.yaml").write_text("logging:\n  level: LOUD\n")

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 1
        assert "logging.level" in result.output


class TestCheckCommand:
    """Tests for langpack check."""

    def test_clean_directory(self, languages_dir: Path) -> None:
        result = runner.invoke(cli, ["check", str(languages_dir)])
        assert result.exit_code == 0
        assert "toy/config.toml: ok" in result.stdout

    def test_language_directory(self, languages_dir: Path) -> None:
        result = runner.invoke(cli, ["check", str(languages_dir / "toy")])
        assert result.exit_code == 0
        assert "ok" in result.stdout

    def test_problem_exits_nonzero(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('name = "X"\nautoclose_before = "; )"\n')

        result = runner.invoke(cli, ["check", str(path)])

        assert result.exit_code == 1
        assert "1 problem(s)" in result.stdout

    def test_non_string_suffix_reported(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('name = "X"\npath_suffixes = [["x"]]\n')

        result = runner.invoke(cli, ["check", str(path)])

        assert result.exit_code == 1
        assert "path_suffixes" in result.stdout
        assert "autoclose_before" in result.stdout

    def test_json_output(self, tmp_path: Path, languages_dir: Path) -> None:
        bad = tmp_path / "bad.toml"
        bad.write_text("name = [\n")

        result = runner.invoke(
            cli, ["check", "--json", str(languages_dir / "toy" / "config.toml"), str(bad)]
        )

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["ok"] is False
        assert data["files"][str(languages_dir / "toy" / "config.toml")] == []
        assert len(data["files"][str(bad)]) == 1

    def test_empty_directory(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(cli, ["check", str(empty)])
        assert result.exit_code == 1
        assert "No config.toml files found" in result.output


class TestShowCommand:
    """Tests for langpack show."""

    def test_toml(self) -> None:
        result = runner.invoke(cli, ["show", "python"])
        assert result.exit_code == 0
        data = tomllib.loads(result.stdout)
        assert data["name"] == "Python"
        assert len(data["brackets"]) == 19

    def test_json(self) -> None:
        result = runner.invoke(cli, ["show", "Python", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["path_suffixes"] == ["mpy", "py", "pyi"]
        assert data["debuggers"] == ["Debugpy"]

    def test_yaml(self) -> None:
        result = runner.invoke(cli, ["show", "python", "--format", "yaml"])
        assert result.exit_code == 0
        data = yaml.safe_load(result.stdout)
        assert data["grammar"] == "python"

    def test_unknown(self) -> None:
        result = runner.invoke(cli, ["show", "cobol"])
        assert result.exit_code == 1
        assert "Unknown language 'cobol'" in result.output
        assert "Python" in result.output

    def test_user_languages_dir(self, languages_dir: Path) -> None:
        result = runner.invoke(cli, ["--languages-dir", str(languages_dir), "show", "toy"])
        assert result.exit_code == 0
        assert 'name = "Toy"' in result.stdout


class TestDetectCommand:
    """Tests for langpack detect."""

    def test_by_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "main.py"
        path.write_text("print('hi')\n")

        result = runner.invoke(cli, ["detect", str(path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Python (by suffix)"

    def test_by_first_line(self, tmp_path: Path) -> None:
        path = tmp_path / "run"
        path.write_text("#!/usr/bin/env python3\nprint('hi')\n")

        result = runner.invoke(cli, ["detect", "--json", str(path)])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["language"] == "Python"
        assert data["matched_by"] == "first_line"

    def test_unknown(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello\n")

        result = runner.invoke(cli, ["detect", str(path)])

        assert result.exit_code == 1
        assert result.stdout.strip() == "unknown"

    def test_user_language(self, tmp_path: Path, languages_dir: Path) -> None:
        path = tmp_path / "game.toy"
        path.write_text("")

        result = runner.invoke(cli, ["--languages-dir", str(languages_dir), "detect", str(path)])

        assert result.exit_code == 0
        assert "Toy" in result.stdout


class TestListCommand:
    """Tests for langpack list."""

    def test_lists_builtin(self) -> None:
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "Python" in result.stdout
        assert "Debugpy" in result.stdout

    def test_hidden_excluded_unless_all(self, tmp_path: Path) -> None:
        root = tmp_path / "langs"
        (root / "secret").mkdir(parents=True)
        (root / "secret" / "config.toml").write_text('name = "Secret"\nhidden = true\n')

        hidden = runner.invoke(cli, ["--languages-dir", str(root), "list"])
        shown = runner.invoke(cli, ["--languages-dir", str(root), "list", "--all"])

        assert hidden.exit_code == 0
        assert "Secret" not in hidden.stdout
        assert "Secret" in shown.stdout

    def test_broken_user_descriptor(self, tmp_path: Path) -> None:
        root = tmp_path / "langs"
        (root / "broken").mkdir(parents=True)
        (root / "broken" / "config.toml").write_text("name = \n")

        result = runner.invoke(cli, ["--languages-dir", str(root), "list"])

        assert result.exit_code == 1
        assert "CONFIG_PARSE_ERROR" in result.output

    def test_error_points_at_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "langpack.log"
        langpack_dir = Path.cwd() / ".langpack"
        langpack_dir.mkdir()
        (langpack_dir / "config.yaml").write_text(
            yaml.safe_dump({"logging": {"outputs": [{"destination": str(log_file)}]}})
        )
        root = tmp_path / "langs"
        (root / "broken").mkdir(parents=True)
        (root / "broken" / "config.toml").write_text("name = \n")

        result = runner.invoke(cli, ["--languages-dir", str(root), "list"])

        assert result.exit_code == 1
        assert f"Details in log: {log_file}" in result.output
        assert "descriptor_parse_failed" in log_file.read_text()
