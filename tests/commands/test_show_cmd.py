"""Tests for the show CLI command."""

from __future__ import annotations

import json
from datetime import datetime

import pytest
from click.testing import CliRunner

from jpdatetime.cli import cli


class TestShowCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "2024-03-05 09:05:30"])
        assert result.exit_code == 0
        assert "2024年3月5日（火）" in result.stdout
        assert "20240305_090530" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "2024/03/05 09:05:30"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "show"
        assert data["data"]["only_time"] == "09:05"
        assert data["data"]["date_jp_string"] == "2024年03月05日"

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "show", "2024-03-05 09:05:30"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2024-03-05 09:05:30"

    def test_unparseable_json_carries_warning(
        self, cli_runner: CliRunner, frozen_now: datetime
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "not a date"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["date_string"] == "2026-10-18"
        assert len(data["warnings"]) == 1

    def test_unrepresentable_input_does_not_crash(
        self, cli_runner: CliRunner, frozen_now: datetime
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "show", "9999-12-31T20:00:00Z"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["date_string"] == "2026-10-18"

    def test_env_var_enables_json(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("JPDT_JSON_OUTPUT", "1")
        result = cli_runner.invoke(cli, ["show", "2024-03-05"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["date_string"] == "2024-03-05"
