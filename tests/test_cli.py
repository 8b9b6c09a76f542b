"""Tests for the typer entry point and the menu loop."""

import pytest
from typer.testing import CliRunner

from bugx import cli
from bugx.cli import app

runner = CliRunner()


@pytest.fixture
def calls(monkeypatch):
    """Record run_modes calls instead of running tools."""
    seen = []

    def fake(modes, target, speed, cfg=None):
        seen.append((list(modes), target, speed))
        return ["httpx", "nuclei"]

    monkeypatch.setattr(cli, "run_modes", fake)
    return seen


@pytest.fixture
def no_config(tmp_path):
    return ["--config", str(tmp_path / "absent.yaml")]


class TestMenu:

    def test_zero_anywhere_exits(self, calls, no_config):
        result = runner.invoke(app, ["menu", *no_config], input="1,0,5\n")
        assert result.exit_code == 0
        assert calls == []
        assert "[MODE" not in result.output

    def test_unordered_selection_runs_ascending(self, calls, no_config):
        result = runner.invoke(app, ["menu", *no_config], input="3,1,2\nexample.com\n\n\n0\n")
        assert result.exit_code == 0
        assert calls == [([1, 2, 3], "https://example.com", 50)]
        assert "httpx, nuclei" in result.output

    def test_run_all_with_speed(self, calls, no_config):
        runner.invoke(app, ["menu", *no_config], input="9\nhttps://a.test\n10\n\n0\n")
        assert calls == [([1, 2, 3, 4, 5, 6, 7, 8], "https://a.test", 10)]

    def test_empty_target_returns_to_menu(self, calls, no_config):
        result = runner.invoke(app, ["menu", *no_config], input="1\n   \n\n0\n")
        assert result.exit_code == 0
        assert calls == []
        assert "[WARN] Target tidak boleh kosong." in result.output

    def test_no_valid_mode(self, calls, no_config):
        result = runner.invoke(app, ["menu", *no_config], input="abc\n\n0\n")
        assert result.exit_code == 0
        assert calls == []
        assert "[INFO] Tidak ada mode valid yang dipilih." in result.output

    def test_eof_ends_loop(self, calls, no_config):
        result = runner.invoke(app, ["menu", *no_config], input="")
        assert result.exit_code == 0
        assert "EOF" in result.output

    def test_results_dir_error_goes_back_to_menu(self, monkeypatch, no_config):
        def denied(modes, target, speed, cfg=None):
            raise PermissionError("permission denied: /root/BUGx")

        monkeypatch.setattr(cli, "run_modes", denied)
        result = runner.invoke(app, ["menu", *no_config], input="1\na.test\n\n\n0\n")
        assert result.exit_code == 0
        assert "[ERROR] permission denied: /root/BUGx" in result.output

    def test_speed_default_from_config(self, calls, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("speed: 25\n")
        runner.invoke(app, ["menu", "--config", str(cfg)], input="6\na.test\n\n\n0\n")
        assert calls == [([6], "https://a.test", 25)]

    def test_bad_config(self, calls, tmp_path):
        cfg = tmp_path / "config.yaml"
        cfg.write_text("speed: fast\n")
        result = runner.invoke(app, ["menu", "--config", str(cfg)], input="0\n")
        assert result.exit_code == 1
        assert "Config error" in result.output


class TestRun:

    def test_runs_once(self, calls, no_config):
        result = runner.invoke(app, ["run", "example.com", "--modes", "2,1", "--speed", "7", *no_config])
        assert result.exit_code == 0
        assert calls == [([1, 2], "https://example.com", 7)]
        assert "RINGKASAN" in result.output

    def test_defaults_to_all_modes(self, calls, no_config):
        runner.invoke(app, ["run", "a.test", *no_config])
        assert calls == [([1, 2, 3, 4, 5, 6, 7, 8], "https://a.test", 50)]

    def test_rejects_exit_mode(self, calls, no_config):
        result = runner.invoke(app, ["run", "a.test", "--modes", "0", *no_config])
        assert result.exit_code == 2
        assert calls == []

    def test_rejects_blank_target(self, calls, no_config):
        result = runner.invoke(app, ["run", "  ", *no_config])
        assert result.exit_code == 2
        assert calls == []


class TestHealthcheck:

    def test_reports_present_and_missing(self, toolbox, no_config):
        toolbox.remove("dalfox")
        result = runner.invoke(app, ["healthcheck", *no_config])
        assert result.exit_code == 0
        assert "httpx: stub httpx -version" in result.output
        assert "dalfox: not found on PATH" in result.output
        assert "dalfox payload:" in result.output
