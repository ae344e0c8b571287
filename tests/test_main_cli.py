"""Tests for nettelemetry main CLI (orchestrator)."""

from __future__ import annotations

import json
import sys
from unittest.mock import patch

import pytest
from loguru import logger

from nettelemetry import __main__ as orchestrator
from nettelemetry import configure_logging


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()
    logger.disable("nettelemetry")


class TestMain:
    """Test dispatch in nettelemetry.__main__.main."""

    def test_no_arguments_prints_usage_and_fails(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["nettelemetry"])

        with pytest.raises(SystemExit) as exc_info:
            orchestrator.main()

        assert exc_info.value.code == 1
        assert "Available commands:" in capsys.readouterr().out

    def test_help_exits_zero(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["nettelemetry", "--help"])

        with pytest.raises(SystemExit) as exc_info:
            orchestrator.main()

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "interfaces" in out
        assert "metrics" in out

    def test_unknown_command(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["nettelemetry", "bogus"])

        with pytest.raises(SystemExit) as exc_info:
            orchestrator.main()

        assert exc_info.value.code == 1
        assert "unknown command 'bogus'" in capsys.readouterr().err

    def test_dispatches_to_cli(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["nettelemetry", "metrics", "--no-utilization"])

        with patch("nettelemetry.cli.main") as mock_cli_main:
            orchestrator.main()

        mock_cli_main.assert_called_once_with(["metrics", "--no-utilization"])

    def test_end_to_end_snapshot(self, monkeypatch, capsys, tmp_path):
        snapshot = tmp_path / "snap.json"
        snapshot.write_text(json.dumps({"interfaces": [{"iface": "bond0.42"}], "counters": []}))
        monkeypatch.setattr(
            sys, "argv", ["nettelemetry", "interfaces", "--snapshot", str(snapshot), "--format", "json"]
        )

        orchestrator.main()

        data = json.loads(capsys.readouterr().out)
        assert data[0]["vlanId"] == 42


class TestConfigureLogging:
    """Test configure_logging."""

    def test_honours_loguru_level(self, monkeypatch, capsys):
        monkeypatch.setenv("LOGURU_LEVEL", "WARNING")
        configure_logging()

        logger.info("below threshold")
        logger.warning("at threshold")

        err = capsys.readouterr().err
        assert "at threshold" in err
        assert "below threshold" not in err

    def test_skiplog_records_filtered(self, monkeypatch, capsys):
        monkeypatch.setenv("LOGURU_LEVEL", "DEBUG")
        configure_logging()

        logger.bind(skiplog=True).info("hidden message")
        logger.info("visible message")

        err = capsys.readouterr().err
        assert "visible message" in err
        assert "hidden message" not in err


class TestStartupBanner:
    """Test the startup banner printed by __main__.main."""

    def test_banner_logged_at_info(self, monkeypatch, capsys):
        monkeypatch.setenv("LOGURU_LEVEL", "INFO")
        monkeypatch.setattr(sys, "argv", ["nettelemetry", "--help"])

        with pytest.raises(SystemExit):
            orchestrator.main()

        assert "nettelemetry starting up" in capsys.readouterr().err

    def test_banner_hidden_above_info(self, monkeypatch, capsys):
        monkeypatch.setenv("LOGURU_LEVEL", "WARNING")
        monkeypatch.setattr(sys, "argv", ["nettelemetry", "--help"])

        with pytest.raises(SystemExit):
            orchestrator.main()

        assert "nettelemetry starting up" not in capsys.readouterr().err
