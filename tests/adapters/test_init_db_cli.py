"""Tests for the init_db_cli adapter."""

from unittest.mock import MagicMock

from portfolio_tracker.adapters import init_db_cli


def test_main_creates_schema_and_prints(monkeypatch, capsys):
    fake_logger = MagicMock()
    adapter = MagicMock()
    adapter.get_portfolio_engine.return_value = "engine"
    calls = []

    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(init_db_cli, "build_database_adapter", lambda: adapter)
    monkeypatch.setattr(init_db_cli, "ensure_schema", calls.append)

    init_db_cli.main()

    assert calls == ["engine"]
    assert "ready" in capsys.readouterr().out
