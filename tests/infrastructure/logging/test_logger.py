"""Tests for the application and usage loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from portfolio_tracker.application.use_cases.import_transaction import (
    ImportTransactionUseCase,
)
from portfolio_tracker.infrastructure.logging import logger as logger_module


@pytest.fixture
def dated_project_root(tmp_path, monkeypatch):
    """Point log files at a temporary project with a fixed date stamp."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20260105"),
    )
    return tmp_path


@pytest.fixture
def fresh_singletons(monkeypatch):
    """Let each test build its own app and usage logger singletons."""
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)


def _build_like(logger_class, name):
    return (
        logger_module.LoggerBuilder()
        .name(name)
        .subdir(logger_class._subdir)
        .prefix(logger_class._prefix)
        .console(False)
        .build()
    )


def _close(built: logging.Logger) -> None:
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


@pytest.mark.parametrize(
    ("logger_class", "expected"),
    [
        (logger_module.AppLogger, ("app", "20260105_app_logs.log")),
        (logger_module.UsageLogger, ("usage", "20260105_usage_logs.log")),
    ],
)
def test_log_files_are_dated_under_their_subdir(
    dated_project_root,
    logger_class,
    expected,
):
    built = _build_like(logger_class, f"tests.{logger_class.__name__}")
    try:
        built.info("Import parsed: mode=csv")
        for handler in built.handlers:
            handler.flush()

        subdir, filename = expected
        log_path = dated_project_root / "logs" / subdir / filename
        assert [h.baseFilename for h in built.handlers] == [str(log_path)]
        content = log_path.read_text(encoding="utf-8")
        assert f"tests.{logger_class.__name__} | INFO | " in content
        assert "Import parsed: mode=csv" in content
    finally:
        _close(built)


def test_building_twice_does_not_duplicate_handlers(dated_project_root):
    builder = (
        logger_module.LoggerBuilder()
        .name("tests.rebuild")
        .console(True)
        .level(logging.WARNING)
    )
    built = builder.build()
    try:
        assert builder.build() is built
        assert len(built.handlers) == 2
        assert built.level == logging.WARNING
        assert built.propagate is False
    finally:
        _close(built)


def test_getters_return_separate_singletons(monkeypatch, fresh_singletons):
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("portfolio_tracker", "app", "app_logs"),
        ("portfolio_tracker.usage", "usage", "usage_logs"),
    ]


def test_import_use_case_logs_usage_by_default(monkeypatch, fresh_singletons):
    usage_records = MagicMock()
    app_records = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: usage_records if self._subdir == "usage" else app_records,
    )

    use_case = ImportTransactionUseCase(MagicMock(), MagicMock())
    use_case.parse("Compra de 0.5 BTC")

    usage_records.info.assert_called_once()
    assert "found=True" in usage_records.info.call_args.args[0]
    app_records.info.assert_not_called()
