"""Tests for the ledger logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr(logger_module.dotenv, "load_dotenv", lambda: None)


@pytest.fixture
def fresh_singletons():
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
    yield
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("chatty", logging.INFO),
    ],
)
def test_log_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LEDGER_LOG_LEVEL", raw)

    assert logger_module.log_level_from_env() == expected


def test_report_logs_land_in_dated_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240615"),
    )
    logging.getLogger("ledger_test_reports").handlers.clear()

    builder = (
        logger_module.LoggerBuilder()
        .name("ledger_test_reports")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    reports_logger = builder.build()
    reports_logger.debug("Cashflow totals computed for tenant t1")
    for handler in reports_logger.handlers:
        handler.flush()

    log_path = tmp_path / "logs" / "reports" / "20240615_report_logs.log"
    assert reports_logger.level == logging.DEBUG
    assert reports_logger.propagate is False
    assert len(reports_logger.handlers) == 1
    assert "DEBUG | ledger_test_reports | Cashflow totals" in (
        log_path.read_text(encoding="utf-8")
    )
    assert builder.build() is reports_logger
    for handler in reports_logger.handlers:
        handler.close()
    reports_logger.handlers.clear()


def test_default_handlers_defer_to_logger_level(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.NOTSET
    assert console_handler.level == logging.NOTSET
    assert file_handler.formatter is fmt
    assert console_handler.formatter is fmt
    file_handler.close()


def test_app_logger_uses_env_level(monkeypatch, fresh_singletons):
    levels = []

    def _fake_build(self):
        levels.append((self._name, self._level))
        return MagicMock()

    monkeypatch.setenv("LEDGER_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    logger_module.get_app_logger()

    assert levels == [("ledger_dashboard", logging.ERROR)]


def test_app_and_usage_loggers_are_separate_singletons(
    monkeypatch,
    fresh_singletons,
):
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("Page Reports opened for tenant t1")

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("ledger_dashboard", "app", "app_logs"),
        ("ledger_dashboard.usage", "usage", "usage_logs"),
    ]
    usage_logger.logger.info.assert_called_once_with(
        "Page Reports opened for tenant t1"
    )


def test_wrapper_delegates_every_level(monkeypatch, fresh_singletons):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    app_logger = logger_module.get_app_logger()

    app_logger.debug("rows fetched")
    app_logger.info("summary computed")
    app_logger.warning("unclassified payment method")
    app_logger.error("ledger unavailable")
    app_logger.critical("balance sheet unbalanced")

    fake_logger.debug.assert_called_with("rows fetched")
    fake_logger.info.assert_called_with("summary computed")
    fake_logger.warning.assert_called_with("unclassified payment method")
    fake_logger.error.assert_called_with("ledger unavailable")
    fake_logger.critical.assert_called_with("balance sheet unbalanced")
