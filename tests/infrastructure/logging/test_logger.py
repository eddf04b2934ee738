"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should build loggers in the project logs directory."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240131"),
    )

    builder = logger_module.LoggerBuilder()
    report_logger = (
        builder.name("ledger_reports.test_builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert report_logger.name == "ledger_reports.test_builder"
    assert report_logger.level == logging.WARNING
    assert report_logger.propagate is False
    assert len(report_logger.handlers) == 1
    expected_path = tmp_path / "logs" / "reports" / "20240131_report_logs.log"
    assert report_logger.handlers[0].baseFilename == str(expected_path)
    assert builder.build() is report_logger
    report_logger.handlers[0].close()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter at INFO."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("app")
    logger.info("balanced")
    logger.warning("unbalanced")
    logger.error("failed")
    logger.debug("rows")
    logger.critical("down")

    fake_logger.info.assert_called_with("balanced")
    fake_logger.warning.assert_called_with("unbalanced")
    fake_logger.error.assert_called_with("failed")
    fake_logger.debug.assert_called_with("rows")
    fake_logger.critical.assert_called_with("down")
    assert logger_module.Logger("other") is logger


def test_usage_logger_writes_to_usage_directory(tmp_path, monkeypatch):
    """The usage logger keeps its own subdirectory and file prefix."""
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert app_logger is logger_module.get_app_logger()
    assert usage_logger is logger_module.get_usage_logger()
    assert app_logger is not usage_logger
    assert built == [
        ("ledger_reports", "app", "app_logs"),
        ("ledger_reports.usage", "usage", "usage_logs"),
    ]
