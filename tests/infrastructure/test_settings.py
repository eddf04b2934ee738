"""Tests for infrastructure settings."""

from datetime import date
from unittest.mock import MagicMock

import pytest

import src.infrastructure.settings as settings_module
from src.infrastructure.settings import ReportSettings

_VARIABLES = (
    "REPORT_INCLUDE_INACTIVE",
    "REPORT_SKIP_ZERO_ROWS",
    "REPORT_START_DATE",
    "REPORT_END_DATE",
    "REPORT_ACCOUNT_CODE",
)


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    """Isolate settings from .env files and capture warnings."""
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_defaults(logger) -> None:
    settings = ReportSettings.from_env()

    assert settings == ReportSettings()
    assert settings.include_inactive is False
    assert settings.skip_zero_rows is True
    logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, logger) -> None:
    monkeypatch.setenv("REPORT_INCLUDE_INACTIVE", "Yes")
    monkeypatch.setenv("REPORT_SKIP_ZERO_ROWS", "0")
    monkeypatch.setenv("REPORT_START_DATE", "2024-01-01")
    monkeypatch.setenv("REPORT_END_DATE", " 2024-12-31 ")
    monkeypatch.setenv("REPORT_ACCOUNT_CODE", " 1100 ")

    settings = ReportSettings.from_env()

    assert settings.include_inactive is True
    assert settings.skip_zero_rows is False
    assert settings.start_date == date(2024, 1, 1)
    assert settings.end_date == date(2024, 12, 31)
    assert settings.account_code == "1100"


def test_from_env_warns_on_invalid_values(monkeypatch, logger) -> None:
    """Unreadable values fall back to defaults with a warning each."""
    monkeypatch.setenv("REPORT_INCLUDE_INACTIVE", "maybe")
    monkeypatch.setenv("REPORT_END_DATE", "31/12/2024")

    settings = ReportSettings.from_env()

    assert settings.include_inactive is False
    assert settings.end_date is None
    assert logger.warning.call_count == 2


def test_from_env_drops_start_after_end(monkeypatch, logger) -> None:
    monkeypatch.setenv("REPORT_START_DATE", "2024-06-01")
    monkeypatch.setenv("REPORT_END_DATE", "2024-01-31")

    settings = ReportSettings.from_env()

    assert settings.start_date is None
    assert settings.end_date == date(2024, 1, 31)
    logger.warning.assert_called_once()
