"""Test configure_logging."""
import logging

import pytest

from arithmetic_cli.common.logger import LOG_LEVEL_ENV, configure_logging, logger


@pytest.fixture(autouse=True)
def clear_env(monkeypatch) -> None:
    """Start every test without the log level override."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def test_default_level_is_warning() -> None:
    configure_logging()
    assert logger.level == logging.WARNING


def test_verbose_level_is_info() -> None:
    configure_logging(verbose=True)
    assert logger.level == logging.INFO


def test_env_overrides_level(monkeypatch) -> None:
    """The environment variable wins over the verbose flag."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    configure_logging(verbose=True)
    assert logger.level == logging.DEBUG


def test_unknown_env_level_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
    configure_logging()
    assert logger.level == logging.WARNING


def test_handlers_do_not_stack() -> None:
    """Calling configure_logging twice keeps a single handler."""
    configure_logging()
    configure_logging()
    assert len(logger.handlers) == 1
