"""Tests for netint.logging_config."""

import logging

import pytest
from rich.logging import RichHandler

from netint.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test log level resolution."""

    def test_default_warning(self, monkeypatch):
        monkeypatch.delenv("NETINT_LOG_LEVEL", raising=False)

        assert configure_logging() == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("NETINT_LOG_LEVEL", "debug")

        assert configure_logging() == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("NETINT_LOG_LEVEL", "DEBUG")

        assert configure_logging("error") == logging.ERROR

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("NETINT_LOG_LEVEL", "LOUD")

        assert configure_logging() == logging.WARNING

    def test_rich_handler_installed(self):
        configure_logging("info")

        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)
