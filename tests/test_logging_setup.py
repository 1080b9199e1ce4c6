"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from hawksoft_sync.logging_setup import get_log_level, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("value,expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("nonsense", logging.INFO),
    ("BASIC_FORMAT", logging.INFO),
])
def test_get_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert get_log_level() == expected


def test_get_log_level_default(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == logging.INFO


def test_setup_logging_installs_rich_handler():
    setup_logging(logging.DEBUG)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert logging.getLogger("httpx").level == logging.WARNING
