"""
Pytest configuration and fixtures for http-logger-core tests.
"""

import os

import pytest

from http_logger.core.logging.config import LoggerOptions
from http_logger.core.logging.registry import reset_logger


@pytest.fixture(autouse=True)
def clean_global_logger():
    """Every test starts and ends without a global logger."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """
    Keep HTTP_LOGGER_* variables and a stray ./.env out of tests.

    Tests run from a temporary directory, so default relative paths such as
    ./logs/app.log never touch the working tree.
    """
    for name in list(os.environ):
        if name.upper().startswith("HTTP_LOGGER_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def log_file(tmp_path):
    """Path of a not yet existing log file inside a nested directory."""
    return tmp_path / "logs" / "nested" / "app.log"


@pytest.fixture
def plain_options():
    """Console-only options without color, as most tests want."""
    return LoggerOptions.create(level="debug", color=False)


@pytest.fixture
def file_options(log_file):
    """
    File-only options fixture.

    Uses a temporary directory for the log file to avoid cleanup issues.
    """
    return LoggerOptions.create(
        level="debug",
        console=False,
        file=True,
        file_path=str(log_file),
    )
