"""Tests for load_from_env."""

import pytest

from http_logger.core.env_config.loader import format_options_summary, load_from_env
from http_logger.core.exceptions import ConfigValidationError
from http_logger.core.logging.config import LoggerOptions, LogLevel


class TestLoadFromEnv:
    """Tests for load_from_env."""

    def test_defaults(self):
        assert load_from_env() == LoggerOptions()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("HTTP_LOGGER_LEVEL", "warn")
        monkeypatch.setenv("HTTP_LOGGER_SKIP", "/health")

        options = load_from_env()

        assert options.level == LogLevel.WARN
        assert options.skip == ("/health",)

    def test_dotenv_in_working_directory(self, tmp_path):
        # conftest runs every test from tmp_path
        (tmp_path / ".env").write_text("HTTP_LOGGER_LEVEL=debug\n")

        assert load_from_env().level == LogLevel.DEBUG

    def test_custom_env_file(self, tmp_path):
        env_file = tmp_path / ".env.production"
        env_file.write_text("HTTP_LOGGER_CONSOLE=false\nHTTP_LOGGER_FILE=true\n")

        options = load_from_env(env_file=str(env_file))

        assert options.console is False
        assert options.file is True

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("HTTP_LOGGER_LEVEL", "warn")

        options = load_from_env(level="error", skip=["/metrics"])

        assert options.level == LogLevel.ERROR
        assert options.skip == ("/metrics",)

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("HTTP_LOGGER_INCLUDE_IP", "perhaps")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_from_env()

        assert "HTTP_LOGGER_" in exc_info.value.message


class TestFormatOptionsSummary:
    """Tests for format_options_summary."""

    def test_summary(self):
        summary = format_options_summary(
            LoggerOptions.create(level="debug", file=True, file_path="/var/log/app.log", skip=["/health"])
        )

        assert summary.startswith("LoggerOptions:")
        assert "level: debug" in summary
        assert "path: /var/log/app.log" in summary
        assert "skip: /health" in summary

    def test_summary_without_file(self):
        summary = format_options_summary(LoggerOptions())

        assert "path:" not in summary
        assert "skip:" not in summary
