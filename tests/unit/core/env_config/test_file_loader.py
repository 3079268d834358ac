"""Tests for configuration file loader."""

import json

import pytest

from http_logger.core.env_config.file_loader import CONFIG_FILE_ENV_VAR, ConfigFileLoader
from http_logger.core.exceptions import ConfigurationError, ConfigValidationError
from http_logger.core.logging.config import LoggerOptions, LogLevel


class TestFromYAML:
    """Test loading from YAML files."""

    def test_load_section(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            """
app:
  name: orders
http_logger:
  level: debug
  file: true
  filePath: ./logs/orders.log
  skip:
    - /health
    - /metrics
  includeIp: true
"""
        )

        options = ConfigFileLoader.from_yaml(config_file)

        assert options.level == LogLevel.DEBUG
        assert options.file is True
        assert options.file_path == "./logs/orders.log"
        assert options.skip == ("/health", "/metrics")
        assert options.include_ip is True

    def test_load_top_level(self, tmp_path):
        config_file = tmp_path / "logging.yml"
        config_file.write_text("level: warn\nconsole: false\n")

        options = ConfigFileLoader.from_yaml(str(config_file))

        assert options.level == LogLevel.WARN
        assert options.console is False

    def test_invalid_syntax(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("http_logger: [unclosed\n")

        with pytest.raises(ConfigValidationError, match="Invalid YAML syntax"):
            ConfigFileLoader.from_yaml(config_file)

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        with pytest.raises(ConfigValidationError, match="Empty config file"):
            ConfigFileLoader.from_yaml(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigFileLoader.from_yaml(tmp_path / "missing.yaml")

    def test_section_not_a_dict(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("http_logger: debug\n")

        with pytest.raises(ConfigValidationError, match="must be a dictionary"):
            ConfigFileLoader.from_yaml(config_file)

    def test_wrong_value_type(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("http_logger:\n  console: sometimes\n")

        with pytest.raises(ConfigValidationError, match="Invalid logger config"):
            ConfigFileLoader.from_yaml(config_file)


class TestFromJSON:
    """Test loading from JSON files."""

    def test_load(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "http_logger": {"level": "error", "useGlobal": True, "ipHeaders": "cf-connecting-ip"}
        }))

        options = ConfigFileLoader.from_json(config_file)

        assert options.level == LogLevel.ERROR
        assert options.use_global is True
        assert options.ip_headers == ("cf-connecting-ip",)

    def test_invalid_syntax(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigValidationError, match="Invalid JSON syntax"):
            ConfigFileLoader.from_json(config_file)

    def test_empty_object(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{}")

        with pytest.raises(ConfigValidationError):
            ConfigFileLoader.from_json(config_file)

    def test_top_level_list(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2]")

        with pytest.raises(ConfigValidationError, match="got list"):
            ConfigFileLoader.from_json(config_file)


class TestFromFile:
    """Format detection and the env var path."""

    def test_detects_yaml(self, tmp_path):
        config_file = tmp_path / "config.YAML"
        config_file.write_text("level: debug\n")

        assert ConfigFileLoader.from_file(config_file).level == LogLevel.DEBUG

    def test_detects_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"level": "warn"}')

        assert ConfigFileLoader.from_file(config_file).level == LogLevel.WARN

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported config file format"):
            ConfigFileLoader.from_file(tmp_path / "config.toml")

    def test_from_env_path_unset(self):
        assert ConfigFileLoader.from_env_path() is None

    def test_from_env_path(self, tmp_path, monkeypatch):
        config_file = tmp_path / "logging.yaml"
        config_file.write_text("http_logger:\n  format: '{level} {message}'\n")
        monkeypatch.setenv(CONFIG_FILE_ENV_VAR, str(config_file))

        options = ConfigFileLoader.from_env_path()

        assert isinstance(options, LoggerOptions)
        assert options.format == "{level} {message}"

    def test_errors_share_base_class(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{oops")

        with pytest.raises(ConfigurationError):
            ConfigFileLoader.from_file(config_file)
