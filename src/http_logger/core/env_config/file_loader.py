"""
Configuration file loader for YAML and JSON files.

Supports loading LoggerOptions from external configuration files. Options
may sit at the top level or under an ``http_logger:`` section, so the
logger can share a config file with the rest of an application.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigValidationError
from ..logging.config import LoggerOptions
from .validator import LoggerOptionsModel

CONFIG_FILE_ENV_VAR = "HTTP_LOGGER_CONFIG_FILE"
SECTION_NAME = "http_logger"


class ConfigFileLoader:
    """
    Load LoggerOptions from configuration files.

    Supports YAML and JSON formats with automatic format detection.

    Examples:
        >>> options = ConfigFileLoader.from_yaml("logging.yaml")
        >>> options = ConfigFileLoader.from_json("logging.json")
        >>> options = ConfigFileLoader.from_file("logging.yaml")  # Auto-detect
        >>> options = ConfigFileLoader.from_env_path()  # From HTTP_LOGGER_CONFIG_FILE
    """

    @staticmethod
    def from_yaml(path: Union[str, Path]) -> LoggerOptions:
        """
        Load options from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigValidationError: If the file is not valid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax in {path}: {e}")

        if not data:
            raise ConfigValidationError(f"Empty config file: {path}")

        return ConfigFileLoader._build_options(data, str(path))

    @staticmethod
    def from_json(path: Union[str, Path]) -> LoggerOptions:
        """
        Load options from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigValidationError: If the file is not valid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON syntax in {path}: {e}")

        if not data:
            raise ConfigValidationError(f"Empty config file: {path}")

        return ConfigFileLoader._build_options(data, str(path))

    @staticmethod
    def from_file(path: Union[str, Path]) -> LoggerOptions:
        """
        Detect the format from the extension (.yaml, .yml, .json).

        Raises:
            ValueError: If the extension is not supported
            FileNotFoundError: If the file does not exist
            ConfigValidationError: If the file is not valid
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in [".yaml", ".yml"]:
            return ConfigFileLoader.from_yaml(path)
        elif suffix == ".json":
            return ConfigFileLoader.from_json(path)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                f"Supported formats: .yaml, .yml, .json"
            )

    @staticmethod
    def from_env_path() -> Optional[LoggerOptions]:
        """
        Load from the path given in the HTTP_LOGGER_CONFIG_FILE env var.

        Returns:
            LoggerOptions instance or None if the env var is not set

        Example:
            >>> # export HTTP_LOGGER_CONFIG_FILE=/etc/app/logging.yaml
            >>> options = ConfigFileLoader.from_env_path()
            >>> if options:
            ...     initialize_logger(options)
        """
        config_path = os.environ.get(CONFIG_FILE_ENV_VAR)
        if not config_path:
            return None

        return ConfigFileLoader.from_file(config_path)

    @staticmethod
    def _build_options(data: Any, source: str) -> LoggerOptions:
        """
        Build LoggerOptions from parsed data.

        Raises:
            ConfigValidationError: If the data is not a valid options dict
        """
        if isinstance(data, dict) and SECTION_NAME in data:
            config_data = data[SECTION_NAME]
        else:
            config_data = data

        if not isinstance(config_data, dict):
            raise ConfigValidationError(
                f"Config must be a dictionary, got {type(config_data).__name__} in {source}"
            )

        try:
            model = LoggerOptionsModel.model_validate(config_data)
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid logger config in {source}: {e}") from e

        return model.to_options()
