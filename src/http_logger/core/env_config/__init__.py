"""
Environment and file configuration for HTTP Logger.

Example:
    >>> from http_logger.core.env_config import load_from_env, ConfigFileLoader
    >>>
    >>> # HTTP_LOGGER_* variables and .env
    >>> options = load_from_env()
    >>>
    >>> # With overrides
    >>> options = load_from_env(level="debug", skip=["/health"])
    >>>
    >>> # YAML / JSON file
    >>> options = ConfigFileLoader.from_file("logging.yaml")
"""

from .loader import load_from_env, format_options_summary
from .validator import HTTPLoggerSettings, LoggerOptionsModel
from .file_loader import ConfigFileLoader, CONFIG_FILE_ENV_VAR

__all__ = [
    # Loaders
    "load_from_env",
    "format_options_summary",
    "ConfigFileLoader",
    "CONFIG_FILE_ENV_VAR",
    # Validators
    "HTTPLoggerSettings",
    "LoggerOptionsModel",
]
