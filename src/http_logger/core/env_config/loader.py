"""
Configuration loader from environment variables and .env files.

Main entry point for loading LoggerOptions from the environment.
"""

from typing import Optional

from pydantic import ValidationError

from ..exceptions import ConfigValidationError
from ..logging.config import LoggerOptions
from .validator import HTTPLoggerSettings


def load_from_env(env_file: Optional[str] = None, **overrides) -> LoggerOptions:
    """
    Load LoggerOptions from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (HTTP_LOGGER_*)
    3. .env file (``env_file`` or ./.env)
    4. Defaults

    Args:
        env_file: Custom .env file path
        **overrides: Explicit option overrides

    Returns:
        LoggerOptions instance

    Raises:
        ConfigValidationError: If an environment value has the wrong type

    Example:
        >>> # HTTP_LOGGER_LEVEL=debug HTTP_LOGGER_SKIP=/health
        >>> options = load_from_env()
        >>> options = load_from_env(env_file=".env.production", console=False)
    """
    try:
        if env_file is None:
            settings = HTTPLoggerSettings()
        else:
            settings = HTTPLoggerSettings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid HTTP_LOGGER_* environment: {e}") from e

    values = settings.model_dump()
    values.update(overrides)
    return LoggerOptions.from_mapping(values)


def format_options_summary(options: LoggerOptions) -> str:
    """
    Render a short multi-line summary of options.

    Useful for startup logs and debugging.

    Example:
        >>> print(format_options_summary(load_from_env()))
        LoggerOptions:
          level: info
          console: True
          ...
    """
    lines = [
        "LoggerOptions:",
        f"  level: {options.level.value}",
        f"  console: {options.console}",
        f"  file: {options.file}",
    ]
    if options.file:
        lines.append(f"    path: {options.file_path}")
    lines.append(f"  format: {options.format}")
    if options.skip:
        lines.append(f"  skip: {', '.join(options.skip)}")
    lines.append(f"  include_ip: {options.include_ip} ({', '.join(options.ip_headers)})")
    lines.append(f"  use_global: {options.use_global}")
    return "\n".join(lines)
