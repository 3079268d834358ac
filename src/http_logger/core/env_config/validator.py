"""
Pydantic validators for logger configuration.

LoggerOptionsModel validates option dicts coming from config files;
HTTPLoggerSettings reads the same options from HTTP_LOGGER_* environment
variables and .env files. Both convert to LoggerOptions.
"""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from ..logging.config import (
    DEFAULT_FILE_PATH,
    DEFAULT_FORMAT,
    DEFAULT_IP_HEADERS,
    LoggerOptions,
    LogLevel,
)


def _split_list(value: Any) -> Any:
    """Accept "a, b" as well as ["a", "b"]."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


def _parse_level(value: Any) -> LogLevel:
    return LogLevel.parse(value)


class LoggerOptionsModel(BaseModel):
    """
    Validated logger options.

    Accepts snake_case or camelCase keys (``file_path`` / ``filePath``).
    Unknown keys are ignored, wrong types are rejected. An unknown level
    name is not an error: it falls back to info like everywhere else.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    console: bool = Field(default=True, description="Write to stdout")
    file: bool = Field(default=False, description="Append to file_path")
    file_path: str = Field(default=DEFAULT_FILE_PATH, min_length=1)
    level: LogLevel = Field(default=LogLevel.INFO)
    format: str = Field(default=DEFAULT_FORMAT, min_length=1)
    skip: List[str] = Field(default_factory=list, description="Paths not logged on success")
    include_ip: bool = Field(default=False)
    ip_headers: List[str] = Field(default_factory=lambda: list(DEFAULT_IP_HEADERS))
    use_global: bool = Field(default=False)
    color: Optional[bool] = Field(default=None, description="None = only on a terminal")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        return _parse_level(v)

    @field_validator("skip", "ip_headers", mode="before")
    @classmethod
    def validate_list(cls, v: Any) -> Any:
        return _split_list(v)

    def to_options(self) -> LoggerOptions:
        """Convert to LoggerOptions."""
        return LoggerOptions.create(**self.model_dump())


class HTTPLoggerSettings(BaseSettings):
    """
    Logger configuration from environment variables.

    Reads from:
    1. Environment variables (HTTP_LOGGER_*)
    2. .env file
    3. Defaults

    Example .env file:
        HTTP_LOGGER_LEVEL=debug
        HTTP_LOGGER_FILE=true
        HTTP_LOGGER_FILE_PATH=/var/log/app.log
        HTTP_LOGGER_SKIP=/health,/metrics
        HTTP_LOGGER_INCLUDE_IP=true

    Usage:
        >>> settings = HTTPLoggerSettings()
        >>> settings.to_options().level
        <LogLevel.DEBUG: 'debug'>
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTP_LOGGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    console: bool = Field(default=True)
    file: bool = Field(default=False)
    file_path: str = Field(default=DEFAULT_FILE_PATH, min_length=1)
    level: LogLevel = Field(default=LogLevel.INFO)
    format: str = Field(default=DEFAULT_FORMAT, min_length=1)
    skip: Annotated[List[str], NoDecode] = Field(default_factory=list)
    include_ip: bool = Field(default=False)
    ip_headers: Annotated[List[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_IP_HEADERS))
    use_global: bool = Field(default=False)
    color: Optional[bool] = None

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        return _parse_level(v)

    @field_validator("skip", "ip_headers", mode="before")
    @classmethod
    def validate_list(cls, v: Any) -> Any:
        return _split_list(v)

    def to_options(self) -> LoggerOptions:
        """Convert to LoggerOptions."""
        return LoggerOptions.create(**self.model_dump())
