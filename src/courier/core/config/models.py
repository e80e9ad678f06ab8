"""
Configuration models for Courier.

This module defines Pydantic-based configuration models that provide
validation, type safety, and documentation for all Courier configuration.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from courier.constants import (
    DEFAULT_APP_NAME,
    DEFAULT_ERROR_LOG_RETENTION_DAYS,
    DEFAULT_HTTP_POOL_MAXSIZE,
    DEFAULT_HTTP_RETRIES,
    DEFAULT_HTTP_RETRY_DELAY_MS,
    DEFAULT_HTTP_TIMEOUT_MS,
    DEFAULT_LOG_DIRECTORY,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_LOG_RETENTION_DAYS,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels, most severe first."""

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    HTTP = "http"
    DEBUG = "debug"
    VERBOSE = "verbose"


class LogFormat(str, Enum):
    """Console output formats."""

    PRETTY = "pretty"
    JSON = "json"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.DEBUG, description="Minimum level emitted")
    format: LogFormat = Field(LogFormat.PRETTY, description="Console format: pretty, json")
    to_file: bool = Field(False, description="Also write rotating JSON log files")
    directory: Path = Field(Path(DEFAULT_LOG_DIRECTORY), description="Log file directory")
    app_name: str = Field(
        DEFAULT_APP_NAME, min_length=1, description="Application name stamped on records"
    )
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Size in bytes at which a log file is rolled over",
    )
    retention_days: int = Field(
        DEFAULT_LOG_RETENTION_DAYS, ge=1, le=365, description="Days of log files to keep"
    )
    error_retention_days: int = Field(
        DEFAULT_ERROR_LOG_RETENTION_DAYS,
        ge=1,
        le=365,
        description="Days of error log files to keep",
    )

    @field_validator("level", "format", mode="before")
    @classmethod
    def normalize_case(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("directory")
    @classmethod
    def expand_directory(cls, v: Path) -> Path:
        return v.expanduser()


class HttpClientConfig(BaseModel):
    """Default settings for the HTTP client, overridable per call."""

    timeout: int = Field(
        DEFAULT_HTTP_TIMEOUT_MS, ge=1, description="Per-attempt timeout in milliseconds"
    )
    retries: int = Field(
        DEFAULT_HTTP_RETRIES, ge=0, le=10, description="Retries after the first attempt"
    )
    retry_delay: int = Field(
        DEFAULT_HTTP_RETRY_DELAY_MS,
        ge=0,
        description="Linear backoff base delay in milliseconds",
    )
    pool_maxsize: int = Field(
        DEFAULT_HTTP_POOL_MAXSIZE, ge=1, description="Connections kept per host"
    )


class CourierConfig(BaseModel):
    """Main Courier configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    http: HttpClientConfig = Field(default_factory=HttpClientConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class CourierSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    # Logging settings
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_format: Optional[str] = Field(None, alias="LOG_FORMAT")
    log_to_file: Optional[bool] = Field(None, alias="LOG_TO_FILE")
    log_directory: Optional[str] = Field(None, alias="LOG_DIRECTORY")
    app_name: Optional[str] = Field(None, alias="APP_NAME")

    # HTTP client settings
    http_timeout: Optional[int] = Field(None, alias="HTTP_TIMEOUT")
    http_retries: Optional[int] = Field(None, alias="HTTP_RETRIES")
    http_retry_delay: Optional[int] = Field(None, alias="HTTP_RETRY_DELAY")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
