"""Configuration management for docker-mysql.

Settings are read from the environment (and an optional ``.env`` file) into
a single flat Settings class, with grouped views for each concern.

Usage:
    from docker_mysql.config import settings

    # Grouped access
    settings.docker.docker_binary
    settings.mysql.mysql_root_password

    # Flat access
    settings.docker_binary
    settings.retry_interval_seconds
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .docker import DockerConfig
from .logging import LoggingConfig, LOG_FORMATS, LOG_LEVELS
from .mysql import MySQLConfig
from .retry import RetryConfig


class Settings(BaseSettings):
    """Tool settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Container runtime
    docker_binary: str = Field(
        default="docker",
        description="Container runtime CLI used for every container operation",
    )
    container_prefix: str = Field(
        default="docker-mysql-",
        min_length=1,
        description="Tag prepended to every container and volume name",
    )
    default_port: int = Field(
        default=3306,
        ge=1,
        le=65535,
        description="Host port published for the 'latest' image",
    )

    # MySQL administrative credential
    mysql_root_user: str = Field(default="root", min_length=1)
    mysql_root_password: str = Field(
        default="docker-mysql-root-password",
        min_length=1,
        description="Root password injected into new containers",
    )
    mysql_client_binary: str = Field(
        default="mysql",
        description="Administrative client executed inside the container",
    )
    mysql_data_dir: str = Field(default="/var/lib/mysql")
    mysql_container_port: int = Field(default=3306, ge=1, le=65535)

    # Readiness polling
    retry_interval_seconds: float = Field(
        default=0.1,
        ge=0,
        description="Delay before each attempt of a readiness-gated command",
    )
    retry_max_attempts: Optional[int] = Field(
        default=None,
        ge=1,
        description="Give up after this many attempts (unbounded when unset)",
    )
    retry_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Give up after this many seconds (unbounded when unset)",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Only console and json renderers are supported."""
        fmt = v.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt

    # ========================================================================
    # GROUPED CONFIG ACCESS
    # ========================================================================

    @property
    def docker(self) -> DockerConfig:
        """Access container runtime configuration group."""
        return DockerConfig(
            docker_binary=self.docker_binary,
            container_prefix=self.container_prefix,
            default_port=self.default_port,
        )

    @property
    def mysql(self) -> MySQLConfig:
        """Access MySQL configuration group."""
        return MySQLConfig(
            mysql_root_user=self.mysql_root_user,
            mysql_root_password=self.mysql_root_password,
            mysql_client_binary=self.mysql_client_binary,
            mysql_data_dir=self.mysql_data_dir,
            mysql_container_port=self.mysql_container_port,
        )

    @property
    def retry(self) -> RetryConfig:
        """Access readiness polling configuration group."""
        return RetryConfig(
            retry_interval_seconds=self.retry_interval_seconds,
            retry_max_attempts=self.retry_max_attempts,
            retry_timeout_seconds=self.retry_timeout_seconds,
        )

    @property
    def logging(self) -> LoggingConfig:
        """Access logging configuration group."""
        return LoggingConfig(log_level=self.log_level, log_format=self.log_format)


# Global settings instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "DockerConfig",
    "LoggingConfig",
    "MySQLConfig",
    "RetryConfig",
]
