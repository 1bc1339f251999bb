"""Readiness polling configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetryConfig(BaseSettings):
    """Interval and optional bounds for the readiness retry loop."""

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    retry_interval_seconds: float = Field(default=0.1, ge=0)
    retry_max_attempts: Optional[int] = Field(default=None, ge=1)
    retry_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @property
    def is_bounded(self) -> bool:
        """Whether either an attempt limit or a deadline is configured."""
        return self.retry_max_attempts is not None or self.retry_timeout_seconds is not None
