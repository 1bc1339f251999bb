"""Container runtime configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DockerConfig(BaseSettings):
    """Container runtime CLI settings."""

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    docker_binary: str = Field(default="docker")
    container_prefix: str = Field(default="docker-mysql-", min_length=1)
    default_port: int = Field(default=3306, ge=1, le=65535)
