"""MySQL engine and client configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MySQLConfig(BaseSettings):
    """Administrative credential and in-container paths."""

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    mysql_root_user: str = Field(default="root", min_length=1)
    mysql_root_password: str = Field(default="docker-mysql-root-password", min_length=1)
    mysql_client_binary: str = Field(default="mysql")
    mysql_data_dir: str = Field(default="/var/lib/mysql")
    mysql_container_port: int = Field(default=3306, ge=1, le=65535)
