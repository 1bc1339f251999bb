"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock

import pytest

# Set test environment before importing config
# Use setdefault to allow environment variables to override defaults
os.environ.setdefault("RETRY_INTERVAL_SECONDS", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from docker_mysql.config import DockerConfig, MySQLConfig, RetryConfig
from docker_mysql.models import CommandError, CommandResult
from docker_mysql.services import ContainerManager, MySQLClient, ProcessRunner
from docker_mysql.utils.logging import setup_logging

setup_logging()


@pytest.fixture
def docker_config():
    """Container runtime config with the stock defaults."""
    return DockerConfig(docker_binary="docker", container_prefix="docker-mysql-", default_port=3306)


@pytest.fixture
def mysql_config():
    """MySQL config with the stock administrative credential."""
    return MySQLConfig(
        mysql_root_user="root",
        mysql_root_password="docker-mysql-root-password",
        mysql_client_binary="mysql",
        mysql_data_dir="/var/lib/mysql",
        mysql_container_port=3306,
    )


@pytest.fixture
def retry_config():
    """Unbounded retry config without delays."""
    return RetryConfig(
        retry_interval_seconds=0, retry_max_attempts=None, retry_timeout_seconds=None
    )


@pytest.fixture
def mock_runner():
    """ProcessRunner whose run() succeeds with empty output."""
    runner = AsyncMock(spec=ProcessRunner)
    runner.run = AsyncMock(return_value=CommandResult(returncode=0))
    return runner


@pytest.fixture
def container_manager(mock_runner, docker_config, mysql_config):
    """ContainerManager wired to the mocked runner."""
    return ContainerManager(
        runner=mock_runner, docker_config=docker_config, mysql_config=mysql_config
    )


@pytest.fixture
def mysql_client(mock_runner, docker_config, mysql_config, retry_config):
    """MySQLClient wired to the mocked runner."""
    return MySQLClient(
        runner=mock_runner,
        docker_config=docker_config,
        mysql_config=mysql_config,
        retry_config=retry_config,
    )


def make_command_error(stderr: str, returncode: int = 1) -> CommandError:
    """CommandError as raised by ProcessRunner for a failed docker call."""
    return CommandError(argv=["docker"], returncode=returncode, stderr=stderr)


@pytest.fixture
def command_error():
    """Factory for CommandError instances."""
    return make_command_error
