"""Unit tests for the prepare sequence."""

import pytest
from unittest.mock import AsyncMock, MagicMock, call

from docker_mysql.models.errors import CommandError
from docker_mysql.services.container import ContainerManager
from docker_mysql.services.mysql import MySQLClient
from docker_mysql.services.provisioner import Provisioner


@pytest.fixture
def mock_containers():
    """Mock ContainerManager with real name/port derivation."""
    containers = MagicMock(spec=ContainerManager)
    containers.up = AsyncMock(return_value=True)
    containers.port.return_value = "3080"
    containers.name.return_value = "docker-mysql-8-0"
    return containers


@pytest.fixture
def mock_mysql():
    """Mock MySQLClient."""
    mysql = MagicMock(spec=MySQLClient)
    mysql.create_database = AsyncMock()
    mysql.create_user = AsyncMock()
    mysql.grant_database = AsyncMock()
    return mysql


@pytest.fixture
def provisioner(mock_containers, mock_mysql):
    return Provisioner(containers=mock_containers, mysql=mock_mysql)


class TestPrepare:
    """Test Provisioner.prepare."""

    @pytest.mark.asyncio
    async def test_database_only(self, provisioner, mock_containers, mock_mysql):
        """Without credentials no user is created and nothing is granted."""
        port = await provisioner.prepare("8.0", "app")

        assert port == "3080"
        mock_containers.up.assert_awaited_once_with("8.0")
        mock_mysql.create_database.assert_awaited_once_with("8.0", "app")
        mock_mysql.create_user.assert_not_awaited()
        mock_mysql.grant_database.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_with_user(self, provisioner, mock_mysql):
        await provisioner.prepare("8.0", "app", user="alice", password="pw")

        mock_mysql.create_user.assert_awaited_once_with("8.0", "alice", "pw")
        mock_mysql.grant_database.assert_awaited_once_with("8.0", "alice", "app")

    @pytest.mark.asyncio
    async def test_user_without_password_is_skipped(self, provisioner, mock_mysql):
        await provisioner.prepare("8.0", "app", user="alice")

        mock_mysql.create_user.assert_not_awaited()
        mock_mysql.grant_database.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_password_still_creates_user(self, provisioner, mock_mysql):
        await provisioner.prepare("8.0", "app", user="alice", password="")

        mock_mysql.create_user.assert_awaited_once_with("8.0", "alice", "")
        mock_mysql.grant_database.assert_awaited_once_with("8.0", "alice", "app")

    @pytest.mark.asyncio
    async def test_steps_run_in_order(self, mock_containers, mock_mysql):
        manager = MagicMock()
        manager.attach_mock(mock_containers.up, "up")
        manager.attach_mock(mock_mysql.create_database, "create_database")
        manager.attach_mock(mock_mysql.create_user, "create_user")
        manager.attach_mock(mock_mysql.grant_database, "grant_database")

        await Provisioner(containers=mock_containers, mysql=mock_mysql).prepare(
            "8.0", "app", user="alice", password="pw"
        )

        assert manager.mock_calls == [
            call.up("8.0"),
            call.create_database("8.0", "app"),
            call.create_user("8.0", "alice", "pw"),
            call.grant_database("8.0", "alice", "app"),
        ]

    @pytest.mark.asyncio
    async def test_up_failure_stops_sequence(self, provisioner, mock_containers, mock_mysql):
        mock_containers.up = AsyncMock(
            side_effect=CommandError(argv=["docker", "run"], returncode=125, stderr="boom")
        )

        with pytest.raises(CommandError):
            await provisioner.prepare("8.0", "app")
        mock_mysql.create_database.assert_not_awaited()


class TestPrepareEndToEnd:
    """Drive prepare through real services with a mocked runner."""

    @pytest.mark.asyncio
    async def test_fresh_container(self, container_manager, mysql_client, mock_runner, command_error):
        mock_runner.run = AsyncMock(
            side_effect=[
                command_error("Error response from daemon: No such container: docker-mysql-8-0"),
                None,  # docker run
                command_error("ERROR 2002 (HY000): Can't connect to local MySQL server"),
                None,  # create database
            ]
        )

        port = await Provisioner(containers=container_manager, mysql=mysql_client).prepare(
            "8.0", "app"
        )

        assert port == "3080"
        argvs = [c.args[0].argv for c in mock_runner.run.await_args_list]
        assert argvs[0] == ["docker", "start", "docker-mysql-8-0"]
        assert argvs[1][:2] == ["docker", "run"]
        assert argvs[3][-2:] == ["-e", "create database app"]
        assert len(argvs) == 4
