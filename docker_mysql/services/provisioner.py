"""Provisioning sequence: container, database, user and grant."""

from typing import Optional

import structlog

from .container import ContainerManager
from .mysql import MySQLClient
from .process import ProcessRunner

logger = structlog.get_logger(__name__)


class Provisioner:
    """Brings a versioned MySQL container to a usable state.

    Steps run strictly one after the other. Re-running against an already
    provisioned container is a no-op: existing databases and users are
    accepted as success. A crash mid-sequence leaves whatever was created.
    """

    def __init__(
        self,
        containers: Optional[ContainerManager] = None,
        mysql: Optional[MySQLClient] = None,
    ):
        runner = ProcessRunner()
        self._containers = containers or ContainerManager(runner=runner)
        self._mysql = mysql or MySQLClient(runner=runner)

    async def prepare(
        self,
        version: str,
        database: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
    ) -> str:
        """Start the container and create a database, user and grant.

        The user is only created (and granted the database) when both a user
        name and a password are given. An empty password is still a password.

        Args:
            version: MySQL image tag
            database: Database to create
            user: Optional user to create
            password: Password for the user

        Returns:
            Host port MySQL is published on
        """
        await self._containers.up(version)
        await self._mysql.create_database(version, database)

        if user is not None and password is not None:
            await self._mysql.create_user(version, user, password)
            await self._mysql.grant_database(version, user, database)
        elif user is not None or password is not None:
            logger.warning(
                "Skipping user creation: both a user name and a password are required",
                user=user,
            )

        port = self._containers.port(version)
        logger.info("MySQL is ready", container=self._containers.name(version), port=port)
        return port
