"""SQL execution inside a running MySQL container.

Statements are passed verbatim to the ``mysql`` client via ``docker exec``;
names and passwords supplied by the caller are interpolated as-is.
"""

from typing import List, Optional

import structlog

from ..config import settings, DockerConfig, MySQLConfig, RetryConfig
from ..models.invocation import CommandResult, Invocation
from ..utils.retry import retry_until_ready
from .naming import container_name
from .process import ProcessRunner

logger = structlog.get_logger(__name__)

DATABASE_EXISTS = "database exists"
# ER_CANNOT_USER: CREATE USER for an account that already exists
USER_EXISTS = "ERROR 1396"


class MySQLClient:
    """Runs statements through the MySQL client of a versioned container."""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        docker_config: Optional[DockerConfig] = None,
        mysql_config: Optional[MySQLConfig] = None,
        retry_config: Optional[RetryConfig] = None,
    ):
        self._runner = runner or ProcessRunner()
        self._docker = docker_config or settings.docker
        self._mysql = mysql_config or settings.mysql
        self._retry = retry_config or settings.retry

    def client_args(
        self,
        version: str,
        sql: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
    ) -> List[str]:
        """Arguments of ``docker exec`` running one statement.

        Without a user and password the administrative credential is used.
        When only one of them is given the other flag is left out.
        """
        if user is None and password is None:
            user = self._mysql.mysql_root_user
            password = self._mysql.mysql_root_password

        args = [
            "exec",
            container_name(version, self._docker.container_prefix),
            self._mysql.mysql_client_binary,
        ]
        if user is not None:
            args.append(f"--user={user}")
        if password is not None:
            args.append(f"--password={password}")
        if database:
            args.append(f"--database={database}")
        args.extend(["-e", sql])
        return args

    async def execute(
        self,
        version: str,
        sql: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        database: Optional[str] = None,
        stream: bool = False,
    ) -> CommandResult:
        """Run one statement.

        Args:
            version: MySQL image tag identifying the container
            sql: Statement(s) passed to ``mysql -e``
            user: Client user (administrative user when omitted)
            password: Client password (administrative password when omitted)
            database: Default database for the statement
            stream: Connect the client's output to ours instead of capturing

        Raises:
            CommandError: If the client exits with a non-zero status
        """
        invocation = Invocation(
            executable=self._docker.docker_binary,
            args=self.client_args(version, sql, user, password, database),
            stream=stream,
        )
        return await self._runner.run(invocation)

    async def execute_when_ready(
        self, version: str, sql: str, success_error: Optional[str] = None
    ) -> int:
        """Run an administrative statement, polling until the engine accepts it.

        Returns:
            Number of attempts made
        """

        async def attempt():
            await self.execute(version, sql)

        if self._retry.is_bounded:
            logger.debug(
                "Bounded readiness polling",
                max_attempts=self._retry.retry_max_attempts,
                timeout=self._retry.retry_timeout_seconds,
            )
        return await retry_until_ready(
            attempt,
            success_error,
            interval=self._retry.retry_interval_seconds,
            max_attempts=self._retry.retry_max_attempts,
            timeout=self._retry.retry_timeout_seconds,
        )

    async def create_database(self, version: str, name: str) -> None:
        logger.info("Creating database", database=name)
        await self.execute_when_ready(version, f"create database {name}", DATABASE_EXISTS)

    async def create_user(self, version: str, name: str, password: str) -> None:
        logger.info("Creating user", user=name)
        await self.execute_when_ready(
            version, f"create user {name} identified by '{password}'", USER_EXISTS
        )

    async def grant_database(self, version: str, user: str, database: str) -> None:
        """Grant a user every privilege on a database.

        No failure is treated as "already done": re-granting succeeds.
        """
        logger.info("Granting database to user", user=user, database=database)
        await self.execute_when_ready(version, f"grant all on {database}.* to {user}")

    async def drop_database(
        self,
        version: str,
        name: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
    ) -> bool:
        """Drop a database, ignoring any failure.

        Returns:
            True if the drop succeeded, False if it failed
        """
        logger.info("Dropping database", database=name)
        try:
            await self.execute(version, f"drop database {name}", user=user, password=password)
        except Exception as e:
            logger.warning("Drop database failed, ignoring", database=name, error=str(e))
            return False
        return True
