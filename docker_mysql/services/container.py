"""MySQL container lifecycle management."""

from typing import List, Optional

import structlog

from ..config import settings, DockerConfig, MySQLConfig
from ..models.errors import CommandError
from ..models.invocation import Invocation
from .naming import container_name, host_port, image_name, volume_name
from .process import ProcessRunner

logger = structlog.get_logger(__name__)

# Daemon response when starting a container that was never created
_MISSING_CONTAINER_SIGNATURE = "no such container"


def is_missing_container(error: CommandError) -> bool:
    """Whether a runtime failure means the container does not exist."""
    return _MISSING_CONTAINER_SIGNATURE in (error.stderr or "").lower()


class ContainerManager:
    """Starts, stops and removes versioned MySQL containers.

    Container and volume names are derived from the version, so every
    operation on the same version targets the same container.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        docker_config: Optional[DockerConfig] = None,
        mysql_config: Optional[MySQLConfig] = None,
    ):
        self._runner = runner or ProcessRunner()
        self._docker = docker_config or settings.docker
        self._mysql = mysql_config or settings.mysql

    def name(self, version: str) -> str:
        return container_name(version, self._docker.container_prefix)

    def port(self, version: str) -> str:
        return host_port(version, self._docker.default_port)

    def _docker_invocation(self, args: List[str], stream: bool = False) -> Invocation:
        return Invocation(executable=self._docker.docker_binary, args=args, stream=stream)

    def run_args(self, version: str) -> List[str]:
        """Arguments of ``docker run`` for a new container."""
        name = self.name(version)
        return [
            "run",
            "--name",
            name,
            "--env",
            f"MYSQL_ROOT_PASSWORD={self._mysql.mysql_root_password}",
            "--publish",
            f"{self.port(version)}:{self._mysql.mysql_container_port}",
            "--volume",
            f"{volume_name(version, self._docker.container_prefix)}:{self._mysql.mysql_data_dir}",
            "-d",
            image_name(version),
        ]

    async def up(self, version: str) -> bool:
        """Resume the version's container, creating it if it does not exist.

        Only a "no such container" failure falls through to ``docker run``;
        any other start failure (daemon down, permission denied) is raised.

        Args:
            version: MySQL image tag

        Returns:
            True if an existing container was started, False if a new one
            was created
        """
        name = self.name(version)
        try:
            await self._runner.run(self._docker_invocation(["start", name]))
            logger.info("Started existing container", container=name)
            return True
        except CommandError as e:
            if not is_missing_container(e):
                raise
            logger.debug("Container does not exist yet", container=name)

        logger.info(
            "Creating container",
            container=name,
            image=image_name(version),
            port=self.port(version),
        )
        await self._runner.run(self._docker_invocation(self.run_args(version), stream=True))
        return False

    async def stop(self, version: str) -> None:
        """Stop the version's container without removing it."""
        name = self.name(version)
        logger.info("Stopping container", container=name)
        await self._runner.run(self._docker_invocation(["stop", name]))

    async def down(self, version: str, remove_volume: bool = False) -> None:
        """Force-remove the version's container and optionally its volume.

        Removing the volume deletes every database stored in it.
        """
        name = self.name(version)
        logger.info("Removing container", container=name)
        await self._runner.run(self._docker_invocation(["rm", "-f", name]))
        if remove_volume:
            volume = volume_name(version, self._docker.container_prefix)
            logger.info("Removing volume", volume=volume)
            await self._runner.run(self._docker_invocation(["volume", "rm", "-f", volume]))
