"""External command execution.

Uses asyncio subprocess to run the container runtime CLI and, through it,
the MySQL client inside the container.
"""

import asyncio
import os
from typing import Dict, Optional

import structlog

from ..models.errors import CommandError, ExecutableNotFoundError
from ..models.invocation import CommandResult, Invocation

logger = structlog.get_logger(__name__)


class ProcessRunner:
    """Runs one Invocation at a time and waits for it to exit.

    In capture mode stdout/stderr are collected and returned; in inherit
    mode (``Invocation.stream``) the child shares our streams. Either way a
    non-zero exit raises CommandError. No timeout is applied.
    """

    def __init__(self, base_env: Optional[Dict[str, str]] = None):
        """Initialize the runner.

        Args:
            base_env: Environment every child starts from; the current
                process environment when omitted
        """
        self._base_env = base_env

    def build_env(self, overrides: Dict[str, str]) -> Dict[str, str]:
        """Merge invocation overrides over the base environment."""
        env = dict(os.environ if self._base_env is None else self._base_env)
        env.update(overrides)
        return env

    async def run(self, invocation: Invocation) -> CommandResult:
        """Run a command to completion.

        Args:
            invocation: Command to run

        Returns:
            CommandResult with decoded output (empty in inherit mode)

        Raises:
            ExecutableNotFoundError: If the executable cannot be found
            CommandError: If the command exits with a non-zero status
        """
        pipe = None if invocation.stream else asyncio.subprocess.PIPE
        logger.debug(
            "Running command",
            argv=invocation.masked_argv(),
            stream=invocation.stream,
        )

        try:
            proc = await asyncio.create_subprocess_exec(
                *invocation.argv,
                stdout=pipe,
                stderr=pipe,
                env=self.build_env(invocation.env),
            )
        except FileNotFoundError as e:
            raise ExecutableNotFoundError(invocation.argv) from e

        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CommandResult(
            returncode=proc.returncode,
            stdout=self._decode(stdout_bytes),
            stderr=self._decode(stderr_bytes),
        )

        if not result.ok:
            logger.debug(
                "Command failed",
                executable=invocation.executable,
                returncode=result.returncode,
                stderr=result.stderr.strip()[:200],
            )
            raise CommandError(
                argv=invocation.masked_argv(),
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        return result

    @staticmethod
    def _decode(output: Optional[bytes]) -> str:
        if not output:
            return ""
        return output.decode("utf-8", errors="replace")
