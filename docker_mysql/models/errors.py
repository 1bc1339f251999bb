"""Error types and exception classes for docker-mysql."""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorType(str, Enum):
    """Error type enumeration."""

    COMMAND_FAILED = "command_failed"
    EXECUTABLE_NOT_FOUND = "executable_not_found"
    RETRY_EXHAUSTED = "retry_exhausted"


class DockerMySQLError(Exception):
    """Base exception for docker-mysql."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.COMMAND_FAILED,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(message)


class CommandError(DockerMySQLError):
    """An external command exited with a non-zero status.

    The captured stderr is the only error signal the external tools give us,
    so callers match on it (see ``retry_until_ready``).
    """

    def __init__(
        self,
        argv: List[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
        message: Optional[str] = None,
        error_type: ErrorType = ErrorType.COMMAND_FAILED,
    ):
        self.argv = list(argv)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        error_message = message or (
            f"{self.argv[0] if self.argv else 'command'} exited with status {returncode}"
            + (f": {stderr.strip()}" if stderr.strip() else "")
        )
        super().__init__(
            message=error_message,
            error_type=error_type,
            details={"returncode": returncode},
        )


class ExecutableNotFoundError(CommandError):
    """The executable of an invocation is not installed or not on PATH."""

    def __init__(self, argv: List[str]):
        executable = argv[0] if argv else ""
        super().__init__(
            argv=argv,
            returncode=127,
            stderr=f"{executable}: command not found",
            message=f"Executable not found: {executable}. Ensure it is installed and in PATH.",
            error_type=ErrorType.EXECUTABLE_NOT_FOUND,
        )


class RetryExhaustedError(DockerMySQLError):
    """A bounded retry loop ran out of attempts or time."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        self.attempts = attempts
        self.last_error = last_error
        message = f"Gave up after {attempts} attempt{'s' if attempts != 1 else ''}"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(
            message=message,
            error_type=ErrorType.RETRY_EXHAUSTED,
            details={"attempts": attempts},
        )
