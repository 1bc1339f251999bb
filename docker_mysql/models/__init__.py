"""Data models for docker-mysql."""

from .errors import (
    ErrorType,
    DockerMySQLError,
    CommandError,
    ExecutableNotFoundError,
    RetryExhaustedError,
)
from .invocation import Invocation, CommandResult

__all__ = [
    "ErrorType",
    "DockerMySQLError",
    "CommandError",
    "ExecutableNotFoundError",
    "RetryExhaustedError",
    "Invocation",
    "CommandResult",
]
