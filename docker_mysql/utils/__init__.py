"""Utility modules for docker-mysql."""

from .logging import setup_logging
from .retry import retry_until_ready, error_text

__all__ = [
    "setup_logging",
    "retry_until_ready",
    "error_text",
]
