"""Readiness-gated retry loop.

A freshly started MySQL container refuses connections until the engine has
finished initializing. Rather than sleeping for a fixed startup delay, the
command we actually want to run is polled until it stops failing. A known
"already done" error (database exists, user exists) counts as success so
that provisioning an already-provisioned container is a no-op.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import structlog

from ..models.errors import RetryExhaustedError

logger = structlog.get_logger(__name__)

DEFAULT_INTERVAL = 0.1


def error_text(error: BaseException) -> str:
    """Text to match acceptable failures against.

    Command failures carry the tool's stderr; anything else falls back to
    the exception message.
    """
    stderr = getattr(error, "stderr", None)
    if stderr:
        return str(stderr)
    return str(error)


async def retry_until_ready(
    action: Callable[[], Awaitable[object]],
    success_error: Optional[str] = None,
    *,
    interval: float = DEFAULT_INTERVAL,
    max_attempts: Optional[int] = None,
    timeout: Optional[float] = None,
    is_terminal: Optional[Callable[[Exception], bool]] = None,
) -> int:
    """Run ``action`` until it succeeds or fails in an acceptable way.

    Each attempt is preceded by ``interval`` seconds of sleep. A failure whose
    text contains ``success_error``, or for which ``is_terminal`` returns
    True, ends the loop as a success. Every other failure is retried with no
    backoff.

    With neither ``max_attempts`` nor ``timeout`` the loop never gives up;
    cancel the surrounding task to stop it.

    Args:
        action: Zero-argument coroutine function to attempt
        success_error: Substring marking a failure as "already done"
        interval: Seconds to sleep before each attempt
        max_attempts: Optional attempt limit
        timeout: Optional deadline in seconds from the first attempt
        is_terminal: Optional predicate marking a failure as "already done"

    Returns:
        Number of attempts made

    Raises:
        RetryExhaustedError: When a configured limit is reached
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout if timeout is not None else None
    attempts = 0

    while True:
        await asyncio.sleep(interval)
        attempts += 1
        try:
            await action()
            return attempts
        except Exception as e:
            if success_error and success_error in error_text(e):
                logger.debug(
                    "Accepted failure as success",
                    attempt=attempts,
                    success_error=success_error,
                )
                return attempts
            if is_terminal is not None and is_terminal(e):
                logger.debug("Terminal failure accepted as success", attempt=attempts)
                return attempts
            last_error = e
            logger.debug(
                "Not ready, retrying",
                attempt=attempts,
                error=error_text(e).strip()[:200],
            )

        if max_attempts is not None and attempts >= max_attempts:
            raise RetryExhaustedError(attempts, last_error)
        if deadline is not None and loop.time() >= deadline:
            raise RetryExhaustedError(attempts, last_error)
