"""Exponential backoff for merges that race with base branch updates."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TypeVar

logger = getLogger(__name__)

T = TypeVar("T")

# Message GitHub returns when the base branch moved while the merge was being prepared
BASE_BRANCH_MODIFIED = "Base branch was modified"


def is_base_branch_modified(error: BaseException) -> bool:
    """Return True if the error is GitHub's base branch concurrency conflict."""
    return BASE_BRANCH_MODIFIED in str(error)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times, how long, and on which errors to retry an operation."""

    max_attempts: int = 3
    base_delay_ms: int = 1000
    multiplier: int = 4
    recoverable: Callable[[BaseException], bool] = field(default=is_base_branch_modified)

    def delay_ms(self, attempt: int) -> int:
        """Delay to wait after the given (1-based) failed attempt."""
        return self.base_delay_ms * self.multiplier ** (attempt - 1)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
) -> T:
    """Run an async operation, retrying recoverable failures with exponential backoff.

    Args:
        operation: Zero-argument coroutine function to invoke
        policy: Retry policy (defaults to 3 attempts, 1s base delay, x4 multiplier)
        sleep: Awaitable delay primitive taking seconds

    Returns:
        The result of the first successful invocation

    Raises:
        Exception: The original error when it is not recoverable or the attempt
            budget is exhausted
    """
    if policy is None:
        policy = RetryPolicy()

    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as e:
            logger.debug(f"Attempt {attempt}/{policy.max_attempts} failed: {e}")
            if not policy.recoverable(e) or attempt >= policy.max_attempts:
                raise

            delay = policy.delay_ms(attempt)
            logger.info(f"Retrying in {delay}...")
            await sleep(delay / 1000)
            attempt += 1
