"""Exponential-backoff retries for async operations that can fail transiently."""

from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.monitoring import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")
T = TypeVar("T")
RETRIABLE_EXCEPTIONS = (ConnectionError, TimeoutError)


def _announce_retry(attempts: int) -> Callable[[RetryCallState], None]:
    def before_sleep(state: RetryCallState) -> None:
        logger.warning(
            "Retrying after failure",
            operation=state.fn.__name__ if state.fn else "unknown",
            attempt=f"{state.attempt_number}/{attempts}",
            delay=round(state.next_action.sleep, 2) if state.next_action else 0,
            error=repr(state.outcome.exception()) if state.outcome else None,
        )

    return before_sleep


def with_retry(
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    exec_retry: type[Exception] | tuple[type[Exception], ...] = RETRIABLE_EXCEPTIONS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async callable with exponential backoff.

    Only `exec_retry` exceptions trigger another attempt; anything else, and
    the last failure once `max_retries` attempts are used up, propagates
    unchanged.

    Args:
        max_retries: Total number of attempts.
        base_delay: First delay in seconds; doubles on each retry.
        max_delay: Upper bound for a single delay in seconds.
        exec_retry: Exception type(s) worth retrying.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_announce_retry(max_retries),
        reraise=True,
    )
