"""Retry policy for key-value store operations.

Transient connection failures are retried with exponential backoff; once
retries are exhausted (or on any other error) the failure surfaces as a
StoreError for the service layer to turn into a failed result.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import structlog
from tenacity import (
    RetryError,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.config import settings

logger = structlog.get_logger()

P = ParamSpec("P")
T = TypeVar("T")

# Exceptions that are retriable (transient failures)
RETRIABLE_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
)


class StoreError(Exception):
    """Raised when the key-value store cannot complete an operation."""


def with_store_retry(
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Decorator retrying a store coroutine on transient failures.

    Attempts and backoff come from settings (``store_retry_attempts``,
    ``store_retry_wait_seconds``) and are read on every call.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        attempts = settings.store_retry_attempts

        @retry(
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(
                multiplier=settings.store_retry_wait_seconds,
                max=settings.store_retry_wait_seconds * 8,
            ),
            retry=retry_if_exception_type(RETRIABLE_EXCEPTIONS),
            before_sleep=before_sleep_log(logger, log_level=20),  # INFO level
            reraise=False,
        )
        async def inner() -> T:
            return await func(*args, **kwargs)

        try:
            return await inner()
        except RetryError as e:
            last_err = e.last_attempt.exception() if e.last_attempt else None
            logger.error(
                "store retry exhausted",
                function=func.__name__,
                attempts=attempts,
                last_error=str(last_err) if last_err else None,
            )
            msg = f"Store unavailable after {attempts} attempts: {last_err or 'unknown error'}"
            raise StoreError(msg) from last_err
        except StoreError:
            raise
        except Exception as e:
            logger.error(
                "store operation failed",
                function=func.__name__,
                error=str(e),
            )
            raise StoreError(str(e)) from e

    return wrapper
