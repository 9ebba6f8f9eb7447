"""
Bounded retry with linear backoff for remote calls.

Every node lookup goes through `call_with_retry`: the first failure waits
one backoff unit, the second two, the third three. Once the retry budget
is spent the last error is wrapped in a GatewayError.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Callable, TypeVar

from starknet_checker.core.errors import GatewayError

logger = logging.getLogger("starknet_checker.retry")

T = TypeVar("T")

# Retries per remote call (4 attempts in total)
MAX_RETRIES = 3

# Seconds per backoff step
BACKOFF_UNIT = 1.0


def call_with_retry(
    operation: Callable[[], T],
    max_retries: int = MAX_RETRIES,
    *,
    backoff_unit: float = BACKOFF_UNIT,
    sleep: Callable[[float], None] = time.sleep,
    description: str | None = None,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
) -> T:
    """
    Run `operation` until it succeeds or the retry budget is exhausted.

    Args:
        operation:    zero-argument callable doing the remote call
        max_retries:  retries allowed after the first attempt
        backoff_unit: seconds per backoff step; attempt n waits (n + 1) units
        sleep:        sleep function (tests pass a recorder)
        description:  label used in log lines
        retry_on:     exception types that trigger a retry; anything else
                      propagates unchanged on the first failure

    Returns:
        whatever `operation` returns

    Raises:
        GatewayError: after max_retries + 1 failed attempts
    """
    label = description or getattr(operation, "__name__", "remote call")
    attempt = 0
    while True:
        try:
            return operation()
        except retry_on as e:
            if attempt >= max_retries:
                raise GatewayError(
                    f"Max retries reached: {e}",
                    last_error=e,
                    attempts=attempt + 1,
                ) from e
            delay = (attempt + 1) * backoff_unit
            logger.warning(
                f"{label} failed (attempt {attempt + 1}/{max_retries + 1}): {e}; "
                f"retrying in {delay:g}s"
            )
            sleep(delay)
            attempt += 1


def with_retry(
    max_retries: int = MAX_RETRIES,
    *,
    backoff_unit: float = BACKOFF_UNIT,
    sleep: Callable[[float], None] = time.sleep,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator form of `call_with_retry`.

    Usage:
        @with_retry(max_retries=2)
        def fetch(node, address): ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            return call_with_retry(
                lambda: func(*args, **kwargs),
                max_retries,
                backoff_unit=backoff_unit,
                sleep=sleep,
                description=func.__name__,
                retry_on=retry_on,
            )

        return wrapper

    return decorator
