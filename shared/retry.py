"""
Retry mechanism for resilient operations.
"""

import asyncio
import random
from typing import Any, Optional, Callable, Awaitable

from shared.logging import get_logger


class RetryConfig:
    """Configuration for retry behavior."""

    def __init__(self,
                 max_attempts: int = 3,
                 base_delay: float = 1.0,
                 max_delay: float = 60.0,
                 exponential_base: float = 2.0,
                 jitter: bool = True):
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter = jitter


class RetryError(Exception):
    """Exception raised when all retry attempts are exhausted."""
    def __init__(self, message: str, last_exception: Exception, attempts: int):
        super().__init__(message)
        self.last_exception = last_exception
        self.attempts = attempts


async def run_with_retry(func: Callable[[], Awaitable[Any]],
                         *,
                         name: str,
                         exceptions: tuple = (Exception,),
                         config: Optional[RetryConfig] = None,
                         should_retry: Optional[Callable[[Exception], bool]] = None,
                         on_retry: Optional[Callable[[int, float, Exception], None]] = None) -> Any:
    """Await ``func`` until it succeeds or the attempt budget runs out.

    ``should_retry`` is consulted for every caught exception; returning False
    ends the loop immediately. ``on_retry`` is invoked with the failed attempt
    number, the delay about to be slept and the exception, before sleeping.

    Raises:
        RetryError: when attempts are exhausted or a failure is not retryable.
    """
    if config is None:
        config = RetryConfig()

    logger = get_logger(f"retry.{name}")

    for attempt in range(1, config.max_attempts + 1):
        try:
            logger.debug(
                "Retry attempt",
                attempt=attempt,
                max_attempts=config.max_attempts,
                function=name
            )

            result = await func()

            if attempt > 1:
                logger.info(
                    "Retry succeeded",
                    attempt=attempt,
                    function=name
                )

            return result

        except exceptions as e:
            if should_retry is not None and not should_retry(e):
                logger.error(
                    "Failure is not retryable",
                    attempt=attempt,
                    function=name,
                    error=str(e)
                )
                raise RetryError(
                    f"{name} failed with a non-retryable error on attempt {attempt}",
                    last_exception=e,
                    attempts=attempt
                ) from e

            if attempt == config.max_attempts:
                logger.error(
                    "All retry attempts exhausted",
                    attempt=attempt,
                    max_attempts=config.max_attempts,
                    function=name,
                    error=str(e)
                )
                raise RetryError(
                    f"{name} failed after {config.max_attempts} attempts",
                    last_exception=e,
                    attempts=config.max_attempts
                ) from e

            delay = calculate_delay(attempt, config)

            logger.warning(
                "Retry attempt failed, waiting before next attempt",
                attempt=attempt,
                max_attempts=config.max_attempts,
                delay=delay,
                function=name,
                error=str(e)
            )

            if on_retry is not None:
                on_retry(attempt, delay, e)

            await asyncio.sleep(delay)


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Calculate delay after a failed attempt (1-based)."""
    delay = config.base_delay * (config.exponential_base ** (attempt - 1))

    # Apply max delay cap
    delay = min(delay, config.max_delay)

    if config.jitter:
        jitter_amount = delay * 0.1  # 10% jitter
        delay += random.uniform(-jitter_amount, jitter_amount)

    return max(0.0, delay)
