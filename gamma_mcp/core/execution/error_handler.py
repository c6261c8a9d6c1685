"""Error handler for the Gamma client.

Resilient invoker: retries a single network operation on transient failures.
"""

import asyncio
import random
from typing import Awaitable, Callable, Optional, TypeVar

from gamma_mcp.core.execution.backoff import calculate_backoff_delay
from gamma_mcp.core.execution.error_classifier import ErrorClassifier
from gamma_mcp.core.logging import logger
from gamma_mcp.core.retry_config import ErrorCategory, RetryConfig

T = TypeVar("T")


class ErrorHandler:
    """Retries an operation with exponential backoff on transient failures.

    Uses composition: the classifier decides whether to retry, the backoff
    calculator decides how long to wait. Each call to execute_with_retry
    starts its own attempt counter.
    """

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        random_fn: Callable[[], float] = random.random,
    ):
        """Initialize ErrorHandler with retry configuration.

        Args:
            config: RetryConfig with retry budget and backoff profile
            sleep: Awaitable sleep taking seconds (injectable for tests)
            random_fn: Source of uniform [0, 1) values for jitter
        """
        self.config = config or RetryConfig()
        self.sleep = sleep
        self.random_fn = random_fn

    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str = "operation",
    ) -> T:
        """Execute operation, retrying transient failures.

        Non-retryable client errors and non-transport failures propagate
        immediately. Transient failures are retried up to max_retries extra
        times, then the last failure propagates.

        Args:
            operation: Zero-arg coroutine factory, safe to call repeatedly
            operation_name: Name used in log events

        Returns:
            Whatever the operation returns on success
        """
        attempt = 0

        while True:
            try:
                return await operation()
            except Exception as e:
                classification = ErrorClassifier.categorize(e)

                if classification.category not in self.config.retry_on:
                    logger.warning(
                        "operation_failed_not_retryable",
                        operation=operation_name,
                        attempt=attempt + 1,
                        category=classification.category.value,
                        error=str(e),
                    )
                    raise

                if attempt >= self.config.max_retries:
                    logger.error(
                        "operation_retries_exhausted",
                        operation=operation_name,
                        attempts=attempt + 1,
                        category=classification.category.value,
                        error=str(e),
                    )
                    raise

                delay_ms = calculate_backoff_delay(
                    attempt,
                    classification.category,
                    self.config.backoff,
                    retry_after_seconds=classification.retry_after_seconds,
                    random_fn=self.random_fn,
                )

                logger.warning(
                    "retrying_operation",
                    operation=operation_name,
                    attempt=attempt + 1,
                    max_retries=self.config.max_retries,
                    category=classification.category.value,
                    rate_limited=classification.category == ErrorCategory.RATE_LIMITED,
                    delay_ms=round(delay_ms),
                    error=str(e),
                )

                await self.sleep(delay_ms / 1000)
                attempt += 1
