"""Status poller.

Turns an asynchronous "submitted" generation into a synchronous outcome by
checking status on a schedule of increasing, jittered delays.
"""

import asyncio
import random
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from gamma_mcp.core.execution.backoff import calculate_backoff_delay
from gamma_mcp.core.execution.error_classifier import ErrorClassifier
from gamma_mcp.core.logging import logger
from gamma_mcp.core.retry_config import ErrorCategory, PollConfig
from gamma_mcp.models.results import StatusSnapshot

POLL_TIMEOUT_MESSAGE = "Timed out waiting for Gamma to produce a shareable URL"


class PollState(str, Enum):
    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class PollOutcome:
    """Terminal result of a polling run."""

    generation_id: str
    state: PollState
    attempts: int
    sleeps: int
    url: Optional[str] = None
    last_snapshot: Optional[StatusSnapshot] = None
    error: Optional[str] = None
    timed_out: bool = False

    @property
    def is_complete(self) -> bool:
        return self.state == PollState.COMPLETE


class StatusPoller:
    """Polls a status-check operation until a URL, a terminal failure, or budget exhaustion.

    A status check that raises is classified: non-retryable client errors
    end the run as failed, transient failures count as a pending attempt,
    and anything unclassifiable propagates unchanged.
    """

    def __init__(
        self,
        check_status: Callable[[str], Awaitable[StatusSnapshot]],
        config: Optional[PollConfig] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        random_fn: Callable[[], float] = random.random,
    ):
        """Initialize poller.

        Args:
            check_status: Coroutine function taking a generation id
            config: PollConfig with attempt budget and backoff profile
            sleep: Awaitable sleep taking seconds (injectable for tests)
            random_fn: Source of uniform [0, 1) values for jitter
        """
        self.check_status = check_status
        self.config = config or PollConfig()
        self.sleep = sleep
        self.random_fn = random_fn

    async def wait_for_url(self, generation_id: str) -> PollOutcome:
        """Poll until the generation has a shareable URL or fails.

        Args:
            generation_id: Identifier returned by the submission

        Returns:
            PollOutcome in state COMPLETE or FAILED
        """
        max_attempts = self.config.max_attempts
        sleeps = 0
        snapshot: Optional[StatusSnapshot] = None

        for attempt in range(max_attempts):
            retry_after: Optional[float] = None
            category = ErrorCategory.SERVER_ERROR

            try:
                snapshot = await self.check_status(generation_id)
            except Exception as e:
                classification = ErrorClassifier.categorize(e)
                category = classification.category

                if category == ErrorCategory.UNKNOWN_FAILURE:
                    raise

                if category == ErrorCategory.NON_RETRYABLE_CLIENT_ERROR:
                    logger.warning(
                        "status_poll_failed",
                        generation_id=generation_id,
                        attempt=attempt + 1,
                        category=category.value,
                        error=str(e),
                    )
                    return PollOutcome(
                        generation_id=generation_id,
                        state=PollState.FAILED,
                        attempts=attempt + 1,
                        sleeps=sleeps,
                        last_snapshot=snapshot,
                        error=str(e),
                    )

                retry_after = classification.retry_after_seconds
                logger.warning(
                    "status_poll_transient_error",
                    generation_id=generation_id,
                    attempt=attempt + 1,
                    category=category.value,
                    error=str(e),
                )
            else:
                logger.info(
                    "status_poll_attempt",
                    generation_id=generation_id,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    status=snapshot.status,
                    has_url=snapshot.is_complete,
                )

                if snapshot.is_complete:
                    return PollOutcome(
                        generation_id=generation_id,
                        state=PollState.COMPLETE,
                        attempts=attempt + 1,
                        sleeps=sleeps,
                        url=snapshot.url,
                        last_snapshot=snapshot,
                    )

                if snapshot.is_terminal_failure:
                    return PollOutcome(
                        generation_id=generation_id,
                        state=PollState.FAILED,
                        attempts=attempt + 1,
                        sleeps=sleeps,
                        last_snapshot=snapshot,
                        error=snapshot.error or f"Generation failed with status: {snapshot.status}",
                    )

            # No wait after the final attempt
            if attempt == max_attempts - 1:
                break

            delay_ms = calculate_backoff_delay(
                attempt,
                category,
                self.config.backoff,
                retry_after_seconds=retry_after,
                random_fn=self.random_fn,
            )
            logger.debug("status_poll_waiting", generation_id=generation_id, delay_ms=round(delay_ms))
            await self.sleep(delay_ms / 1000)
            sleeps += 1

        logger.warning("status_poll_timed_out", generation_id=generation_id, attempts=max_attempts)
        return PollOutcome(
            generation_id=generation_id,
            state=PollState.FAILED,
            attempts=max_attempts,
            sleeps=sleeps,
            last_snapshot=snapshot,
            error=POLL_TIMEOUT_MESSAGE,
            timed_out=True,
        )
