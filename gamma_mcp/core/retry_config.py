"""Retry and polling configuration for the Gamma client.

Immutable configuration for submission retries and status polling.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ErrorCategory(str, Enum):
    """Error categories for classification and retry decisions.

    - NON_RETRYABLE_CLIENT_ERROR: Bad request semantics (4xx except 429, missing id)
    - RATE_LIMITED: 429, may carry a server-supplied Retry-After
    - SERVER_ERROR: 5xx, missing status, or no response at all
    - TIMEOUT: Request deadline elapsed before a response arrived
    - UNKNOWN_FAILURE: Not a transport failure (never retried)
    """

    NON_RETRYABLE_CLIENT_ERROR = "non_retryable_client_error"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    TIMEOUT = "timeout"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class BackoffProfile:
    """Shape of an exponential backoff schedule (all values in milliseconds)."""

    base_ms: float
    multiplier: float
    jitter_ms: float = 1000.0
    cap_ms: float = 30000.0


SUBMIT_BACKOFF = BackoffProfile(base_ms=1000.0, multiplier=2.0)
POLL_BACKOFF = BackoffProfile(base_ms=2000.0, multiplier=1.5)


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    max_retries counts extra attempts beyond the first one.
    """

    max_retries: int = 3
    backoff: BackoffProfile = SUBMIT_BACKOFF
    retry_on: List[ErrorCategory] = field(
        default_factory=lambda: [
            ErrorCategory.RATE_LIMITED,
            ErrorCategory.SERVER_ERROR,
            ErrorCategory.TIMEOUT,
        ]
    )


@dataclass(frozen=True)
class PollConfig:
    """Configuration for the status polling loop."""

    max_attempts: int = 20
    backoff: BackoffProfile = POLL_BACKOFF
