"""Backoff delay calculation.

Pure function, no I/O. Delays are returned in milliseconds.
"""

import random
from typing import Callable, Optional

from gamma_mcp.core.retry_config import BackoffProfile, ErrorCategory


def calculate_backoff_delay(
    attempt: int,
    category: ErrorCategory,
    profile: BackoffProfile,
    retry_after_seconds: Optional[float] = None,
    random_fn: Callable[[], float] = random.random,
) -> float:
    """Compute the delay before the next attempt.

    A server-supplied Retry-After (rate-limit case) overrides the computed
    backoff. Otherwise: min(base * multiplier^attempt + jitter, cap).

    Args:
        attempt: Zero-based attempt index
        category: Classification of the failure being retried
        profile: Backoff constants to use
        retry_after_seconds: Optional server hint in seconds
        random_fn: Source of uniform [0, 1) values for jitter

    Returns:
        Delay in milliseconds
    """
    if retry_after_seconds is not None and category == ErrorCategory.RATE_LIMITED:
        return float(retry_after_seconds) * 1000

    exponential = profile.base_ms * (profile.multiplier**attempt)
    jitter = random_fn() * profile.jitter_ms
    return min(exponential + jitter, profile.cap_ms)
