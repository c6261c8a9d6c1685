"""Error classifier for the Gamma client.

Classifies failed attempts into categories for retry decisions.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

import httpx

from gamma_mcp.core.errors import GammaAPIError, SubmissionIncompleteError, TransportError
from gamma_mcp.core.retry_config import ErrorCategory


@dataclass(frozen=True)
class ErrorClassification:
    """Result of classifying one failed attempt."""

    category: ErrorCategory
    retry_after_seconds: Optional[float] = None
    status_code: Optional[int] = None


class ErrorClassifier:
    """Classifies errors into categories for retry decisions.

    Static methods for stateless classification. Ordering matters: 429 is
    checked before the generic 4xx rule since it is the one retryable 4xx.
    """

    @staticmethod
    def categorize(error: BaseException) -> ErrorClassification:
        """Categorize an error raised by a transport attempt.

        Args:
            error: Exception to categorize

        Returns:
            ErrorClassification with category and optional Retry-After hint
        """
        # No response received at all
        if isinstance(error, TransportError):
            if error.timed_out:
                return ErrorClassification(ErrorCategory.TIMEOUT)
            return ErrorClassification(ErrorCategory.SERVER_ERROR)

        if isinstance(error, httpx.TimeoutException):
            return ErrorClassification(ErrorCategory.TIMEOUT)

        if isinstance(error, httpx.TransportError):
            return ErrorClassification(ErrorCategory.SERVER_ERROR)

        if isinstance(error, GammaAPIError):
            return ErrorClassifier.categorize_status(error.status_code, error.headers)

        # Semantic failure, retrying would not help
        if isinstance(error, SubmissionIncompleteError):
            return ErrorClassification(ErrorCategory.NON_RETRYABLE_CLIENT_ERROR)

        return ErrorClassification(ErrorCategory.UNKNOWN_FAILURE)

    @staticmethod
    def categorize_status(
        status_code: Optional[int], headers: Optional[Mapping[str, str]] = None
    ) -> ErrorClassification:
        """Categorize a non-success HTTP response by status code and headers.

        Args:
            status_code: HTTP status code (None if the response carried none)
            headers: Response headers (case-insensitive lookup on lowercased keys)

        Returns:
            ErrorClassification
        """
        if status_code is None:
            return ErrorClassification(ErrorCategory.SERVER_ERROR)

        if status_code == 429:
            return ErrorClassification(
                ErrorCategory.RATE_LIMITED,
                retry_after_seconds=ErrorClassifier.parse_retry_after(headers),
                status_code=status_code,
            )

        if 400 <= status_code < 500:
            return ErrorClassification(
                ErrorCategory.NON_RETRYABLE_CLIENT_ERROR, status_code=status_code
            )

        return ErrorClassification(ErrorCategory.SERVER_ERROR, status_code=status_code)

    @staticmethod
    def parse_retry_after(headers: Optional[Mapping[str, str]]) -> Optional[float]:
        """Read Retry-After as whole seconds. HTTP-date values are ignored."""
        if not headers:
            return None

        value = None
        for key, header_value in headers.items():
            if key.lower() == "retry-after":
                value = header_value
                break

        if value is None:
            return None

        try:
            seconds = int(str(value).strip())
        except ValueError:
            return None

        return float(seconds) if seconds >= 0 else None
