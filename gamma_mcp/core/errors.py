"""Exception hierarchy for the Gamma client."""

from typing import Mapping, Optional


class GammaError(Exception):
    """Base class for expected operational failures."""


class ConfigurationError(GammaError):
    """Raised when process configuration is unusable (e.g. bad API key)."""


class TransportError(GammaError):
    """No response was received (connection refused, aborted, timed out)."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.message = message
        self.timed_out = timed_out


class GammaAPIError(GammaError):
    """The service answered with a non-success status code."""

    def __init__(
        self,
        status_code: Optional[int],
        message: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        super().__init__(f"API Error: {status_code} - {message or 'Unknown error'}")


class SubmissionIncompleteError(GammaError):
    """Submission succeeded at transport level but returned no generation id."""
