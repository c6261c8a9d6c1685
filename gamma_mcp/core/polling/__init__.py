"""Status polling for asynchronous generations."""

from gamma_mcp.core.polling.status_poller import (
    POLL_TIMEOUT_MESSAGE,
    PollOutcome,
    PollState,
    StatusPoller,
)

__all__ = ["POLL_TIMEOUT_MESSAGE", "PollOutcome", "PollState", "StatusPoller"]
