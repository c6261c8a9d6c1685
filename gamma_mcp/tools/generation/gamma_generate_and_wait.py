"""Generate-and-wait tool.

Submits a generation, then polls its status until a shareable URL appears,
the generation fails, or the attempt budget runs out.
"""

from typing import Any, Dict

from gamma_mcp.core.polling import PollOutcome
from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import GenerateAndWaitRequest, GenerationHandle, GenerationResult
from gamma_mcp.utils.decorators import gamma_tool


def outcome_to_result(handle: GenerationHandle, outcome: PollOutcome) -> GenerationResult:
    """Collapse a submission handle and poll outcome into one result."""
    snapshot = outcome.last_snapshot
    credits = (snapshot.credits if snapshot else None) or handle.credits

    if outcome.is_complete:
        return GenerationResult(
            generation_id=handle.generation_id,
            status=(snapshot.status if snapshot and snapshot.status else "completed"),
            url=outcome.url,
            gamma_url=snapshot.gamma_url if snapshot else None,
            message=f"Generation ready after {outcome.attempts} status check(s)",
            credits=credits,
        )

    if outcome.timed_out:
        status = "timeout"
    elif snapshot and snapshot.is_terminal_failure:
        status = snapshot.status
    else:
        status = "error"

    return GenerationResult(
        generation_id=handle.generation_id,
        status=status,
        error=outcome.error,
        credits=credits,
    )


@gamma_tool("gamma_generate_and_wait")
async def gamma_generate_and_wait(client: GammaClient, request: GenerateAndWaitRequest) -> Dict[str, Any]:
    """Submit a generation and wait for its shareable URL.

    Args:
        client: Configured GammaClient
        request: Validated generation request, optionally with max_attempts

    Returns:
        Normalized GenerationResult dict: completed with url, or a failure
        (timeout when the polling budget ran out while still pending)
    """
    handle = await client.generate(request)

    # The service occasionally answers synchronously
    if handle.url:
        return GenerationResult.from_handle(handle).to_dict()

    poller = client.status_poller(max_attempts=request.max_attempts)
    outcome = await poller.wait_for_url(handle.generation_id)
    return outcome_to_result(handle, outcome).to_dict()
