"""Status tool."""

from typing import Any, Dict

from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import GenerationResult, StatusRequest
from gamma_mcp.utils.decorators import gamma_tool


@gamma_tool("gamma_get_status")
async def gamma_get_status(client: GammaClient, request: StatusRequest) -> Dict[str, Any]:
    """Check the status of a generation once."""
    snapshot = await client.get_status(request.generation_id)
    return GenerationResult.from_snapshot(snapshot).to_dict()
