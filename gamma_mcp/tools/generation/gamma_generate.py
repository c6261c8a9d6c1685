"""Generate tool.

Submits a generation request and returns the handle without waiting.
"""

from typing import Any, Dict

from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import GenerateRequest, GenerationResult
from gamma_mcp.utils.decorators import gamma_tool


@gamma_tool("gamma_generate")
async def gamma_generate(client: GammaClient, request: GenerateRequest) -> Dict[str, Any]:
    """Submit a presentation, document, or social generation.

    Args:
        client: Configured GammaClient
        request: Validated generation request

    Returns:
        Normalized GenerationResult dict (status usually "submitted")
    """
    handle = await client.generate(request)
    return GenerationResult.from_handle(handle).to_dict()
