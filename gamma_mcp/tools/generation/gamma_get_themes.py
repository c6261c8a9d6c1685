"""Themes tool."""

from typing import Any, Dict, List

from gamma_mcp.integrations.gamma import GammaClient
from gamma_mcp.models import EmptyRequest


async def gamma_get_themes(client: GammaClient, request: EmptyRequest) -> List[Dict[str, Any]]:
    """List available themes (built-in set if the service has none)."""
    themes = await client.list_themes()
    return [theme.model_dump(exclude_none=True) for theme in themes]
