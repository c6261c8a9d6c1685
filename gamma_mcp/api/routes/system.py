"""System routes for the Gamma tools API."""

from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from gamma_mcp import __version__
from gamma_mcp.api.dependencies import get_registry_from_state

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(tools_registry: Dict[str, Any] = Depends(get_registry_from_state)):
    """Health check. Returns service status, version, tool names and categories."""
    categories = sorted({config["type"] for config in tools_registry.values()})

    return {
        "status": "healthy",
        "service": "gamma-mcp-tools",
        "version": __version__,
        "tools": sorted(tools_registry),
        "categories": categories,
        "timestamp": datetime.now().isoformat() + "Z",
    }
