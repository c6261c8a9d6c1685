"""FastAPI application factory for the Gamma tools."""

from typing import Any, Dict, Optional

from fastapi import FastAPI

from gamma_mcp import __version__
from gamma_mcp.api.middleware import request_id_middleware
from gamma_mcp.api.routes import system
from gamma_mcp.api.routes.tools import register_tool_routes


def create_app(tools_registry: Optional[Dict[str, Any]] = None) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability."""
    app = FastAPI(
        title="gamma-mcp-tools",
        description=(
            "Gamma content generation over HTTP: submit presentations, documents "
            "and social posts, check generation status, and list themes."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware
    app.middleware("http")(request_id_middleware)

    # Register routes
    app.include_router(system.router)

    # Register dynamic tool routes (if tools registry provided)
    if tools_registry:
        register_tool_routes(app, tools_registry)

    # Store tools registry for route access
    app.state.tools_registry = tools_registry or {}

    return app
