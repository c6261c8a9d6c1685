"""Dynamic tool routes for the Gamma tools API.

Registers tool routes using RouteFactory pattern.
"""

from typing import Any, Dict

from fastapi import FastAPI

from gamma_mcp.api.factory import RouteFactory


def register_tool_routes(app: FastAPI, tools_registry: Dict[str, Any]) -> None:
    """Register dynamic tool routes for all tools in registry.

    Creates routes at /{tool_type}/{tool_name} for each tool.

    Args:
        app: FastAPI application instance
        tools_registry: Dictionary of tool configurations with:
            - fn: Tool function bound to a client
            - type: Tool type (generation)
            - input_model: Pydantic model validating the request body
            - doc: Documentation string
            - tag: OpenAPI tag

    Example:
        >>> register_tool_routes(app, get_tools_registry(client))
        # Creates routes like:
        # POST /generation/gamma_generate
        # POST /generation/gamma_get_status
    """
    factory = RouteFactory(tools_registry)

    for tool_name, tool_config in tools_registry.items():
        app.add_api_route(
            f"/{tool_config['type']}/{tool_name}",
            factory.create_tool_route(tool_name, tool_config),
            methods=["POST"],
            tags=[tool_config["tag"]],
            summary=tool_config["doc"].split("\n\n")[0],
        )
