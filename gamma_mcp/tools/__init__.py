"""Tools exposed by the Gamma MCP server."""

from gamma_mcp.tools.registry import TOOL_SPECS, get_tools_registry

__all__ = ["TOOL_SPECS", "get_tools_registry"]
