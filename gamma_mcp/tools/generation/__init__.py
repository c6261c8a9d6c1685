"""Generation tools for the Gamma MCP server.

4 tools: generate, generate-and-wait, status check, theme listing.
"""

from gamma_mcp.tools.generation.gamma_generate import gamma_generate
from gamma_mcp.tools.generation.gamma_generate_and_wait import gamma_generate_and_wait
from gamma_mcp.tools.generation.gamma_get_status import gamma_get_status
from gamma_mcp.tools.generation.gamma_get_themes import gamma_get_themes

__all__ = [
    "gamma_generate",
    "gamma_generate_and_wait",
    "gamma_get_status",
    "gamma_get_themes",
]
