"""Routes for the Gamma tools API."""

from gamma_mcp.api.routes import system, tools

__all__ = ["system", "tools"]
