"""HTTP surface for the Gamma tools."""

from gamma_mcp.api.app import create_app

__all__ = ["create_app"]
