"""Route factory for the Gamma tools API.

Provides factory pattern for creating FastAPI route handlers.
"""

from gamma_mcp.api.factory.route_factory import RouteFactory

__all__ = ["RouteFactory"]
